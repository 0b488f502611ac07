"""Application layer - Use cases and orchestration.

Orchestrates domain logic but contains no business rules:
- services/: Authorization service (logged checks, Result-based checks)
"""
