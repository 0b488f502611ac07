"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- authorization/: Casbin policy engine (PolicyProtocol)
- logging/: structlog adapters (LoggerProtocol)

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
