"""Test suite for the authorization policy engine.

- unit/: Unit tests - domain, evaluator, container and service in isolation
"""
