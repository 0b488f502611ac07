"""Domain protocols (ports).

Infrastructure adapters implement these protocols structurally (PEP 544).
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.policy_protocol import PolicyProtocol

__all__ = [
    "LoggerProtocol",
    "PolicyProtocol",
]
