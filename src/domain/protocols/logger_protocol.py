"""LoggerProtocol definition for structured logging.

Keeps structured logging backend-agnostic. Implementations MUST emit
structured logs (message + key-value context).

Log Levels:
    - DEBUG: Detailed diagnostic info (cache warm-up, policy construction)
    - INFO: Normal operational events (authorization decisions)
    - WARNING: Degraded behavior
    - ERROR: Operation failed (unknown role, evaluator failure)
    - CRITICAL: System-wide failure

Context Binding:
    Use bind() or with_context() to create request-scoped loggers with
    permanent context (subject id, role) included in every log.

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("authorization_check", action="delete", allowed=False)

    request_logger = logger.bind(subject_id=subject.id, role=role.value)
    request_logger.info("policy_built")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (snake_case; use context, not f-strings).
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
