"""Application service factories."""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.application.services.authorization_service import AuthorizationService


@lru_cache()
def get_authorization_service() -> "AuthorizationService":
    """Get the authorization service singleton (app-scoped).

    Returns:
        AuthorizationService wired with the application logger.
    """
    from src.application.services.authorization_service import AuthorizationService
    from src.core.container.infrastructure import get_logger

    return AuthorizationService(logger=get_logger())
