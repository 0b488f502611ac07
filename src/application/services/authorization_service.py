"""Authorization service.

Wraps policy evaluation for request handlers: builds the subject's policy,
logs every decision, and offers a railway-oriented variant that returns the
decision as a Result.

Architecture:
    - Application service (orchestration only, no rules)
    - Policy construction injected as a factory (container's build_policy)
    - Deny is a value: ``check`` returns False, ``require`` returns Failure
    - UnknownRoleError is the only exception and is re-raised after logging

Usage:
    service = AuthorizationService(logger=logger, policy_factory=build_policy)

    if not service.check(subject, Action.GET, Resource.USER):
        ...

    match service.require(subject, Action.DELETE, project):
        case Success():
            ...
        case Failure(error=error):
            ...
"""

from collections.abc import Callable

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError
from src.core.result import Failure, Result, Success
from src.domain.entities import ResourceEntity, Subject
from src.domain.enums import Action, Resource
from src.domain.errors import UnknownRoleError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.policy_protocol import PolicyProtocol
from src.domain.validators import resolve_action, resolve_resource

type PolicyFactory = Callable[[Subject], PolicyProtocol]


def _describe(
    action: Action | str,
    resource: Resource | str | ResourceEntity | None,
) -> tuple[str, str]:
    """Return printable (resource, action) names for logs and errors."""
    resolved_action = resolve_action(action)
    kind, _ = resolve_resource(resource)
    action_name = resolved_action.value if resolved_action else str(action)
    if kind is not None:
        resource_name = kind.value
    elif isinstance(resource, str):
        resource_name = resource
    else:
        resource_name = type(resource).__name__
    return resource_name, action_name


class AuthorizationService:
    """Service for authorization decisions with audit logging.

    Dependencies (injected via constructor):
        - LoggerProtocol: Structured logger
        - PolicyFactory: Builds a policy for a subject
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        policy_factory: PolicyFactory | None = None,
    ) -> None:
        """Initialize authorization service.

        Args:
            logger: Structured logger.
            policy_factory: Subject -> policy factory. Defaults to the
                container's cached ``build_policy``.
        """
        if policy_factory is None:
            from src.core.container.authorization import build_policy

            policy_factory = build_policy
        self._logger = logger
        self._policy_factory = policy_factory

    def policy_for(self, subject: Subject) -> PolicyProtocol:
        """Build the policy for a subject.

        Args:
            subject: Authenticated subject.

        Returns:
            Policy bound to the subject.

        Raises:
            UnknownRoleError: If the subject's role is not a known role.
        """
        try:
            policy = self._policy_factory(subject)
        except UnknownRoleError as e:
            self._logger.error(
                "unknown_role",
                error=e,
                role=str(e.role),
                subject_id=subject.id,
            )
            raise

        self._logger.debug(
            "policy_built",
            role=str(getattr(subject.role, "value", subject.role)),
            subject_id=subject.id,
        )
        return policy

    def check(
        self,
        subject: Subject,
        action: Action | str,
        resource: Resource | str | ResourceEntity | None,
    ) -> bool:
        """Evaluate and log a single permission check.

        Args:
            subject: Authenticated subject.
            action: Requested action.
            resource: Resource kind or instance.

        Returns:
            bool: True if allowed, False if denied.

        Raises:
            UnknownRoleError: If the subject's role is not a known role.
        """
        policy = self.policy_for(subject)
        allowed = policy.can(action, resource)

        resource_name, action_name = _describe(action, resource)
        self._logger.info(
            "authorization_check",
            role=str(getattr(subject.role, "value", subject.role)),
            subject_id=subject.id,
            resource=resource_name,
            action=action_name,
            instance=not isinstance(resource, str) and resource is not None,
            allowed=allowed,
        )
        return allowed

    def require(
        self,
        subject: Subject,
        action: Action | str,
        resource: Resource | str | ResourceEntity | None,
    ) -> Result[None, AuthorizationError]:
        """Evaluate a permission check as a Result.

        Args:
            subject: Authenticated subject.
            action: Requested action.
            resource: Resource kind or instance.

        Returns:
            Success(None): Action allowed.
            Failure(AuthorizationError): Action denied. The code tells an
                unknown action or resource apart from a plain denial.

        Raises:
            UnknownRoleError: If the subject's role is not a known role.
        """
        if self.check(subject, action, resource):
            return Success(value=None)

        resource_name, action_name = _describe(action, resource)
        if resolve_action(action) is None:
            code = ErrorCode.UNKNOWN_ACTION
            message = f"Unknown action: {action_name}"
        elif resolve_resource(resource)[0] is None:
            code = ErrorCode.UNKNOWN_RESOURCE
            message = f"Unknown resource: {resource_name}"
        else:
            code = ErrorCode.PERMISSION_DENIED
            message = "Permission denied"

        return Failure(
            error=AuthorizationError(
                code=code,
                message=message,
                required_permission=f"{resource_name}:{action_name}",
            )
        )
