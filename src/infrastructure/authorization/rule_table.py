"""Static role -> rule table.

This table is product configuration. It is validated when the module is
imported and never mutated afterwards.

Role summary:
    ADMIN:   manage everything; may not update or transfer an organization
             owned by someone else
    MEMBER:  get users; get and create projects; update and delete own projects
    BILLING: manage billing
"""

from types import MappingProxyType

from src.domain.enums import Action, Resource, Role
from src.infrastructure.authorization.conditions import Condition
from src.infrastructure.authorization.rules import RuleSet, allow, deny

ROLE_RULES: MappingProxyType[Role, RuleSet] = MappingProxyType(
    {
        Role.ADMIN: RuleSet(
            role=Role.ADMIN,
            rules=(
                allow(Action.MANAGE, Resource.ALL),
                deny(
                    {Action.UPDATE, Action.TRANSFER_OWNERSHIP},
                    Resource.ORGANIZATION,
                    when=Condition.NOT_OWNED_BY_SUBJECT,
                ),
            ),
        ),
        Role.MEMBER: RuleSet(
            role=Role.MEMBER,
            rules=(
                allow(Action.GET, Resource.USER),
                allow({Action.GET, Action.CREATE}, Resource.PROJECT),
                allow(
                    {Action.UPDATE, Action.DELETE},
                    Resource.PROJECT,
                    when=Condition.OWNED_BY_SUBJECT,
                ),
            ),
        ),
        Role.BILLING: RuleSet(
            role=Role.BILLING,
            rules=(allow(Action.MANAGE, Resource.BILLING),),
        ),
    }
)
