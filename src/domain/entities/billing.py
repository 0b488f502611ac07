"""Billing domain entity."""

from dataclasses import dataclass
from typing import ClassVar

from src.domain.enums import Resource


@dataclass(frozen=True, slots=True, kw_only=True)
class Billing:
    """Billing details of an organization.

    Attributes:
        organization_id: Organization being billed.
    """

    kind: ClassVar[Resource] = Resource.BILLING

    organization_id: str | None = None
