"""Actor: the requesting principal and its site memberships."""

from collections.abc import Iterable
from dataclasses import dataclass

import pydantic

from sitescope.domain.access.model.value import SiteId, UserId
from sitescope.domain.shared.error import ValidationError


@dataclass(frozen=True)
class Actor:
    """The authenticated user whose access is being checked.

    Built upstream by the identity provider and immutable afterwards, so a
    filtering pass always sees one consistent snapshot of the memberships.
    Plain integer site ids are converted to SiteId on construction.
    """

    user_id: UserId
    site_ids: frozenset[SiteId]

    def __post_init__(self) -> None:
        try:
            normalized = frozenset(SiteId.model_validate(s) for s in self.site_ids)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid actor site id: {e}", field="site_ids") from e
        object.__setattr__(self, "site_ids", normalized)

    def has_site(self, site_id: SiteId) -> bool:
        """Check if the actor is a member of the given site."""
        return site_id in self.site_ids

    def shares_site(self, site_ids: Iterable[SiteId]) -> bool:
        """Check if the actor is a member of at least one of the given sites."""
        return any(self.has_site(s) for s in site_ids)
