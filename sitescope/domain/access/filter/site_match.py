"""Site-match predicate: keep data inside the actor's sites."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sitescope.domain.access.filter.predicate import Decision, Predicate
from sitescope.domain.access.model.ownership import MultiSite, SingleSite
from sitescope.domain.shared.error import (
    AmbiguousOwnershipError,
    IncompatibleResourceError,
)

if TYPE_CHECKING:
    from sitescope.domain.access.model.actor import Actor
    from sitescope.domain.access.model.resource import Resource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteMatch(Predicate):
    """Allows a resource only if the actor belongs to one of its sites.

    - Multi-site resources are allowed when the site sets intersect. A
      resource with no sites is denied to everyone.
    - Single-site resources are allowed when the actor is a member of the
      site. A null site raises AmbiguousOwnershipError.
    - Resources reporting no sites raise IncompatibleResourceError.
    """

    def evaluate(self, actor: "Actor", resource: "Resource") -> Decision:
        ownership = resource.ownership

        if isinstance(ownership, MultiSite):
            return Decision.of(actor.shares_site(ownership.site_ids))

        if isinstance(ownership, SingleSite):
            if ownership.site_id is None:
                logger.warning(
                    "Site match failed: resource=%s has a null site id",
                    type(resource).__name__,
                )
                raise AmbiguousOwnershipError(
                    f"{type(resource).__name__} reported a null site id",
                    code="ambiguous_ownership",
                )
            return Decision.of(actor.has_site(ownership.site_id))

        logger.warning(
            "Site match failed: resource=%s reports no sites",
            type(resource).__name__,
        )
        raise IncompatibleResourceError(
            f"Cannot apply site match to {type(resource).__name__}, which has no sites",
            code="incompatible_resource",
        )


_SITE_MATCH = SiteMatch()


def site_match() -> SiteMatch:
    """Predicate keeping only resources that share a site with the actor."""
    return _SITE_MATCH
