"""Site ownership variants.

Every resource reports exactly one of these shapes. The shape is fixed when the
resource is built, so predicates branch on a closed set of types instead of
probing resources for methods.
"""

from dataclasses import dataclass

from sitescope.domain.access.model.value import SiteId


@dataclass(frozen=True)
class SiteOwnership:
    """Base for the ways a resource can report the sites it belongs to."""


@dataclass(frozen=True)
class MultiSite(SiteOwnership):
    """Resource shared by zero or more sites."""

    site_ids: frozenset[SiteId]


@dataclass(frozen=True)
class SingleSite(SiteOwnership):
    """Resource owned by one site.

    ``site_id`` may be None. The data model does not say whether that means
    "visible to everyone" or "visible to no one".
    """

    site_id: SiteId | None


@dataclass(frozen=True)
class Unsited(SiteOwnership):
    """Resource that reports no site information at all."""


UNSITED = Unsited()
