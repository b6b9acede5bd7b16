"""Resource hierarchy: serializable data items subject to site filtering."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from sitescope.domain.access.model.ownership import (
    UNSITED,
    MultiSite,
    SingleSite,
    SiteOwnership,
)
from sitescope.domain.access.model.value import SiteId


class Resource(BaseModel):
    """Base for all filterable resources.

    A plain Resource reports no site information. Subclass SingleSiteResource
    or MultiSiteResource (never both) to report where the data belongs.
    """

    model_config = ConfigDict(frozen=True)

    site_capability: ClassVar[str | None] = None

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        declared = {
            base.__dict__["site_capability"]
            for base in cls.__mro__
            if base.__dict__.get("site_capability") is not None
        }
        if len(declared) > 1:
            raise TypeError(
                f"{cls.__name__} reports both single-site and multi-site ownership"
            )

    @property
    def ownership(self) -> SiteOwnership:
        return UNSITED


class SingleSiteResource(Resource):
    """Resource owned by exactly one site (most records)."""

    site_capability: ClassVar[str | None] = "single"

    site_id: SiteId | None

    @property
    def ownership(self) -> SingleSite:
        return SingleSite(site_id=self.site_id)


class MultiSiteResource(Resource):
    """Resource visible to several sites at once (shared or aggregate records)."""

    site_capability: ClassVar[str | None] = "multi"

    site_ids: frozenset[SiteId] = frozenset()

    @property
    def ownership(self) -> MultiSite:
        return MultiSite(site_ids=self.site_ids)
