"""Access domain models."""

from .actor import Actor
from .document import (
    Document,
    MultiSiteDocument,
    SingleSiteDocument,
    UnsitedDocument,
    document_from_payload,
)
from .ownership import MultiSite, SingleSite, SiteOwnership, Unsited
from .resource import MultiSiteResource, Resource, SingleSiteResource
from .value import SiteId, UserId, site_ids

__all__ = [
    "Actor",
    "Document",
    "MultiSite",
    "MultiSiteDocument",
    "MultiSiteResource",
    "Resource",
    "SingleSite",
    "SingleSiteDocument",
    "SingleSiteResource",
    "SiteId",
    "SiteOwnership",
    "Unsited",
    "UnsitedDocument",
    "UserId",
    "document_from_payload",
    "site_ids",
]
