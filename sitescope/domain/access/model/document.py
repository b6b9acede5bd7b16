"""Documents: resources adapted from raw serializable mappings.

Hosts that load resources as plain JSON/YAML mappings turn them into typed
resources here, so the ownership shape is decided once at load time:

- ``site_ids`` key: MultiSiteDocument
- ``site_id`` key: SingleSiteDocument (a null value is kept as-is)
- neither key: UnsitedDocument
"""

from collections.abc import Mapping
from typing import Any

import pydantic
from pydantic import Field

from sitescope.domain.access.model.resource import (
    MultiSiteResource,
    Resource,
    SingleSiteResource,
)
from sitescope.domain.shared.error import ValidationError

SITE_ID_KEY = "site_id"
SITE_IDS_KEY = "site_ids"


class Document(Resource):
    """A resource carrying its original mapping as payload."""

    payload: dict[Any, Any] = Field(default_factory=dict)

    def to_payload(self) -> dict[Any, Any]:
        """Return a copy of the original mapping."""
        return dict(self.payload)


class UnsitedDocument(Document):
    """Document that declares no site."""


class SingleSiteDocument(Document, SingleSiteResource):
    """Document owned by one site."""


class MultiSiteDocument(Document, MultiSiteResource):
    """Document shared by several sites."""


def document_from_payload(payload: Mapping[str, Any]) -> Document:
    """Adapt a raw mapping into a typed document.

    Raises:
        ValidationError: If the mapping declares both site keys or a site
            value is malformed.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError(
            f"Resource must be a mapping, got {type(payload).__name__}"
        )

    data = dict(payload)
    has_single = SITE_ID_KEY in data
    has_multi = SITE_IDS_KEY in data

    if has_single and has_multi:
        raise ValidationError(
            f"Resource declares both '{SITE_ID_KEY}' and '{SITE_IDS_KEY}'",
            field=SITE_IDS_KEY,
        )

    try:
        if has_multi:
            if data[SITE_IDS_KEY] is None:
                raise ValidationError(
                    f"'{SITE_IDS_KEY}' must be a list, got null", field=SITE_IDS_KEY
                )
            return MultiSiteDocument(payload=data, site_ids=data[SITE_IDS_KEY])
        if has_single:
            return SingleSiteDocument(payload=data, site_id=data[SITE_ID_KEY])
        return UnsitedDocument(payload=data)
    except pydantic.ValidationError as e:
        field = _error_field(e)
        raise ValidationError(f"Invalid '{field}' value: {e}", field=field) from e


def _error_field(error: pydantic.ValidationError) -> str:
    """Name the top-level field of the first validation failure."""
    loc = error.errors()[0]["loc"]
    return str(loc[0]) if loc else "payload"


def documents_from_payloads(payloads: list[Any]) -> list[Document]:
    """Adapt a list of raw mappings, keeping their order."""
    return [document_from_payload(p) for p in payloads]
