"""Tests for the resource hierarchy and its ownership variants."""

import pydantic
import pytest

from sitescope.domain.access.model.ownership import MultiSite, SingleSite, Unsited
from sitescope.domain.access.model.resource import (
    MultiSiteResource,
    Resource,
    SingleSiteResource,
)
from sitescope.domain.access.model.value import SiteId, site_ids


class _Visit(SingleSiteResource):
    label: str = "visit"


class _SharedDataset(MultiSiteResource):
    name: str = "dataset"


class _Note(Resource):
    text: str = ""


class TestOwnership:
    def test_single_site_resource(self) -> None:
        visit = _Visit(site_id=SiteId(3))
        assert visit.ownership == SingleSite(site_id=SiteId(3))

    def test_single_site_resource_with_null_site(self) -> None:
        visit = _Visit(site_id=None)
        assert visit.ownership == SingleSite(site_id=None)

    def test_multi_site_resource(self) -> None:
        dataset = _SharedDataset(site_ids=site_ids(1, 2))
        assert dataset.ownership == MultiSite(site_ids=site_ids(1, 2))

    def test_multi_site_resource_defaults_to_no_sites(self) -> None:
        assert _SharedDataset().ownership == MultiSite(site_ids=frozenset())

    def test_plain_resource_is_unsited(self) -> None:
        assert isinstance(_Note().ownership, Unsited)


class TestCapabilityInvariant:
    def test_class_with_both_capabilities_rejected(self) -> None:
        with pytest.raises(TypeError, match="both single-site and multi-site"):

            class _Both(SingleSiteResource, MultiSiteResource):
                pass

    def test_subclass_of_one_capability_allowed(self) -> None:
        class _FollowUp(_Visit):
            pass

        assert _FollowUp(site_id=SiteId(1)).ownership == SingleSite(site_id=SiteId(1))


class TestSerializable:
    def test_resources_are_frozen(self) -> None:
        visit = _Visit(site_id=SiteId(1))
        with pytest.raises(pydantic.ValidationError):
            visit.site_id = SiteId(2)  # type: ignore[misc]

    def test_json_dump(self) -> None:
        visit = _Visit(site_id=SiteId(4), label="baseline")
        assert visit.model_dump(mode="json") == {"site_id": 4, "label": "baseline"}

    def test_site_ids_validated_from_ints(self) -> None:
        dataset = _SharedDataset.model_validate({"site_ids": [1, 2, 2]})
        assert dataset.site_ids == site_ids(1, 2)
