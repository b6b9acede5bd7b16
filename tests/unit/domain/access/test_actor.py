"""Tests for Actor site membership checks."""

import dataclasses

import pytest

from sitescope.domain.access.filter.pipeline import filter_resources
from sitescope.domain.access.filter.site_match import site_match
from sitescope.domain.access.model.actor import Actor
from sitescope.domain.access.model.document import document_from_payload
from sitescope.domain.access.model.value import SiteId, UserId, site_ids
from sitescope.domain.shared.error import ValidationError


def _make_actor(*sites: int) -> Actor:
    return Actor(user_id=UserId("alice"), site_ids=site_ids(*sites))


class TestHasSite:
    def test_member_site(self) -> None:
        assert _make_actor(1, 2).has_site(SiteId(2)) is True

    def test_non_member_site(self) -> None:
        assert _make_actor(1, 2).has_site(SiteId(3)) is False

    def test_actor_without_sites(self) -> None:
        assert _make_actor().has_site(SiteId(1)) is False


class TestSharesSite:
    def test_overlapping_sites(self) -> None:
        assert _make_actor(1, 2).shares_site(site_ids(2, 4)) is True

    def test_disjoint_sites(self) -> None:
        assert _make_actor(1, 2).shares_site(site_ids(3, 4)) is False

    def test_empty_sites(self) -> None:
        assert _make_actor(1, 2).shares_site(frozenset()) is False


class TestImmutability:
    def test_memberships_cannot_be_reassigned(self) -> None:
        actor = _make_actor(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            actor.site_ids = site_ids(1, 2)  # type: ignore[misc]


class TestValues:
    def test_site_ids_are_unique(self) -> None:
        assert site_ids(1, 1, 2) == frozenset({SiteId(1), SiteId(2)})

    def test_negative_site_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid site id"):
            SiteId(-1)

    def test_blank_user_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be blank"):
            UserId("  ")

    def test_site_id_str(self) -> None:
        assert str(SiteId(7)) == "7"


class TestSiteNormalization:
    def test_plain_ints_become_site_ids(self) -> None:
        actor = Actor(user_id=UserId("alice"), site_ids=frozenset({1, 2}))  # type: ignore[arg-type]
        assert actor.site_ids == site_ids(1, 2)
        assert actor.has_site(SiteId(1)) is True

    def test_list_is_frozen(self) -> None:
        actor = Actor(user_id=UserId("alice"), site_ids=[1, 1, 2])  # type: ignore[arg-type]
        assert isinstance(actor.site_ids, frozenset)
        assert actor.site_ids == site_ids(1, 2)

    def test_int_built_actor_sees_matching_documents(self) -> None:
        actor = Actor(user_id=UserId("alice"), site_ids=frozenset({1, 2}))  # type: ignore[arg-type]
        docs = [document_from_payload({"site_id": 1}), document_from_payload({"site_id": 3})]
        assert filter_resources(actor, docs, [site_match()]) == [docs[0]]

    def test_invalid_member_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Invalid actor site id") as exc_info:
            Actor(user_id=UserId("alice"), site_ids=frozenset({True}))  # type: ignore[arg-type]
        assert exc_info.value.field == "site_ids"
