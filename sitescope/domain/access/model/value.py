"""Value objects for the access domain."""

from pydantic import RootModel, StrictInt, field_validator


class SiteId(RootModel[StrictInt]):
    """Identifier of an organizational site (a study center)."""

    @field_validator("root")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Invalid site id: {v}")
        return v

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class UserId(RootModel[str]):
    """Stable identifier of a user, as issued by the identity provider."""

    @field_validator("root")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("User id must not be blank")
        return v

    def __str__(self) -> str:
        return self.root

    def __hash__(self) -> int:
        return hash(self.root)


def site_ids(*ids: int) -> frozenset[SiteId]:
    """Build a set of site identifiers from plain integers."""
    return frozenset(SiteId(i) for i in ids)
