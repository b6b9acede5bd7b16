"""Composable filter predicates.

A predicate is a stateless allow/deny rule evaluated per (actor, resource)
pair. Denial is an ordinary Decision. Cases a predicate cannot decide are
raised as ResourceFilterError and pass unchanged through every combinator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitescope.domain.access.model.actor import Actor
    from sitescope.domain.access.model.resource import Resource


class Decision(StrEnum):
    """Outcome of evaluating a predicate."""

    ALLOW = "allow"
    DENY = "deny"

    @property
    def allowed(self) -> bool:
        return self is Decision.ALLOW

    @classmethod
    def of(cls, allowed: bool) -> Decision:
        return cls.ALLOW if allowed else cls.DENY


class Predicate(ABC):
    """Base class for filter predicates.

    New filter kinds subclass Predicate and implement evaluate(). Nothing else
    needs to change for a pipeline to use them.
    """

    @abstractmethod
    def evaluate(self, actor: "Actor", resource: "Resource") -> Decision:
        """Decide whether the actor may access the resource.

        Raises:
            ResourceFilterError: If no decision can be made for this resource.
        """
        ...

    def __and__(self, other: Predicate) -> AllOf:
        return AllOf(predicates=(self, other))

    def __or__(self, other: Predicate) -> AnyOf:
        return AnyOf(predicates=(self, other))

    def __invert__(self) -> Not:
        return Not(predicate=self)


@dataclass(frozen=True)
class AllOf(Predicate):
    """Allows only if every sub-predicate allows. Stops at the first deny."""

    predicates: tuple[Predicate, ...]

    def evaluate(self, actor: "Actor", resource: "Resource") -> Decision:
        for predicate in self.predicates:
            if not predicate.evaluate(actor, resource).allowed:
                return Decision.DENY
        return Decision.ALLOW

    def __and__(self, other: Predicate) -> AllOf:
        return AllOf(predicates=(*self.predicates, other))


@dataclass(frozen=True)
class AnyOf(Predicate):
    """Allows if at least one sub-predicate allows. Stops at the first allow."""

    predicates: tuple[Predicate, ...]

    def evaluate(self, actor: "Actor", resource: "Resource") -> Decision:
        for predicate in self.predicates:
            if predicate.evaluate(actor, resource).allowed:
                return Decision.ALLOW
        return Decision.DENY

    def __or__(self, other: Predicate) -> AnyOf:
        return AnyOf(predicates=(*self.predicates, other))


@dataclass(frozen=True)
class Not(Predicate):
    """Inverts another predicate's decision."""

    predicate: Predicate

    def evaluate(self, actor: "Actor", resource: "Resource") -> Decision:
        return Decision.of(not self.predicate.evaluate(actor, resource).allowed)


def all_of(*predicates: Predicate) -> AllOf:
    """Factory: predicate requiring every given predicate to allow."""
    return AllOf(predicates=tuple(predicates))


def any_of(*predicates: Predicate) -> AnyOf:
    """Factory: predicate requiring at least one given predicate to allow."""
    return AnyOf(predicates=tuple(predicates))
