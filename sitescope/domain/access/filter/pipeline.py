"""FilterPipeline: applies predicates across a resource collection."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, TypeVar

import logfire

if TYPE_CHECKING:
    from sitescope.domain.access.filter.predicate import Predicate
    from sitescope.domain.access.model.actor import Actor
    from sitescope.domain.access.model.resource import Resource

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="Resource")


class FilterPipeline:
    """Ordered set of predicates, all of which must allow a resource.

    Predicates run in insertion order and evaluation of a resource stops at the
    first deny. Errors raised by a predicate abort the whole pass; the offending
    resource is never silently dropped.

    A pipeline with no predicates lets every resource through. Callers that
    want any restriction must register at least one predicate.
    """

    def __init__(self, predicates: Iterable["Predicate"], *, audit: bool = False) -> None:
        self._predicates = tuple(predicates)
        self._audit = audit

    @property
    def predicates(self) -> tuple["Predicate", ...]:
        return self._predicates

    def allows(self, actor: "Actor", resource: "Resource") -> bool:
        """Return True if every predicate allows the resource."""
        return all(p.evaluate(actor, resource).allowed for p in self._predicates)

    def filter(self, actor: "Actor", resources: Sequence[R]) -> list[R]:
        """Return the resources the actor may access, in their original order.

        The input sequence is left untouched; a new list is returned.

        Raises:
            ResourceFilterError: If any predicate cannot decide for a resource.
        """
        if not resources:
            return []

        with logfire.span(
            "FilterPipeline.filter",
            user_id=str(actor.user_id),
            resource_count=len(resources),
        ):
            kept: list[R] = []
            for index, resource in enumerate(resources):
                if self.allows(actor, resource):
                    kept.append(resource)
                else:
                    self._log_denied(actor, index, resource)

        logger.debug(
            "Filtered resources: user=%s kept=%d/%d",
            actor.user_id,
            len(kept),
            len(resources),
        )
        return kept

    def _log_denied(self, actor: "Actor", index: int, resource: "Resource") -> None:
        level = logging.INFO if self._audit else logging.DEBUG
        logger.log(
            level,
            "Resource denied: user=%s index=%d resource=%s",
            actor.user_id,
            index,
            type(resource).__name__,
        )


def filter_resources(
    actor: "Actor",
    resources: Sequence[R],
    predicates: Iterable["Predicate"],
) -> list[R]:
    """Keep the resources every predicate allows for the actor."""
    return FilterPipeline(predicates).filter(actor, resources)
