"""Shared type aliases and node protocol for the search engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, Protocol, Union

if TYPE_CHECKING:
    from pathfind.model.path import PathStep

#: Numeric cost of traversing an edge or a route (distance, moves, time, ...).
Cost = Union[int, float]

#: Ceiling value meaning "no cost limit". Any negative ceiling behaves the same.
UNLIMITED: Cost = -1


class GraphNode(Protocol):
    """A vertex in the caller's graph.

    The engine relies only on identity (``__eq__``/``__hash__``, which must stay
    stable for the duration of a search) and on ``neighbors()``. Nodes carry no
    cost or position of their own.
    """

    def neighbors(self) -> Iterable[GraphNode]:
        """Return the nodes adjacent to this one, in any order."""
        ...


#: Acceptance test applied to each step yielded by a search.
StepPredicate = Callable[["PathStep"], bool]


def is_unlimited(max_cost: Cost) -> bool:
    """Return True if ``max_cost`` is the "no ceiling" sentinel."""
    return max_cost < 0
