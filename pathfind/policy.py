"""Traversal policies: which directed edges may be used and what they cost.

A policy is consulted by the engine for every edge it relaxes. It must be a
pure function of the two endpoints for the duration of a query; sharing one
policy object between concurrent queries is only safe when it keeps no state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from pathfind.types import Cost


@runtime_checkable
class TraversalPolicy(Protocol):
    """Rules for moving between two adjacent nodes."""

    def is_traversable(self, begin: Any, next_node: Any) -> bool:
        """Return True if the directed edge ``begin -> next_node`` may be used."""
        ...

    def cost(self, begin: Any, next_node: Any) -> Cost:
        """Return the non-negative cost of moving from ``begin`` to ``next_node``."""
        ...


@dataclass(frozen=True)
class UniformPolicy:
    """Every edge is traversable and costs the same.

    With the default cost of 1 a uniform-cost search orders nodes by hop count,
    i.e. it behaves like breadth-first search.

    Attributes:
        edge_cost: Cost charged for every edge.
    """

    edge_cost: Cost = 1

    def __post_init__(self) -> None:
        if self.edge_cost < 0:
            raise ValueError(f"edge_cost must be non-negative, got {self.edge_cost}")

    def is_traversable(self, begin: Any, next_node: Any) -> bool:
        return True

    def cost(self, begin: Any, next_node: Any) -> Cost:
        return self.edge_cost


@dataclass(frozen=True)
class FunctionPolicy:
    """Policy assembled from plain callables.

    Either callable may be omitted: a missing ``cost_func`` charges
    ``default_cost`` per edge and a missing ``traversable_func`` allows every
    edge.

    Example:
        >>> walls = {("A", "B")}
        >>> policy = FunctionPolicy(
        ...     cost_func=lambda a, b: abs(a.height - b.height) + 1,
        ...     traversable_func=lambda a, b: (a.name, b.name) not in walls,
        ... )
    """

    cost_func: Optional[Callable[[Any, Any], Cost]] = None
    traversable_func: Optional[Callable[[Any, Any], bool]] = None
    default_cost: Cost = 1

    def is_traversable(self, begin: Any, next_node: Any) -> bool:
        if self.traversable_func is None:
            return True
        return bool(self.traversable_func(begin, next_node))

    def cost(self, begin: Any, next_node: Any) -> Cost:
        if self.cost_func is None:
            return self.default_cost
        return self.cost_func(begin, next_node)


def resolve_policy(
    policy: Optional[TraversalPolicy], default_edge_cost: Cost = 1
) -> TraversalPolicy:
    """Return ``policy``, or a ``UniformPolicy`` when none was supplied."""
    if policy is None:
        return UniformPolicy(default_edge_cost)
    return policy
