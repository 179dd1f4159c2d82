"""Path, area and range queries built on ``enumerate_steps``.

Every function here runs one lazy search and stops pulling steps as soon as it
has its answer. Because steps arrive in non-decreasing cost order, the first
step that satisfies a target test is a cheapest one.

"Not found" is never an exception: path queries return None and ``in_range``
returns False.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from pathfind.config import SearchConfig
from pathfind.model.path import Path, PathStep
from pathfind.policy import TraversalPolicy
from pathfind.search import enumerate_steps
from pathfind.types import UNLIMITED, Cost, GraphNode, StepPredicate


def area(
    origin: GraphNode,
    max_cost: Cost,
    policy: Optional[TraversalPolicy] = None,
    *,
    config: Optional[SearchConfig] = None,
) -> List[PathStep]:
    """Find all traversable nodes within ``max_cost`` of ``origin``.

    Args:
        origin: Node to measure from. Always included, at cost 0.
        max_cost: Largest cost to include; negative means no limit.
        policy: Traversability and cost rules.
        config: Optional search configuration.

    Returns:
        Steps in settlement order, each carrying its minimal cost and a
        predecessor chain (``step.to_path()`` turns any of them into a Path).
    """
    return list(enumerate_steps(origin, max_cost, policy, config=config))


def between(
    origin: GraphNode,
    destination: GraphNode,
    max_cost: Cost = UNLIMITED,
    policy: Optional[TraversalPolicy] = None,
    *,
    config: Optional[SearchConfig] = None,
) -> Optional[Path]:
    """Find the cheapest traversable path from ``origin`` to ``destination``.

    Args:
        origin: First node of the path.
        destination: Last node of the path.
        max_cost: Largest acceptable path cost; negative means no limit.
        policy: Traversability and cost rules.
        config: Optional search configuration.

    Returns:
        The cheapest path, or None if no path exists within ``max_cost``.
        ``between(a, a)`` is the single-node path of cost 0.
    """
    return between_where(
        origin,
        lambda step: step.node == destination,
        max_cost,
        policy,
        config=config,
    )


def between_where(
    origin: GraphNode,
    is_target: StepPredicate,
    max_cost: Cost = UNLIMITED,
    policy: Optional[TraversalPolicy] = None,
    *,
    config: Optional[SearchConfig] = None,
) -> Optional[Path]:
    """Find the cheapest path from ``origin`` to the first step accepted by ``is_target``.

    Args:
        origin: First node of the path.
        is_target: Predicate over ``PathStep``; the search stops at the first
            step for which it returns True.
        max_cost: Largest acceptable path cost; negative means no limit.
        policy: Traversability and cost rules.
        config: Optional search configuration.

    Returns:
        Path to the cheapest accepted step, or None if the search runs out of
        affordable nodes first.
    """
    for step in enumerate_steps(origin, max_cost, policy, config=config):
        if is_target(step):
            return step.to_path()
    return None


def to_area(
    origin: GraphNode,
    targets: Iterable[GraphNode],
    policy: Optional[TraversalPolicy] = None,
    *,
    config: Optional[SearchConfig] = None,
) -> Optional[Path]:
    """Find the cheapest path from ``origin`` to any node in ``targets``.

    The search has no cost limit and stops at the first target reached.

    Returns:
        Path to the cheapest reachable target, or None if none is reachable.
    """
    target_set = frozenset(targets)
    if not target_set:
        return None
    return between_where(
        origin,
        lambda step: step.node in target_set,
        UNLIMITED,
        policy,
        config=config,
    )


def in_range(
    origin: GraphNode,
    target: GraphNode,
    max_cost: Cost,
    policy: Optional[TraversalPolicy] = None,
    *,
    config: Optional[SearchConfig] = None,
) -> bool:
    """Check whether ``target`` can be reached from ``origin`` within ``max_cost``.

    A negative ``max_cost`` never admits anything: the search itself runs
    unbounded, but the final cost check fails.
    """
    path = between(origin, target, max_cost, policy, config=config)
    if path is None:
        return False
    # The search already honors the ceiling; this keeps the boundary explicit
    return path.cost <= max_cost


def reachable_costs(
    origin: GraphNode,
    max_cost: Cost = UNLIMITED,
    policy: Optional[TraversalPolicy] = None,
    *,
    config: Optional[SearchConfig] = None,
) -> Dict[Any, Cost]:
    """Map every node reachable within ``max_cost`` to its minimal cost.

    Keys are inserted in settlement order, so iteration follows increasing cost.
    """
    return {
        step.node: step.cost
        for step in enumerate_steps(origin, max_cost, policy, config=config)
    }
