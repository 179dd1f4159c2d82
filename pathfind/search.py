"""Uniform-cost (Dijkstra) search over caller-supplied graphs.

``enumerate_steps`` is the engine behind every query in ``pathfind.queries``.
It settles nodes one at a time in non-decreasing cost order and yields a
``PathStep`` for each, so callers can stop as soon as they have what they need.

Every call builds its own ``_SearchState`` (settled set, frontier, catalogue of
frontier handles). Nothing is shared between calls, so searches may be nested,
interleaved, or abandoned half-way without affecting each other.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, Optional, Set, Tuple

from pathfind.config import SEARCH_CONFIG, SearchConfig
from pathfind.frontier import Frontier, HeapFrontier
from pathfind.logging import get_logger
from pathfind.model.path import PathStep
from pathfind.policy import TraversalPolicy, resolve_policy
from pathfind.types import UNLIMITED, Cost, GraphNode, is_unlimited

logger = get_logger(__name__)

FrontierFactory = Callable[[], Frontier]


class _SearchState:
    """Mutable state of a single search invocation."""

    __slots__ = ("policy", "config", "frontier", "settled", "catalogue")

    def __init__(
        self, policy: TraversalPolicy, config: SearchConfig, frontier: Frontier
    ) -> None:
        self.policy = policy
        self.config = config
        self.frontier = frontier
        # Nodes whose minimal cost is final
        self.settled: Set[Any] = set()
        # Discovered, unsettled node -> (frontier handle, step)
        self.catalogue: Dict[Any, Tuple[Any, PathStep]] = {}

    def discover(self, node: Any, previous: Optional[PathStep], cost: Cost) -> None:
        step = PathStep(node, previous, cost)
        handle = self.frontier.insert(cost, step)
        self.catalogue[node] = (handle, step)

    def settle_next(self) -> PathStep:
        step: PathStep = self.frontier.pop_min()
        del self.catalogue[step.node]
        self.settled.add(step.node)
        return step

    def relax_neighbors(self, current: PathStep) -> None:
        """Offer a route through ``current`` to each of its unsettled neighbors."""
        node = current.node
        policy = self.policy
        for neighbor in node.neighbors():
            if neighbor in self.settled:
                continue
            if not policy.is_traversable(node, neighbor):
                continue

            edge_cost = self.config.validate_cost(
                policy.cost(node, neighbor), node, neighbor
            )
            self.insert_or_update(current, neighbor, current.cost + edge_cost)

    def insert_or_update(self, current: PathStep, neighbor: Any, cost: Cost) -> None:
        entry = self.catalogue.get(neighbor)
        if entry is None:
            self.discover(neighbor, current, cost)
            return

        handle, step = entry
        if cost < step.cost:
            # Cheaper route: rewrite the queued step in place
            step.previous = current
            step.cost = cost
            self.frontier.decrease_priority(handle, cost)


def enumerate_steps(
    origin: GraphNode,
    max_cost: Cost = UNLIMITED,
    policy: Optional[TraversalPolicy] = None,
    *,
    frontier_factory: FrontierFactory = HeapFrontier,
    config: Optional[SearchConfig] = None,
) -> Iterator[PathStep]:
    """Iterate over affordable, traversable nodes in order of cost from ``origin``.

    The origin is always yielded first, with cost 0. Each further step is the
    cheapest node not yet settled; its ``cost`` is the minimal cost from the
    origin and its ``previous`` chain is a cheapest route. Work happens only
    when the next step is requested: stopping early leaves the rest of the
    graph unexplored.

    Args:
        origin: Node to start from.
        max_cost: Largest cumulative cost to yield. Any negative value means
            no limit.
        policy: Traversability and cost rules. Defaults to a ``UniformPolicy``
            with ``config.default_edge_cost`` per edge.
        frontier_factory: Zero-argument callable returning an empty frontier.
        config: Search configuration. Defaults to ``SEARCH_CONFIG``.

    Yields:
        ``PathStep`` objects in non-decreasing cost order.

    Raises:
        ValueError: If the policy reports a negative edge cost.
    """
    cfg = config if config is not None else SEARCH_CONFIG
    state = _SearchState(
        resolve_policy(policy, cfg.default_edge_cost), cfg, frontier_factory()
    )
    unlimited = is_unlimited(max_cost)

    logger.debug(
        f"Starting search from {origin!r} "
        f"(max_cost={'unlimited' if unlimited else max_cost})"
    )
    reason = "stopped early"
    try:
        state.discover(origin, None, 0)
        while len(state.frontier) > 0:
            current = state.settle_next()

            if not unlimited and current.cost > max_cost:
                # Pops are monotonic, so everything left is out of range too
                reason = "cost ceiling reached"
                return

            yield current
            state.relax_neighbors(current)

            if cfg.should_log_progress(len(state.settled)):
                logger.debug(
                    f"Settled {len(state.settled)} nodes, "
                    f"frontier size {len(state.frontier)}, last cost {current.cost}"
                )
        reason = "frontier exhausted"
    finally:
        logger.debug(
            f"Search from {origin!r} finished ({reason}); "
            f"settled {len(state.settled)} nodes"
        )
