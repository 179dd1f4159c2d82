"""pathfind: uniform-cost search over caller-defined graphs.

pathfind finds cheapest paths, reachable areas and range membership on any
graph whose nodes can list their neighbors. Traversability and edge costs are
supplied per query by a traversal policy, so the same graph can be searched
under different movement rules.

Primary API:
    enumerate_steps() - Lazily settle nodes in order of cost from an origin
    between() / between_where() - Cheapest path to a node or to a predicate match
    to_area() - Cheapest path to any node of a collection
    area() - All nodes within a cost budget
    in_range() - Whether a node lies within a cost budget
    Path, PathStep - Search results

Example:
    from pathfind import FunctionPolicy, between

    class Cell:
        def __init__(self, name):
            self.name = name
            self.adjacent = []

        def neighbors(self):
            return self.adjacent

    a, b, c = Cell("a"), Cell("b"), Cell("c")
    a.adjacent, b.adjacent = [b, c], [c]

    detour = FunctionPolicy(lambda u, v: 5 if (u, v) == (a, c) else 1)
    path = between(a, c, policy=detour)
    # path.nodes_seq == (a, b, c), path.cost == 2
"""

from __future__ import annotations

from pathfind import logging
from pathfind._version import __version__
from pathfind.config import SEARCH_CONFIG, SearchConfig
from pathfind.frontier import Frontier, FrontierHandle, HeapFrontier
from pathfind.lib.nx import EdgeAttrPolicy, NxNode, nx_node
from pathfind.model.path import Path, PathStep
from pathfind.policy import FunctionPolicy, TraversalPolicy, UniformPolicy
from pathfind.queries import (
    area,
    between,
    between_where,
    in_range,
    reachable_costs,
    to_area,
)
from pathfind.search import enumerate_steps
from pathfind.types import UNLIMITED, Cost, GraphNode

__all__ = [
    # Version
    "__version__",
    # Engine
    "enumerate_steps",
    # Queries
    "area",
    "between",
    "between_where",
    "in_range",
    "reachable_costs",
    "to_area",
    # Model
    "Path",
    "PathStep",
    # Policies
    "TraversalPolicy",
    "UniformPolicy",
    "FunctionPolicy",
    # Frontier
    "Frontier",
    "FrontierHandle",
    "HeapFrontier",
    # Types and configuration
    "Cost",
    "GraphNode",
    "UNLIMITED",
    "SearchConfig",
    "SEARCH_CONFIG",
    # Library integrations (NetworkX)
    "EdgeAttrPolicy",
    "NxNode",
    "nx_node",
    # Utilities
    "logging",
]
