"""NetworkX integration.

Wraps the nodes of any NetworkX graph so they satisfy the ``GraphNode``
protocol, and provides a traversal policy that reads costs from edge
attributes.

Example:
    >>> import networkx as nx
    >>> from pathfind import between
    >>> from pathfind.lib.nx import EdgeAttrPolicy, nx_node
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=1)
    >>> G.add_edge("B", "C", cost=2)
    >>> G.add_edge("A", "C", cost=5)
    >>>
    >>> path = between(nx_node(G, "A"), nx_node(G, "C"), policy=EdgeAttrPolicy())
    >>> [n.key for n in path], path.cost
    (['A', 'B', 'C'], 3)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Hashable, List, Optional, Union

from pathfind.model.path import Path
from pathfind.queries import between

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any

AttrDict = Dict[str, Any]


@dataclass(frozen=True, eq=False)
class NxNode:
    """A node of a NetworkX graph seen through the ``GraphNode`` protocol.

    Two ``NxNode`` objects are equal when they wrap the same graph object and
    the same node key. The graph must not change while a search runs.

    Attributes:
        graph: The NetworkX graph that owns the node.
        key: The node key inside ``graph``.
    """

    graph: NxGraph = field(repr=False)
    key: Hashable

    def neighbors(self) -> List[NxNode]:
        """Return successors for directed graphs, neighbors for undirected ones."""
        return [NxNode(self.graph, nbr) for nbr in self.graph.neighbors(self.key)]

    @property
    def attrs(self) -> AttrDict:
        """Return the node attribute dict stored in the graph."""
        return self.graph.nodes[self.key]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, NxNode):
            return NotImplemented
        return self.graph is other.graph and self.key == other.key

    def __hash__(self) -> int:
        return hash((id(self.graph), self.key))

    def __repr__(self) -> str:
        return f"NxNode({self.key!r})"


def nx_node(graph: NxGraph, key: Hashable) -> NxNode:
    """Wrap ``key`` of ``graph`` as a search node.

    Raises:
        KeyError: If ``key`` is not a node of ``graph``.
    """
    if key not in graph:
        raise KeyError(f"Node '{key}' is not in the graph.")
    return NxNode(graph, key)


def path_keys(path: Path) -> List[Hashable]:
    """Return the NetworkX node keys along ``path``."""
    return [node.key for node in path]


@dataclass(frozen=True)
class EdgeAttrPolicy:
    """Traversal policy driven by NetworkX edge attributes.

    For multigraphs the cheapest usable parallel edge is taken, so the cost of
    ``u -> v`` is the minimum ``cost_attr`` among the parallel edges.

    Attributes:
        cost_attr: Edge attribute holding the cost.
        default_cost: Cost used for edges without ``cost_attr``.
        enabled_attr: Optional boolean edge attribute; edges where it is falsy
            are not traversable. Edges without it are usable.
        excluded_nodes: Node keys that may not be entered.
    """

    cost_attr: str = "cost"
    default_cost: float = 1
    enabled_attr: Optional[str] = None
    excluded_nodes: FrozenSet[Hashable] = frozenset()

    def _usable_edges(self, begin: NxNode, next_node: NxNode) -> List[AttrDict]:
        if next_node.key in self.excluded_nodes:
            return []

        graph = begin.graph
        data = graph.get_edge_data(begin.key, next_node.key)
        if data is None:
            return []
        edges = list(data.values()) if graph.is_multigraph() else [data]

        if self.enabled_attr is not None:
            edges = [attr for attr in edges if attr.get(self.enabled_attr, True)]
        return edges

    def is_traversable(self, begin: NxNode, next_node: NxNode) -> bool:
        return bool(self._usable_edges(begin, next_node))

    def cost(self, begin: NxNode, next_node: NxNode) -> float:
        """Return the cheapest usable edge cost from ``begin`` to ``next_node``.

        Raises:
            KeyError: If no usable edge connects the two nodes.
        """
        edges = self._usable_edges(begin, next_node)
        if not edges:
            raise KeyError(
                f"No usable edge from '{begin.key}' to '{next_node.key}'."
            )
        return min(attr.get(self.cost_attr, self.default_cost) for attr in edges)


def shortest_path(
    graph: NxGraph,
    source: Hashable,
    target: Hashable,
    max_cost: float = -1,
    policy: Optional[EdgeAttrPolicy] = None,
) -> Optional[Path]:
    """Cheapest path between two node keys of a NetworkX graph.

    Args:
        graph: Any NetworkX graph.
        source: Source node key.
        target: Target node key.
        max_cost: Largest acceptable cost; negative means no limit.
        policy: Edge attribute policy; defaults to ``EdgeAttrPolicy()``.

    Returns:
        The cheapest path, or None if ``target`` is unreachable within
        ``max_cost``.

    Raises:
        KeyError: If ``source`` or ``target`` is not in the graph.
    """
    return between(
        nx_node(graph, source),
        nx_node(graph, target),
        max_cost,
        policy if policy is not None else EdgeAttrPolicy(),
    )
