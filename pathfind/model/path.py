"""Search steps and assembled paths.

A ``PathStep`` is one node's position within a single search: the node, the
cumulative cost of the best route found so far, and a link back to the step it
was reached from. Steps form a tree rooted at the origin; several steps may
share the same ancestor.

A ``Path`` is built once from a terminal step by following the ``previous``
links back to the origin and reversing the chain.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Iterator, List, Optional, Set, Tuple

from pathfind.types import Cost


@dataclass(eq=False)
class PathStep:
    """A node discovered by a search, with the best known route to it.

    While the step sits on the frontier the engine may lower ``cost`` and
    re-point ``previous`` when a cheaper route turns up. Once the step has been
    yielded both are final.

    Steps compare by identity: two searches over the same graph produce
    distinct step objects.

    Attributes:
        node: The graph node this step stands for.
        previous: The step this node was reached from; None for the origin.
        cost: Cumulative cost from the origin up to and including this node.
    """

    node: Any
    previous: Optional[PathStep] = field(default=None, repr=False)
    cost: Cost = 0

    @property
    def is_origin(self) -> bool:
        """True for the first step of a search."""
        return self.previous is None

    def chain(self) -> Iterator[PathStep]:
        """Yield this step and its predecessors, ending with the origin."""
        step: Optional[PathStep] = self
        while step is not None:
            yield step
            step = step.previous

    def to_path(self) -> Path:
        """Assemble the path from the origin to this step."""
        return Path.from_step(self)

    def __repr__(self) -> str:
        prev = None if self.previous is None else self.previous.node
        return f"PathStep(node={self.node!r}, cost={self.cost}, previous={prev!r})"


@dataclass(frozen=True)
class Path:
    """An ordered route from an origin to a terminal node.

    Attributes:
        steps: Steps from origin to terminal, in travel order.
        cost: Total cost of the route (the terminal step's cumulative cost).
    """

    steps: Tuple[PathStep, ...]
    cost: Cost
    nodes: Set[Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.steps:
            raise ValueError("A path needs at least one step.")
        object.__setattr__(self, "nodes", {step.node for step in self.steps})

    @classmethod
    def from_step(cls, step: PathStep) -> Path:
        """Build the path ending at ``step``.

        Walks ``previous`` links back to the origin, then reverses the chain.
        Runs in time proportional to the path length.

        Args:
            step: Terminal step of the route.

        Returns:
            Path from the origin to ``step.node`` with ``cost == step.cost``.
        """
        chain: List[PathStep] = list(step.chain())
        chain.reverse()
        return cls(tuple(chain), step.cost)

    def __getitem__(self, idx: int) -> PathStep:
        return self.steps[idx]

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the nodes of the path from origin to terminal."""
        return iter(self.nodes_seq)

    def __len__(self) -> int:
        return len(self.steps)

    def __contains__(self, node: Any) -> bool:
        return node in self.nodes

    @property
    def src_node(self) -> Any:
        """Return the first node in the path (the origin)."""
        return self.steps[0].node

    @property
    def dst_node(self) -> Any:
        """Return the last node in the path (the terminal node)."""
        return self.steps[-1].node

    @cached_property
    def nodes_seq(self) -> Tuple[Any, ...]:
        """Return the nodes of the path in travel order."""
        return tuple(step.node for step in self.steps)

    @cached_property
    def edges_seq(self) -> Tuple[Tuple[Any, Any], ...]:
        """Return the directed ``(begin, next)`` node pairs along the path."""
        nodes = self.nodes_seq
        return tuple(zip(nodes[:-1], nodes[1:]))

    def __lt__(self, other: Any) -> bool:
        """Order paths by cost."""
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    def __eq__(self, other: Any) -> bool:
        """Paths are equal when they visit the same nodes at the same total cost."""
        if not isinstance(other, Path):
            return NotImplemented
        return self.nodes_seq == other.nodes_seq and self.cost == other.cost

    def __hash__(self) -> int:
        return hash((self.nodes_seq, self.cost))

    def __repr__(self) -> str:
        return f"Path({list(self.nodes_seq)!r}, cost={self.cost})"

    def get_sub_path(self, dst_node: Any) -> Path:
        """Return the prefix of this path ending at ``dst_node``.

        The path is truncated at the first occurrence of ``dst_node``. Its cost
        is the cumulative cost already recorded on that step, so nothing has to
        be recomputed.

        Raises:
            ValueError: If ``dst_node`` is not on this path.
        """
        for idx, step in enumerate(self.steps):
            if step.node == dst_node:
                return Path(self.steps[: idx + 1], step.cost)
        raise ValueError(f"Node '{dst_node}' not found in path.")
