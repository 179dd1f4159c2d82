"""Tests for PathStep and Path."""

import pytest

from pathfind.model.path import Path, PathStep


def _chain(*pairs):
    """Build a linked chain of steps from (node, cost) pairs; return the last."""
    step = None
    for node, cost in pairs:
        step = PathStep(node, step, cost)
    return step


def test_step_defaults_to_origin():
    step = PathStep("A")
    assert step.previous is None
    assert step.cost == 0
    assert step.is_origin


def test_step_chain_walks_back_to_origin():
    terminal = _chain(("A", 0), ("B", 1), ("C", 3))
    assert [s.node for s in terminal.chain()] == ["C", "B", "A"]
    assert not terminal.is_origin


def test_steps_compare_by_identity():
    assert PathStep("A", None, 0) != PathStep("A", None, 0)
    step = PathStep("A")
    assert step == step
    assert len({PathStep("A"), PathStep("A")}) == 2


def test_step_repr_names_previous_node():
    terminal = _chain(("A", 0), ("B", 2))
    assert repr(terminal) == "PathStep(node='B', cost=2, previous='A')"


def test_from_step_reverses_chain_and_takes_terminal_cost():
    terminal = _chain(("A", 0), ("B", 1), ("C", 3))
    path = Path.from_step(terminal)

    assert path.nodes_seq == ("A", "B", "C")
    assert path.cost == 3
    assert path.src_node == "A"
    assert path.dst_node == "C"
    assert path[-1] is terminal
    assert path[0].is_origin


def test_to_path_matches_from_step():
    terminal = _chain(("A", 0), ("B", 1))
    assert terminal.to_path() == Path.from_step(terminal)


def test_single_step_path():
    path = PathStep("A").to_path()
    assert len(path) == 1
    assert path.cost == 0
    assert path.nodes_seq == ("A",)
    assert path.edges_seq == ()


def test_empty_path_rejected():
    with pytest.raises(ValueError):
        Path((), 0)


def test_iteration_yields_nodes_and_membership():
    path = _chain(("A", 0), ("B", 1), ("C", 2)).to_path()
    assert list(path) == ["A", "B", "C"]
    assert "B" in path
    assert "Z" not in path
    assert path.nodes == {"A", "B", "C"}
    assert path.edges_seq == (("A", "B"), ("B", "C"))


def test_ordering_equality_and_hash():
    cheap = _chain(("A", 0), ("B", 1)).to_path()
    dear = _chain(("A", 0), ("B", 4)).to_path()
    same_as_cheap = _chain(("A", 0), ("B", 1)).to_path()

    assert cheap < dear
    assert not dear < cheap
    assert cheap == same_as_cheap
    assert hash(cheap) == hash(same_as_cheap)
    assert cheap != dear
    assert sorted([dear, cheap]) == [cheap, dear]
    assert cheap.__lt__("not a path") is NotImplemented


def test_repr_lists_nodes_and_cost():
    path = _chain(("A", 0), ("B", 5)).to_path()
    assert repr(path) == "Path(['A', 'B'], cost=5)"


def test_get_sub_path_uses_recorded_cost():
    path = _chain(("A", 0), ("B", 2), ("C", 7), ("D", 9)).to_path()
    sub = path.get_sub_path("C")
    assert sub.nodes_seq == ("A", "B", "C")
    assert sub.cost == 7

    assert path.get_sub_path("A").cost == 0


def test_get_sub_path_missing_node():
    path = _chain(("A", 0), ("B", 1)).to_path()
    with pytest.raises(ValueError, match="not found"):
        path.get_sub_path("Z")
