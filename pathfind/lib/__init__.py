"""Integrations with external graph libraries."""

from pathfind.lib.nx import EdgeAttrPolicy, NxNode, nx_node, path_keys, shortest_path

__all__ = [
    "EdgeAttrPolicy",
    "NxNode",
    "nx_node",
    "path_keys",
    "shortest_path",
]
