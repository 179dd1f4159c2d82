"""Search result model: steps produced by the engine and paths built from them."""

from pathfind.model.path import Path, PathStep

__all__ = [
    "Path",
    "PathStep",
]
