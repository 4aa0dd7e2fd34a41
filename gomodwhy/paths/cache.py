"""Depth-indexed memoization for path enumeration.

A search from node ``n`` with a budget of ``D`` edges produces every path
that either reaches the goal within ``D`` edges or is cut off after exactly
``D`` edges. The same search with a smaller budget ``d`` is the first
``d + 1`` nodes of each of those paths, so one entry per node serves every
budget up to the deepest one computed so far.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from gomodwhy.types import NodeID, PathTuple


def trim_and_unique(paths: Iterable[PathTuple], depth: int) -> List[PathTuple]:
    """Truncate each path to ``depth + 1`` nodes and drop duplicates.

    First occurrence wins, so the input order is preserved.

    Args:
        paths: Paths as node tuples.
        depth: Maximum number of edges to keep per path.

    Returns:
        Truncated, deduplicated paths.
    """
    seen = set()
    result: List[PathTuple] = []
    for path in paths:
        trimmed = tuple(path[: depth + 1])
        if trimmed in seen:
            continue
        seen.add(trimmed)
        result.append(trimmed)
    return result


@dataclass
class DepthCache:
    """Result of the deepest search computed so far for one node."""

    depth: int = -1
    paths: List[PathTuple] = field(default_factory=list)

    def get(self, depth: int) -> Optional[List[PathTuple]]:
        """Return paths valid for ``depth``, or None if only shallower results exist."""
        if depth > self.depth:
            return None
        if depth == self.depth:
            return self.paths
        return trim_and_unique(self.paths, depth)

    def put(self, depth: int, paths: List[PathTuple]) -> None:
        """Store ``paths`` only if ``depth`` is strictly deeper than the current entry."""
        if depth <= self.depth:
            return
        self.depth = depth
        self.paths = paths


class PathCache:
    """Per-node ``DepthCache`` table local to one enumeration."""

    def __init__(self) -> None:
        self._entries: Dict[NodeID, DepthCache] = {}
        self.hits = 0
        self.misses = 0

    def get(self, node: NodeID, depth: int) -> Optional[List[PathTuple]]:
        entry = self._entries.get(node)
        paths = entry.get(depth) if entry is not None else None
        if paths is None:
            self.misses += 1
        else:
            self.hits += 1
        return paths

    def put(self, node: NodeID, depth: int, paths: List[PathTuple]) -> None:
        self._entries.setdefault(node, DepthCache()).put(depth, paths)

    def depth_of(self, node: NodeID) -> int:
        """Deepest budget cached for ``node``; -1 when nothing is cached."""
        entry = self._entries.get(node)
        return entry.depth if entry is not None else -1

    def __len__(self) -> int:
        return len(self._entries)
