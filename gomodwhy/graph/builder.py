"""Adjacency construction for the package import graph."""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Set

from gomodwhy.types import AdjacencyMap, NodeID, Package


def build_forward(
    packages: Iterable[Package], include_test: bool = False
) -> Dict[NodeID, List[NodeID]]:
    """Build the forward import graph from package records.

    Each package's imports are appended to its entry, so repeated records for
    the same package accumulate. Successors are not deduplicated. Packages
    without any outgoing edge are left out of the mapping.

    Args:
        packages: Package records, typically from ``go list -deps -json``.
        include_test: Also add in-package and external test imports.

    Returns:
        Mapping from import path to the list of imported paths.
    """
    forward: Dict[NodeID, List[NodeID]] = {}
    for pkg in packages:
        successors = list(pkg.imports)
        if include_test:
            successors.extend(pkg.test_imports)
            successors.extend(pkg.xtest_imports)
        if successors:
            forward.setdefault(pkg.import_path, []).extend(successors)
    return forward


def build_reverse(forward: AdjacencyMap) -> Dict[NodeID, List[NodeID]]:
    """Flip every edge of ``forward`` (``u -> v`` becomes ``v -> u``).

    Predecessors keep first-seen order; duplicate pairs collapse.
    """
    reverse: Dict[NodeID, List[NodeID]] = {}
    seen: Set[tuple] = set()
    for node, successors in forward.items():
        for nxt in successors:
            if (nxt, node) in seen:
                continue
            seen.add((nxt, node))
            reverse.setdefault(nxt, []).append(node)
    return reverse


def reachable(adjacency: AdjacencyMap, source: NodeID) -> Set[NodeID]:
    """Return every node reachable from ``source``, ``source`` included."""
    visited = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nxt in adjacency.get(node, ()):
            if nxt not in visited:
                visited.add(nxt)
                queue.append(nxt)
    return visited
