"""Enumeration of every simple import chain between two packages.

``all_paths`` answers "why is package X in the closure of package R" with
all cycle-free chains ``R -> ... -> X``, shortest first.

Unbounded queries search backward from the target over the reverse graph.
Import graphs fan in toward base libraries, so the target side usually
branches far less than the root side, and chains sharing a long tail toward
the root reuse the memoized tail.

Bounded queries truncate chains from the root side, so they search forward
from the root with the depth limit as budget. A truncated prefix is reported
only if it can still be completed into a simple chain to the target.

In both directions the graph is first restricted to nodes lying between the
two endpoints, so no branch that cannot reach the goal is expanded.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, Iterator, List, Optional, Set

from gomodwhy.graph.builder import build_reverse, reachable
from gomodwhy.logging import get_logger
from gomodwhy.paths.cache import PathCache, trim_and_unique
from gomodwhy.types import AdjacencyMap, NodeID, PathTuple

logger = get_logger(__name__)

PATH_SEPARATOR = "->"


def path_key(path: Iterable[NodeID]) -> str:
    """Return the comparison key of a path: its nodes joined with ``->``."""
    return PATH_SEPARATOR.join(path)


def sort_paths(paths: Iterable[PathTuple]) -> List[PathTuple]:
    """Sort paths by length, then lexicographically by ``path_key``."""
    return sorted(paths, key=lambda p: (len(p), path_key(p)))


def reverse_paths(paths: Iterable[PathTuple]) -> List[PathTuple]:
    """Reverse the node order of every path."""
    return [tuple(reversed(path)) for path in paths]


class _Frame:
    """One node being expanded on the explicit search stack."""

    __slots__ = ("node", "depth", "successors", "paths")

    def __init__(self, node: NodeID, depth: int, successors: Iterator[NodeID]):
        self.node = node
        self.depth = depth
        self.successors = successors
        self.paths: List[PathTuple] = []

    def absorb(self, sub_paths: List[PathTuple]) -> None:
        for sub in sub_paths:
            if self.node in sub:
                continue  # cycle
            self.paths.append((self.node,) + sub)


def _search(
    graph: AdjacencyMap,
    source: NodeID,
    goal: NodeID,
    depth_left: int,
    cache: PathCache,
) -> List[PathTuple]:
    """Return the simple walks from ``source`` toward ``goal`` within ``depth_left`` edges.

    Every result either ends at ``goal`` or has been cut off after exactly
    ``depth_left`` edges. Walks that revisit a node are dropped.
    """

    def settled(node: NodeID, depth: int) -> Optional[List[PathTuple]]:
        # None means the node still has to be expanded
        if node == goal or depth <= 0:
            return [(node,)]
        if not graph.get(node):
            return []
        return cache.get(node, depth)

    result = settled(source, depth_left)
    if result is not None:
        return result

    stack = [_Frame(source, depth_left, iter(graph[source]))]
    while True:
        frame = stack[-1]
        for nxt in frame.successors:
            sub_paths = settled(nxt, frame.depth - 1)
            if sub_paths is None:
                stack.append(_Frame(nxt, frame.depth - 1, iter(graph[nxt])))
                break
            frame.absorb(sub_paths)
        else:
            stack.pop()
            cache.put(frame.node, frame.depth, frame.paths)
            if not stack:
                return frame.paths
            stack[-1].absorb(frame.paths)


def _restrict(graph: AdjacencyMap, keep: Set[NodeID]) -> Dict[NodeID, List[NodeID]]:
    """Subgraph induced by ``keep``, with duplicate successors collapsed."""
    restricted: Dict[NodeID, List[NodeID]] = {}
    for node, successors in graph.items():
        if node not in keep:
            continue
        kept = [nxt for nxt in dict.fromkeys(successors) if nxt in keep]
        if kept:
            restricted[node] = kept
    return restricted


def _can_complete(graph: AdjacencyMap, prefix: PathTuple, goal: NodeID) -> bool:
    """True if ``prefix`` extends to ``goal`` without revisiting any of its nodes."""
    blocked = set(prefix[:-1])
    tail = prefix[-1]
    visited = {tail}
    queue = deque([tail])
    while queue:
        node = queue.popleft()
        if node == goal:
            return True
        for nxt in graph.get(node, ()):
            if nxt not in visited and nxt not in blocked:
                visited.add(nxt)
                queue.append(nxt)
    return False


def all_paths(
    adjacency: AdjacencyMap,
    start: NodeID,
    end: NodeID,
    max_depth: int = 0,
) -> List[List[NodeID]]:
    """Enumerate every simple path from ``start`` to ``end``.

    Args:
        adjacency: Forward graph, node -> imported nodes. May contain cycles
            and duplicate successors.
        start: Root node.
        end: Target node.
        max_depth: Maximum number of edges per returned path. Longer paths
            are cut after ``max_depth`` edges from ``start`` and the
            resulting prefixes deduplicated. 0 or negative means unlimited.

    Returns:
        Distinct paths as node lists, sorted by length and then by the nodes
        joined with ``->``. Empty when ``end`` is unreachable from ``start``.
    """
    if start == end:
        return [[start]]

    reverse = build_reverse(adjacency)
    cache = PathCache()

    if max_depth <= 0:
        candidates = reachable(adjacency, start)
        if end not in candidates:
            logger.debug(f"{end} is not reachable from {start}")
            return []
        graph = _restrict(reverse, candidates)
        # A walk of len(candidates) edges must repeat a node, so the budget
        # only cuts walks that are discarded anyway.
        found = _search(graph, end, start, len(candidates), cache)
        paths = [p for p in reverse_paths(found) if p[0] == start]
        paths = list(dict.fromkeys(paths))
    else:
        candidates = reachable(reverse, end)
        if start not in candidates:
            logger.debug(f"{start} cannot reach {end}")
            return []
        graph = _restrict(adjacency, candidates)
        budget = min(max_depth, len(candidates))
        found = _search(graph, start, end, budget, cache)
        paths = [p for p in found if p[-1] == end or _can_complete(graph, p, end)]
        paths = trim_and_unique(paths, max_depth)

    logger.debug(
        f"Enumerated {len(paths)} paths {start} -> {end} over "
        f"{len(candidates)} candidate nodes "
        f"(cache: {len(cache)} nodes, {cache.hits} hits, {cache.misses} misses)"
    )
    return [list(path) for path in sort_paths(paths)]
