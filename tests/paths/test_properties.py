"""Property checks of all_paths against brute force on small random graphs.

NetworkX ``all_simple_paths`` is the reference enumeration; its paths are
truncated and deduplicated the same way before comparing.
"""

from __future__ import annotations

import random
from typing import Dict, List

import networkx as nx
import pytest

from gomodwhy.graph.nx import to_networkx
from gomodwhy.paths.cache import trim_and_unique
from gomodwhy.paths.enumerate import all_paths, sort_paths

SEEDS = range(40)
DEPTHS = [0, 1, 2, 3, 5]


def random_graph(seed: int, acyclic: bool) -> Dict[str, List[str]]:
    rng = random.Random(seed)
    n = rng.randint(4, 8)
    nodes = [f"n{i}" for i in range(n)]
    graph: Dict[str, List[str]] = {}
    for i, u in enumerate(nodes):
        for j, v in enumerate(nodes):
            if acyclic and j <= i:
                continue
            if rng.random() < 0.35:
                graph.setdefault(u, []).append(v)
    return graph


def brute_force(graph: Dict[str, List[str]], start: str, end: str, depth: int):
    g = to_networkx(graph)
    g.add_nodes_from([start, end])
    paths = [tuple(p) for p in nx.all_simple_paths(g, start, end)]
    if depth > 0:
        paths = trim_and_unique(paths, depth)
    return [list(p) for p in sort_paths(set(paths))]


@pytest.mark.parametrize("acyclic", [True, False], ids=["dag", "cyclic"])
@pytest.mark.parametrize("seed", SEEDS)
def test_matches_brute_force(seed: int, acyclic: bool) -> None:
    graph = random_graph(seed, acyclic)
    start, end = "n0", "n3"
    for depth in DEPTHS:
        assert all_paths(graph, start, end, depth) == brute_force(
            graph, start, end, depth
        ), f"seed={seed} depth={depth} graph={graph}"


@pytest.mark.parametrize("seed", SEEDS)
def test_invariants(seed: int) -> None:
    graph = random_graph(seed, acyclic=False)
    edges = {(u, v) for u, vs in graph.items() for v in vs}
    start, end = "n0", "n3"
    for depth in DEPTHS:
        paths = all_paths(graph, start, end, depth)

        assert len({tuple(p) for p in paths}) == len(paths)
        for path in paths:
            assert len(set(path)) == len(path)
            assert path[0] == start
            assert all(pair in edges for pair in zip(path, path[1:]))
            if depth > 0:
                assert len(path) - 1 <= depth
                if path[-1] != end:
                    assert len(path) - 1 == depth
            else:
                assert path[-1] == end

        if depth > 0:
            retrimmed = trim_and_unique([tuple(p) for p in paths], depth)
            assert [list(p) for p in retrimmed] == paths
        assert all_paths(graph, start, end, depth) == paths
