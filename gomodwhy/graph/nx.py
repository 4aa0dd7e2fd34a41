"""NetworkX graph conversion utilities.

The enumerator works on plain adjacency mappings. These helpers move an
import graph in and out of NetworkX so it can be inspected, drawn or checked
with NetworkX algorithms.

Example:
    >>> import networkx as nx
    >>> from gomodwhy.graph.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("app", "lib")
    >>> from_networkx(G)
    {'app': ['lib']}
    >>> sorted(to_networkx({"app": ["lib"]}).edges())
    [('app', 'lib')]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Union

import networkx as nx

from gomodwhy.types import AdjacencyMap, NodeID

if TYPE_CHECKING:
    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph]
else:
    NxGraph = Any


def to_networkx(adjacency: AdjacencyMap) -> nx.DiGraph:
    """Convert an adjacency mapping to a ``networkx.DiGraph``.

    Parallel edges collapse into one. Nodes that only appear as successors
    are added as well.

    Args:
        adjacency: Mapping from node to its successors.

    Returns:
        Directed graph with one edge per distinct ``(u, v)`` pair.
    """
    graph = nx.DiGraph()
    for node, successors in adjacency.items():
        graph.add_node(node)
        for nxt in successors:
            graph.add_edge(node, nxt)
    return graph


def from_networkx(graph: NxGraph) -> Dict[NodeID, List[NodeID]]:
    """Convert a directed NetworkX graph to an adjacency mapping.

    Nodes without successors are omitted, matching the builder contract.

    Args:
        graph: ``DiGraph`` or ``MultiDiGraph``. Multi-edges collapse.

    Returns:
        Mapping from node to its successors in NetworkX iteration order.

    Raises:
        TypeError: If the graph is undirected.
    """
    if not graph.is_directed():
        raise TypeError("Import graphs must be directed")

    adjacency: Dict[NodeID, List[NodeID]] = {}
    for node in graph.nodes:
        successors = list(graph.successors(node))
        if successors:
            adjacency[node] = successors
    return adjacency
