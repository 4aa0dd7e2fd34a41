"""Import-graph construction and conversion."""

from gomodwhy.graph.builder import build_forward, build_reverse, reachable
from gomodwhy.graph.nx import from_networkx, to_networkx

__all__ = [
    "build_forward",
    "build_reverse",
    "reachable",
    "from_networkx",
    "to_networkx",
]
