"""gomodwhy: explain why a package is in a Go build's dependency closure.

gomodwhy lists every simple import chain from a root package to a target
package, shortest first.

Primary API:
    all_paths() - Enumerate import chains over an adjacency mapping
    build_forward() - Build the import graph from package records
    run_go_list() - Obtain package records from the Go toolchain
    Package - One package record

Example:
    from gomodwhy import all_paths, build_forward, run_go_list

    packages = run_go_list("./cmd/server")
    graph = build_forward(packages)
    for chain in all_paths(graph, packages[-1].import_path, "golang.org/x/net/http2"):
        print(" -> ".join(chain))
"""

from __future__ import annotations

from gomodwhy import cli, logging
from gomodwhy.config import DEFAULT_CONFIG, WhyConfig
from gomodwhy.golist import GoListError, load_packages, parse_go_list, run_go_list
from gomodwhy.graph.builder import build_forward, build_reverse
from gomodwhy.graph.nx import from_networkx, to_networkx
from gomodwhy.paths.enumerate import all_paths
from gomodwhy.report import format_paths
from gomodwhy.types import Package

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "Package",
    # Graph
    "build_forward",
    "build_reverse",
    "from_networkx",
    "to_networkx",
    # Enumeration
    "all_paths",
    # Data source
    "GoListError",
    "load_packages",
    "parse_go_list",
    "run_go_list",
    # Output
    "format_paths",
    # Configuration
    "WhyConfig",
    "DEFAULT_CONFIG",
    # Utilities
    "cli",
    "logging",
]
