"""All-paths enumeration over import graphs."""

from gomodwhy.paths.cache import DepthCache, PathCache, trim_and_unique
from gomodwhy.paths.enumerate import all_paths, path_key, reverse_paths, sort_paths

__all__ = [
    "all_paths",
    "path_key",
    "reverse_paths",
    "sort_paths",
    "trim_and_unique",
    "DepthCache",
    "PathCache",
]
