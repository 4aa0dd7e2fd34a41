"""Rendering of import chains."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from gomodwhy.types import NodeID

NO_CHAIN_MESSAGE = "no import chain found"


def format_paths(target: NodeID, paths: Sequence[Sequence[NodeID]]) -> str:
    """Render chains as text: a ``# target`` header, one node per line.

    Chains are separated by a blank line. An empty set renders
    ``no import chain found`` under the header.
    """
    lines: List[str] = [f"# {target}"]
    if not paths:
        lines.append(NO_CHAIN_MESSAGE)
        return "\n".join(lines) + "\n"
    for path in paths:
        lines.extend(path)
        lines.append("")
    return "\n".join(lines) + "\n"


def paths_to_dict(
    root: NodeID,
    target: NodeID,
    paths: Sequence[Sequence[NodeID]],
    max_depth: int = 0,
) -> Dict[str, Any]:
    """Return a JSON-serializable summary of a query and its chains."""
    return {
        "root": root,
        "target": target,
        "max_depth": max_depth if max_depth > 0 else None,
        "count": len(paths),
        "paths": [list(path) for path in paths],
    }
