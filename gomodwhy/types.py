"""Shared types for the dependency graph and path enumeration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence, Tuple

NodeID = str
PathTuple = Tuple[NodeID, ...]
AdjacencyMap = Mapping[NodeID, Sequence[NodeID]]


@dataclass
class Package:
    """One package record as reported by ``go list -json``.

    Attributes:
        import_path: Package import path, used as the graph node.
        imports: Packages imported by the non-test sources.
        test_imports: Packages imported by in-package test files.
        xtest_imports: Packages imported by external (``_test``) test files.
    """

    import_path: NodeID
    imports: List[NodeID] = field(default_factory=list)
    test_imports: List[NodeID] = field(default_factory=list)
    xtest_imports: List[NodeID] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Package":
        """Build a record from a decoded ``go list -json`` object.

        Absent or null import lists are treated as empty.
        """
        return cls(
            import_path=data["ImportPath"],
            imports=list(data.get("Imports") or []),
            test_imports=list(data.get("TestImports") or []),
            xtest_imports=list(data.get("XTestImports") or []),
        )
