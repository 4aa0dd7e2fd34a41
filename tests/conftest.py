"""Shared fixtures: small import graphs and a saved ``go list`` stream."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

import pytest


@pytest.fixture
def diamond() -> Dict[str, List[str]]:
    """A imports B and C, both import D."""
    return {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}


@pytest.fixture
def cyclic() -> Dict[str, List[str]]:
    """A -> B -> C -> D with a B <-> C cycle."""
    return {"A": ["B"], "B": ["C"], "C": ["B", "D"]}


@pytest.fixture
def go_list_records() -> List[dict]:
    """Records in ``go list -deps`` post-order; the root comes last."""
    return [
        {"ImportPath": "golang.org/x/sys/unix"},
        {"ImportPath": "golang.org/x/term", "Imports": ["golang.org/x/sys/unix"]},
        {
            "ImportPath": "example.com/app/internal/tty",
            "Imports": ["golang.org/x/term"],
            "TestImports": ["example.com/testutil"],
        },
        {"ImportPath": "example.com/testutil"},
        {
            "ImportPath": "example.com/app",
            "Imports": ["example.com/app/internal/tty", "golang.org/x/term"],
        },
    ]


@pytest.fixture
def go_list_file(tmp_path: Path, go_list_records: List[dict]) -> Path:
    """The records written as a ``go list -json`` stream."""
    path = tmp_path / "deps.json"
    path.write_text("".join(json.dumps(r, indent="\t") + "\n" for r in go_list_records))
    return path
