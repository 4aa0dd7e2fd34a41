"""Tests for running gomodwhy as a module (`python -m gomodwhy`)."""

from __future__ import annotations

import runpy
from unittest.mock import patch

import pytest


def test_module_help_exits_zero(capsys) -> None:
    """Running with --help should exit cleanly with code 0."""
    with patch("sys.argv", ["gomodwhy", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("gomodwhy", run_name="__main__")
    assert exc_info.value.code == 0
    assert "--include-test" in capsys.readouterr().out


def test_module_runs_query(go_list_file, capsys) -> None:
    with patch(
        "sys.argv", ["gomodwhy", "golang.org/x/term", "-i", str(go_list_file)]
    ):
        runpy.run_module("gomodwhy", run_name="__main__")
    assert capsys.readouterr().out == (
        "# golang.org/x/term\nexample.com/app\ngolang.org/x/term\n\n"
        "example.com/app\nexample.com/app/internal/tty\ngolang.org/x/term\n\n"
    )
