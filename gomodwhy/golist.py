"""Package records from the Go toolchain.

``go list -deps -json`` prints one JSON object per package, concatenated
without separators, in post-order: every package comes after all of its
dependencies, so the package matched by the pattern is printed last.
"""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Union

from gomodwhy.logging import get_logger
from gomodwhy.types import NodeID, Package

logger = get_logger(__name__)


class GoListError(RuntimeError):
    """Raised when package information cannot be obtained or decoded.

    Attributes:
        command: Command line that was run, if any.
        stderr: Captured standard error of the command, if any.
    """

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        stderr: str = "",
    ) -> None:
        self.command = list(command) if command is not None else None
        self.stderr = stderr
        details = [message]
        if self.command:
            details.append(" ".join(self.command))
        if stderr.strip():
            details.append(stderr.strip())
        super().__init__("\n\n".join(details))


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise GoListError(f"invalid go list output: {exc}") from exc


def parse_go_list(text: str) -> List[Package]:
    """Decode a concatenated stream of ``go list -json`` objects.

    Args:
        text: Raw output of ``go list -json``.

    Returns:
        Package records in stream order.

    Raises:
        GoListError: If the stream is not a sequence of package objects.
    """
    decoder = json.JSONDecoder()
    packages: List[Package] = []
    pos = 0
    end = len(text)
    while True:
        while pos < end and text[pos].isspace():
            pos += 1
        if pos >= end:
            break
        try:
            obj, pos = decoder.raw_decode(text, pos)
        except json.JSONDecodeError as exc:
            raise GoListError(f"invalid go list output: {exc}") from exc
        if not isinstance(obj, dict) or "ImportPath" not in obj:
            raise GoListError(
                f"invalid go list output: expected a package object, got {type(obj).__name__}"
            )
        packages.append(Package.from_dict(obj))
    return packages


def run_go_list(
    pattern: str = ".",
    go_command: str = "go",
    cwd: Optional[Union[str, Path]] = None,
) -> List[Package]:
    """Run ``go list -deps -json`` and return the decoded package records.

    Args:
        pattern: Package pattern, e.g. ``.`` or ``./cmd/server``.
        go_command: Go executable.
        cwd: Working directory for the command (the module to analyse).

    Raises:
        GoListError: If the command cannot be started, fails, or prints
            undecodable output.
    """
    command = [go_command, "list", "-deps", "-json", pattern]
    logger.debug(f"Running: {' '.join(command)}")
    try:
        proc = subprocess.run(command, cwd=cwd, capture_output=True, check=False)
    except OSError as exc:
        raise GoListError(f"go list failed: {exc}", command=command) from exc

    stderr = proc.stderr.decode("utf-8", errors="replace")
    if proc.returncode != 0:
        raise GoListError(
            f"go list failed: exit status {proc.returncode}",
            command=command,
            stderr=stderr,
        )

    try:
        packages = parse_go_list(_decode(proc.stdout))
    except GoListError as exc:
        raise GoListError(str(exc), command=command, stderr=stderr) from exc
    logger.debug(f"go list returned {len(packages)} packages")
    return packages


def load_packages(path: Union[str, Path]) -> List[Package]:
    """Read a saved ``go list -deps -json`` stream from ``path`` (``-`` for stdin)."""
    if str(path) == "-":
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError as exc:
            raise GoListError(f"invalid go list output: {exc}") from exc
    else:
        text = _decode(Path(path).read_bytes())
    return parse_go_list(text)


def root_package(packages: Sequence[Package]) -> NodeID:
    """Return the root of a ``go list -deps`` listing (its last record).

    Raises:
        GoListError: If there are no packages.
    """
    if not packages:
        raise GoListError("no package found")
    return packages[-1].import_path
