"""Command-line interface for gomodwhy."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from gomodwhy.config import WhyConfig
from gomodwhy.golist import GoListError, load_packages, root_package, run_go_list
from gomodwhy.graph.builder import build_forward
from gomodwhy.logging import enable_debug_logging, get_logger, set_global_log_level
from gomodwhy.paths.enumerate import all_paths
from gomodwhy.report import format_paths, paths_to_dict

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _build_parser(config: WhyConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gomodwhy",
        usage="%(prog)s [options] <target-pkg>",
        description="Show every import chain from the root package to a target package.",
    )
    parser.add_argument("target", help="Import path of the package to explain")
    parser.add_argument(
        "--pattern",
        "-p",
        default=config.pattern,
        help="go list package matching pattern (default: %(default)s)",
    )
    parser.add_argument(
        "--depth",
        "-d",
        type=int,
        default=config.max_depth,
        help="dependency path depth limit, 0 for unlimited (default: %(default)s)",
    )
    parser.add_argument(
        "--include-test",
        "-t",
        action="store_true",
        default=config.include_test,
        help="include test dependencies",
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=None,
        help="read a saved 'go list -deps -json' stream instead of running go ('-' for stdin)",
    )
    parser.add_argument(
        "--root",
        "-r",
        default=None,
        help="root package (default: the package matched by --pattern)",
    )
    parser.add_argument(
        "--json", action="store_true", help="print the chains as JSON"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only log errors"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``gomodwhy`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    config = WhyConfig.from_env()
    parser = _build_parser(config)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.ERROR)
    else:
        set_global_log_level(logging.WARNING)

    _start_time = perf_counter()
    try:
        if args.input is not None:
            logger.info(f"Loading package list from: {args.input}")
            packages = load_packages(args.input)
        else:
            logger.info("Executing go list command to get dependency information")
            packages = run_go_list(args.pattern, go_command=config.go_command)
        root = args.root or root_package(packages)
    except (GoListError, OSError) as e:
        logger.error(f"Failed to load packages: {type(e).__name__}: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info(
        f"Got dependency information for {len(packages)} "
        f"{_plural(len(packages), 'package')}"
    )

    forward = build_forward(packages, include_test=args.include_test)
    logger.info(f"Dependency graph built: {len(forward)} importing packages")

    logger.info(f"Analyzing dependency paths from {root} to {args.target}")
    paths = all_paths(forward, root, args.target, args.depth)
    logger.info(
        f"Found {len(paths)} {_plural(len(paths), 'path')} in "
        f"{_format_duration(perf_counter() - _start_time)}"
    )

    if args.json:
        print(json.dumps(paths_to_dict(root, args.target, paths, args.depth), indent=2))
    else:
        sys.stdout.write(format_paths(args.target, paths))


if __name__ == "__main__":
    main()
