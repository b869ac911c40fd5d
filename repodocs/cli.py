"""CLI entrypoint for repodocs."""

from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path

from .config import find_project_root, load_config
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repodocs",
        description="Generate a unified documentation site for a family of component repositories.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to the configuration file (defaults to repodocs.yml at the project root).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "--lenient-sync",
        action="store_true",
        help="Log git failures as warnings instead of aborting the run.",
    )
    parser.add_argument(
        "--skip-build",
        action="store_true",
        help="Do not invoke the build command; use whatever artifacts already exist.",
    )
    parser.add_argument(
        "--fail-if-unchanged",
        action="store_true",
        help="Exit with status 1 when the run wrote no files.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the full documentation pipeline and return the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        root = find_project_root()
        config = load_config(root, args.config)
        if args.lenient_sync:
            config.sync.strict = False
        result = Orchestrator(config, skip_build=bool(args.skip_build)).run()
    except Exception as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        return 1

    if result.failed_repos:
        print(f"Failed to document: {', '.join(result.failed_repos)}", file=sys.stderr)
    print(f"Done. {result.files_written} files written.")

    if result.files_written == 0 and (args.fail_if_unchanged or config.fail_on_no_writes):
        print("No files were written.", file=sys.stderr)
        return 1
    return 0


__all__ = ["main"]
