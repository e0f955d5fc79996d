"""CLI entrypoint for stripping emoji from files or standard input."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from importlib import metadata
from pathlib import Path
from typing import List, Optional

from nomoji.assembly.report import assemble_report, assemble_stdin_report, write_report
from nomoji.config import DEFAULT_CONFIG
from nomoji.processing.file_processing import (
    ProcessOptions,
    process_files,
    process_stdin,
)
from nomoji.services.text_io import DestinationWriteError, SourceReadError

try:
    from dotenv import load_dotenv
except ImportError:  # pragma: no cover - optional dependency
    load_dotenv = None

if load_dotenv:
    load_dotenv()
    load_dotenv(Path(__file__).resolve().parent / ".env")

LOGGER = logging.getLogger("nomoji")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _version() -> str:
    try:
        return metadata.version("nomoji")
    except metadata.PackageNotFoundError:
        return "unknown"


def default_log_level() -> str:
    """Level named by the environment, or the configured default if it is not one we accept."""

    level = os.environ.get(DEFAULT_CONFIG.log_level_env_var, "").strip().upper()
    if level in LOG_LEVELS:
        return level
    return DEFAULT_CONFIG.default_log_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nomoji",
        description="Remove emoji characters from text files",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Input file(s) to process (use - for stdin)",
    )
    parser.add_argument(
        "-b",
        "--backup",
        action="store_true",
        help="Create backup files with .bak extension before overwriting",
    )
    parser.add_argument(
        "-i",
        "--inplace",
        action="store_true",
        help="Edit files in place",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Count emojis without removing (dry run)",
    )
    parser.add_argument(
        "--log-level",
        default=default_log_level(),
        choices=LOG_LEVELS,
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def uses_stdin(files: List[str]) -> bool:
    return not files or (len(files) == 1 and files[0] == DEFAULT_CONFIG.io.stdin_marker)


def run_stdin(dry_run: bool = False) -> int:
    try:
        count = process_stdin(dry_run=dry_run)
    except SourceReadError as exc:
        LOGGER.debug("stdin read failed", exc_info=True)
        write_report(f"Error reading from stdin: {exc}\n")
        return 1
    except DestinationWriteError as exc:
        LOGGER.debug("stdout write failed", exc_info=True)
        write_report(f"Error: {exc}\n")
        return 1

    write_report(assemble_stdin_report(count))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    if uses_stdin(args.files):
        LOGGER.info("Reading from stdin")
        return run_stdin(dry_run=args.dry_run)

    options = ProcessOptions(backup=args.backup, inplace=args.inplace, dry_run=args.dry_run)
    LOGGER.info("Processing %d file(s) with %s", len(args.files), options)
    results = process_files(args.files, options)
    write_report(assemble_report(results))

    failures = sum(1 for r in results if not r.success)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
