"""Run the emoji filter over files and standard input."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, TextIO

from nomoji.processing.emoji_cleaner import remove_emoji
from nomoji.services.text_io import (
    NomojiError,
    backup_source,
    read_source,
    read_stream,
    write_destination,
    write_stream,
)

LOGGER = logging.getLogger(__name__)


@dataclass
class ProcessOptions:
    """How cleaned text is persisted for each file."""

    backup: bool = False
    inplace: bool = False
    dry_run: bool = False


@dataclass
class ProcessResult:
    """Outcome of cleaning a single file."""

    file: str
    emojis_found: int
    success: bool
    error: Optional[str] = None


def process_file(
    file: str,
    options: ProcessOptions,
    stdout: Optional[TextIO] = None,
) -> ProcessResult:
    """Clean one file according to ``options``.

    Precedence is dry run, then backup (which also overwrites the file), then
    in-place, and finally writing the cleaned text to ``stdout``. Failures are
    recorded on the result rather than raised.
    """

    try:
        content = read_source(file)
    except NomojiError as exc:
        LOGGER.info("Skipping %s: %s", file, exc)
        return ProcessResult(file=file, emojis_found=0, success=False, error=str(exc))

    result = remove_emoji(content)
    LOGGER.info("Found %d emoji code points in %s", result.removed, file)

    try:
        if options.dry_run:
            pass
        elif options.backup:
            backup_source(file)
            write_destination(file, result.text)
        elif options.inplace:
            write_destination(file, result.text)
        else:
            write_stream(result.text, stdout)
    except NomojiError as exc:
        LOGGER.info("Failed to clean %s: %s", file, exc)
        return ProcessResult(file=file, emojis_found=result.removed, success=False, error=str(exc))

    return ProcessResult(file=file, emojis_found=result.removed, success=True)


def process_files(
    files: Iterable[str],
    options: ProcessOptions,
    stdout: Optional[TextIO] = None,
) -> List[ProcessResult]:
    results: List[ProcessResult] = []
    for file in files:
        results.append(process_file(file, options, stdout=stdout))
    return results


def process_stdin(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    *,
    dry_run: bool = False,
) -> int:
    """Filter all of standard input to standard output and return the count.

    Raises ``SourceReadError`` when input cannot be read and
    ``DestinationWriteError`` when output cannot be written.
    """

    result = remove_emoji(read_stream(stdin))
    if not dry_run:
        write_stream(result.text, stdout)
    return result.removed
