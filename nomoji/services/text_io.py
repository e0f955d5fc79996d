"""Reading sources and writing cleaned text back out.

Every failure is re-raised as a ``NomojiError`` subclass whose message is
ready to show in the per-file report. Files are opened with newline
translation disabled so CRLF and lone CR line endings survive a round trip.
"""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from nomoji.config import DEFAULT_CONFIG

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, Path]


class NomojiError(RuntimeError):
    """Base class for per-source failures."""


class SourceReadError(NomojiError):
    """Raised when a source cannot be opened or decoded as text."""


class BackupError(NomojiError):
    """Raised when copying a source to its backup path fails."""


class DestinationWriteError(NomojiError):
    """Raised when cleaned text cannot be written to its destination."""


def backup_path_for(path: PathLike) -> Path:
    """Return the sibling backup path, e.g. ``notes.md`` -> ``notes.md.bak``."""

    return Path(f"{path}{DEFAULT_CONFIG.io.backup_suffix}")


def read_source(path: PathLike, encoding: Optional[str] = None) -> str:
    encoding = encoding or DEFAULT_CONFIG.io.encoding
    try:
        with open(path, "r", encoding=encoding, newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Failed to read file: {exc}") from exc


def write_destination(path: PathLike, content: str, encoding: Optional[str] = None) -> None:
    encoding = encoding or DEFAULT_CONFIG.io.encoding
    try:
        with open(path, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
    except (OSError, UnicodeEncodeError) as exc:
        raise DestinationWriteError(f"Failed to write file: {exc}") from exc


def backup_source(path: PathLike) -> Path:
    """Copy ``path`` to its backup location and return the backup path."""

    target = backup_path_for(path)
    try:
        shutil.copyfile(path, target)
        shutil.copymode(path, target)
    except OSError as exc:
        raise BackupError(f"Failed to create backup: {exc}") from exc
    LOGGER.debug("Backed up %s to %s", path, target)
    return target


def read_stream(stream: Optional[TextIO] = None) -> str:
    stream = stream or sys.stdin
    try:
        return stream.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(str(exc)) from exc


def write_stream(content: str, stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    try:
        stream.write(content)
        stream.flush()
    except (OSError, UnicodeEncodeError) as exc:
        raise DestinationWriteError(f"Failed to write to stdout: {exc}") from exc
