from __future__ import annotations

from pathlib import Path

import pytest

from nomoji.processing.file_processing import ProcessOptions


@pytest.fixture
def make_file(tmp_path: Path):
    """Factory writing raw UTF-8 bytes so line endings are exactly as given."""

    def _make(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _make


@pytest.fixture
def inplace_options() -> ProcessOptions:
    return ProcessOptions(inplace=True)


@pytest.fixture
def dry_run_options() -> ProcessOptions:
    return ProcessOptions(dry_run=True)


class BrokenStream:
    """Text stream stand-in whose read and write always fail."""

    def __init__(self, exc: Exception | None = None):
        self._exc = exc or OSError("stream closed")

    def read(self) -> str:
        raise self._exc

    def write(self, _text: str) -> int:
        raise self._exc

    def flush(self) -> None:
        pass


@pytest.fixture
def broken_stream() -> BrokenStream:
    return BrokenStream()
