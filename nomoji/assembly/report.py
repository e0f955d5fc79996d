"""Assemble the summary report printed after a run."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from nomoji.config import DEFAULT_CONFIG
from nomoji.processing.file_processing import ProcessResult


def assemble_report(results: Sequence[ProcessResult]) -> str:
    cfg = DEFAULT_CONFIG.report
    total_files = len(results)
    successful = sum(1 for r in results if r.success)
    total_emojis = sum(r.emojis_found for r in results)

    lines = [
        "",
        cfg.title,
        f"Files processed: {total_files}",
        f"Successful: {successful}",
    ]
    if total_files != successful:
        lines.append(f"Failed: {total_files - successful}")
    lines.append(f"Total {cfg.unit} found: {total_emojis}")

    if results:
        lines.extend(["", "Per-file results:"])
        for r in results:
            if r.error is not None:
                lines.append(f"  {r.file}: {r.emojis_found} {cfg.unit} - ERROR: {r.error}")
            else:
                lines.append(f"  {r.file}: {r.emojis_found} {cfg.unit} removed")

    return "\n".join(lines) + "\n"


def assemble_stdin_report(count: int) -> str:
    cfg = DEFAULT_CONFIG.report
    return f"\n{cfg.title}\n{cfg.unit.capitalize()} removed from stdin: {count}\n"


def write_report(report: str, stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stderr
    stream.write(report)
    stream.flush()
