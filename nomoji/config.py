"""Global configuration defaults for nomoji."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class IOConfig:
    """Configuration for reading sources and writing destinations."""

    encoding: str = "utf-8"
    # Appended to the source path when --backup is given
    backup_suffix: str = ".bak"
    # A lone positional argument equal to this selects stdin/stdout mode
    stdin_marker: str = "-"


@dataclass
class ReportConfig:
    """Configuration for the summary written to stderr."""

    title: str = "=== nomoji Report ==="
    unit: str = "emojis"


@dataclass
class NomojiConfig:
    """Top-level configuration values."""

    io: IOConfig = field(default_factory=IOConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    log_level_env_var: str = "NOMOJI_LOG_LEVEL"
    default_log_level: str = "WARNING"


DEFAULT_CONFIG = NomojiConfig()
