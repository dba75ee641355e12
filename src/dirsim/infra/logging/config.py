from __future__ import annotations

"""
Logging Settings.

Severity names accepted in the settings file and the immutable description
of the handler chain that configure_logging builds from them.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LEVEL_NAMES = tuple(_LEVEL_MAP)


@dataclass(frozen=True)
class LoggingConfig:
    """
    Handler chain for one process.

    Attributes:
        level: Severity name; unknown names resolve to INFO.
        console: Write records to stderr, away from command output on stdout.
        log_file: Rotating diagnostic file, or None to keep logs on console only.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept next to the active one.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any], log_path: str) -> "LoggingConfig":
        """
        Build the chain from validated application settings.

        Args:
            settings: Output of validate_config (log_level, save_log_file).
            log_path: File used when save_log_file is enabled.
        """
        return cls(
            level=settings["log_level"],
            log_file=log_path if settings["save_log_file"] else None,
        )
