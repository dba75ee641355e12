from __future__ import annotations

"""
Handler factories for the dirsim logging chain.

Every handler built here carries a marker attribute so shutdown only removes
what this package installed, leaving pytest's capture handlers alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from dirsim.infra.logging.config import LoggingConfig

_HANDLER_TAG_ATTR: str = "_dirsim_handler"


def _tag_handler(handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_console_handler(cfg: LoggingConfig, level_int: int) -> logging.Handler:
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(logging.Formatter(cfg.console_fmt))
    _tag_handler(sh)
    return sh


def _create_rotating_file_handler(cfg: LoggingConfig, level_int: int) -> Optional[RotatingFileHandler]:
    """
    Open the rotating diagnostic file described by cfg.log_file.

    A file that cannot be opened is reported on stderr and skipped; the
    console keeps working.
    """
    log_file = os.path.abspath(cfg.log_file)
    try:
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
    _tag_handler(fh)
    return fh
