"""Logging setup for the CLI commands."""

from __future__ import annotations

import logging
import sys
from typing import TextIO


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Configure the root logger to write to *stream* (stderr by default) at *level*.

    ``level`` comes from ``EncoderConfig.log_level``; unknown names fall back
    to INFO.
    """
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=stream or sys.stderr,
        force=True,
    )
