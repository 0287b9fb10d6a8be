"""Read an EncoderConfig from a YAML file."""

from __future__ import annotations

from pathlib import Path

import yaml

from .schema import EncoderConfig


def load_config(path: Path | str) -> EncoderConfig:
    """Parse *path* and validate it; an empty file gives the built-in defaults."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        raw = {}
    return EncoderConfig.model_validate(raw)
