"""Build a ready-to-use encoder from configuration."""

from __future__ import annotations

import logging

from polysoundex.config.schema import EncoderConfig
from polysoundex.encoder.phonetic_encoder import PhoneticEncoder

logger = logging.getLogger(__name__)


def build_encoder(config: EncoderConfig | None = None) -> PhoneticEncoder:
    """Return a PhoneticEncoder for *config*, or for the defaults when omitted."""
    config = config or EncoderConfig()
    scripts = config.script_configs()
    logger.debug("Building encoder with scripts: %s", ", ".join(s.name for s in scripts))
    return PhoneticEncoder(scripts)
