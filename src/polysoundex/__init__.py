"""Multi-script Soundex-style phonetic encoding."""

from polysoundex.encoder import (
    DEVANAGARI,
    LATIN,
    EmptyAfterNormalization,
    InvalidConfiguration,
    PhoneticEncoder,
    PhoneticEncoderError,
    ScriptConfig,
    UnsupportedScript,
)
from polysoundex.factory import build_encoder

__all__ = [
    "DEVANAGARI",
    "LATIN",
    "EmptyAfterNormalization",
    "InvalidConfiguration",
    "PhoneticEncoder",
    "PhoneticEncoderError",
    "ScriptConfig",
    "UnsupportedScript",
    "build_encoder",
]
