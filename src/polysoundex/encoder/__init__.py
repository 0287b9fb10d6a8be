"""Script configurations and the phonetic encoder."""

from polysoundex.encoder.errors import (
    EmptyAfterNormalization,
    InvalidConfiguration,
    PhoneticEncoderError,
    UnsupportedScript,
)
from polysoundex.encoder.models import ScriptConfig
from polysoundex.encoder.phonetic_encoder import CODE_LENGTH, PhoneticEncoder
from polysoundex.encoder.scripts import BUILTIN_SCRIPTS, DEVANAGARI, LATIN, default_scripts

__all__ = [
    "BUILTIN_SCRIPTS",
    "CODE_LENGTH",
    "DEVANAGARI",
    "LATIN",
    "EmptyAfterNormalization",
    "InvalidConfiguration",
    "PhoneticEncoder",
    "PhoneticEncoderError",
    "ScriptConfig",
    "UnsupportedScript",
    "default_scripts",
]
