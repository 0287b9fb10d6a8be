"""Soundex reduction over a configurable set of scripts.

The encoder holds an ordered tuple of :class:`ScriptConfig`. For each input
it picks the first config whose detection rule matches the raw string,
normalises the string with that config, then runs the classic Soundex walk:

- the first normalised character is kept verbatim;
- each following character contributes its digit class, unless it repeats
  the digit just emitted;
- an unmapped character (a vowel, usually) resets the last digit, so the
  same class on both sides of it is emitted twice;
- the result is padded with ``0`` or cut to four characters.

``0`` doubles as the "nothing emitted yet" marker and as padding, so a
trailing ``0`` never says which of the two it was.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from polysoundex.encoder.errors import (
    EmptyAfterNormalization,
    InvalidConfiguration,
    UnsupportedScript,
)
from polysoundex.encoder.models import ScriptConfig

logger = logging.getLogger(__name__)

CODE_LENGTH = 4
_NO_CODE = "0"


class PhoneticEncoder:
    """Encode names into four-character phonetic codes.

    Instances are immutable and may be shared between threads.
    """

    def __init__(self, configs: Iterable[ScriptConfig]) -> None:
        self._configs = tuple(configs)

    @property
    def configs(self) -> tuple[ScriptConfig, ...]:
        return self._configs

    def find_config(self, text: str) -> ScriptConfig | None:
        """Return the first config whose detection rule matches *text*."""
        for config in self._configs:
            if config.matches(text):
                return config
        return None

    def select_config(self, text: str) -> ScriptConfig:
        config = self.find_config(text)
        if config is None:
            logger.debug("No script matched %r", text)
            raise UnsupportedScript("No configuration found for the input language.")
        return config

    def encode(self, text: str) -> str:
        """Return the phonetic code of *text*.

        Empty input and all-digit input are returned unchanged.
        """
        if not text:
            return text
        if text.isdecimal():
            return text

        config = self.select_config(text)
        if not config.has_mapping:
            raise InvalidConfiguration(
                f"Mapping must be provided in the configuration for script '{config.name}'."
            )

        normalised = config.normalise(text)
        if not normalised:
            raise EmptyAfterNormalization(
                f"Input {text!r} has no '{config.name}' characters left after normalization."
            )

        code = _reduce(normalised, config)
        logger.debug("Encoded %r as %s using script %s", text, code, config.name)
        return code


def _reduce(normalised: str, config: ScriptConfig) -> str:
    code = normalised[0]
    last = _NO_CODE
    for char in normalised[1:]:
        if len(code) >= CODE_LENGTH:
            break
        digit = config.digit_for(char)
        if digit is None:
            last = _NO_CODE
        elif digit != last:
            code += digit
            last = digit
    return code.ljust(CODE_LENGTH, _NO_CODE)[:CODE_LENGTH]
