"""Errors raised by the phonetic encoder."""

from __future__ import annotations

COMPONENT = "PhoneticEncoder"


class PhoneticEncoderError(Exception):
    """Base class; every message carries the component prefix."""

    def __init__(self, message: str) -> None:
        super().__init__(f"{COMPONENT}: {message}")


class UnsupportedScript(PhoneticEncoderError):
    """No configured detection rule matched the input."""


class InvalidConfiguration(PhoneticEncoderError):
    """A script configuration is unusable (missing or malformed mapping)."""


class EmptyAfterNormalization(PhoneticEncoderError):
    """Normalization stripped every character from the input."""
