"""Clean raw words (CLI arguments, lines of an input file) before encoding.

The encoder itself only upper-cases and filters; composing accents and
trimming whitespace happen here so that ``encode-file`` lines and shell
arguments reach it in one canonical form.
"""

from __future__ import annotations

import re
import unicodedata

_MULTI_WS_RE = re.compile(r"\s+")


def normalize_unicode(text: str, form: str = "NFC") -> str:
    """Normalise *text* to the form named in ``EncoderConfig.unicode_form``."""
    return unicodedata.normalize(form, text)


def clean_whitespace(text: str) -> str:
    """Turn runs of whitespace into one space and trim both ends."""
    return _MULTI_WS_RE.sub(" ", text).strip()


def full_cleanup(text: str, unicode_form: str = "NFC", strip_ws: bool = True) -> str:
    """Prepare one input word: normalise, then optionally tidy whitespace."""
    text = normalize_unicode(text, unicode_form)
    if strip_ws:
        text = clean_whitespace(text)
    return text
