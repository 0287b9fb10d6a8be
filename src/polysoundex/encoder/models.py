"""Script configuration: a detection rule bound to a digit-class mapping."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from polysoundex.encoder.errors import InvalidConfiguration

MIN_CLASS = 1
MAX_CLASS = 6


def fold_case(char: str) -> str:
    """Upper-case a single character, unless that would expand it (e.g. ß)."""
    upper = char.upper()
    return upper if len(upper) == 1 else char


@dataclass(frozen=True)
class ScriptConfig:
    """One writing system the encoder can handle.

    ``alphabet`` is the body of a regex character class (``A-Za-z``). It
    gives the default detection rule, ``\\A[alphabet]+\\Z``, and the filter
    applied during normalization. ``detection`` replaces the detection rule
    only; filtering always uses ``alphabet``. Unlike a ``^...$`` pattern, the
    default rule rejects a trailing newline, so ``"Ram\\n"`` does not match.

    ``mapping`` goes from digit class (1-6) to the characters in that class.
    Classes are walked in ascending order when the reverse lookup is built,
    so a character listed under two classes gets the lower one. The mapping
    is copied into a read-only view at construction and takes no part in
    hashing.
    """

    name: str
    alphabet: str
    mapping: Mapping[int, Sequence[str]] | None = field(hash=False)
    detection: str | None = None
    _detect_re: re.Pattern[str] = field(init=False, repr=False, compare=False)
    _strip_re: re.Pattern[str] = field(init=False, repr=False, compare=False)
    _lookup: dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.mapping is not None:
            frozen = {digit: tuple(chars) for digit, chars in self.mapping.items()}
            object.__setattr__(self, "mapping", MappingProxyType(frozen))
        if not self.alphabet:
            raise InvalidConfiguration(f"Script '{self.name}' has an empty alphabet.")
        detection = self.detection or rf"\A[{self.alphabet}]+\Z"
        try:
            detect_re = re.compile(detection)
            strip_re = re.compile(f"[^{self.alphabet}]")
        except re.error as exc:
            raise InvalidConfiguration(
                f"Script '{self.name}' has an invalid pattern: {exc}"
            ) from exc
        object.__setattr__(self, "_detect_re", detect_re)
        object.__setattr__(self, "_strip_re", strip_re)
        object.__setattr__(self, "_lookup", self._build_lookup())

    def _build_lookup(self) -> dict[str, str]:
        lookup: dict[str, str] = {}
        for digit in sorted(self.mapping or {}):
            if not MIN_CLASS <= digit <= MAX_CLASS:
                raise InvalidConfiguration(
                    f"Script '{self.name}' uses digit class {digit}; "
                    f"classes must be between {MIN_CLASS} and {MAX_CLASS}."
                )
            for char in self.mapping[digit]:
                if len(char) != 1:
                    raise InvalidConfiguration(
                        f"Script '{self.name}' maps {char!r}; "
                        "entries must be single characters."
                    )
                lookup.setdefault(fold_case(char), str(digit))
        return lookup

    @property
    def has_mapping(self) -> bool:
        return bool(self._lookup)

    def matches(self, text: str) -> bool:
        """Return True if *text* belongs to this script."""
        return self._detect_re.search(text) is not None

    def normalise(self, text: str) -> str:
        """Upper-case *text* and drop every character outside the alphabet."""
        return self._strip_re.sub("", text.upper())

    def digit_for(self, char: str) -> str | None:
        """Return the digit class of *char*, or None if it is unmapped."""
        return self._lookup.get(char)
