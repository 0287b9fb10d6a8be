"""Built-in script tables.

Both follow the classic Soundex grouping: 1 labials, 2 gutturals and
sibilants, 3 dentals, 4 liquid, 5 nasals, 6 rhotic. The Devanagari table
regroups its consonant rows onto the same six digits.
"""

from __future__ import annotations

from polysoundex.encoder.models import ScriptConfig

LATIN = ScriptConfig(
    name="latin",
    alphabet="A-Za-z",
    mapping={
        1: "BFPV",
        2: "CGJKQSXZ",
        3: "DT",
        4: "L",
        5: "MN",
        6: "R",
    },
)

DEVANAGARI = ScriptConfig(
    name="devanagari",
    alphabet="\u0900-\u097F",
    mapping={
        1: "कखगघ",  # velars
        2: "चछजझटठडढ",  # palatals, retroflexes
        3: "तथदध",  # dentals
        4: "न",
        5: "पफबभम",  # labials
        6: "यरलव",  # semivowels
    },
)

BUILTIN_SCRIPTS: dict[str, ScriptConfig] = {
    LATIN.name: LATIN,
    DEVANAGARI.name: DEVANAGARI,
}


def default_scripts() -> tuple[ScriptConfig, ...]:
    """Return the built-in scripts in dispatch order."""
    return (LATIN, DEVANAGARI)
