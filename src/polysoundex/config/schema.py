"""Pydantic v2 configuration models for the encoder."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from polysoundex.encoder.models import MAX_CLASS, MIN_CLASS, ScriptConfig, fold_case
from polysoundex.encoder.scripts import BUILTIN_SCRIPTS


class ScriptDef(BaseModel):
    """A script declared in the config file.

    Each mapping class may be written as a string of characters
    (``1: "BFPV"``) or as a list (``1: [B, F, P, V]``).
    """

    name: str
    alphabet: str
    detection: str | None = None
    mapping: dict[int, list[str]] = Field(default_factory=dict)

    @field_validator("mapping", mode="before")
    @classmethod
    def _split_strings(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: list(v) if isinstance(v, str) else v for k, v in value.items()}
        return value

    @field_validator("mapping")
    @classmethod
    def _check_classes(cls, value: dict[int, list[str]]) -> dict[int, list[str]]:
        owner: dict[str, int] = {}
        for digit, chars in value.items():
            if not MIN_CLASS <= digit <= MAX_CLASS:
                raise ValueError(
                    f"digit class {digit} is outside {MIN_CLASS}-{MAX_CLASS}"
                )
            for char in chars:
                if len(char) != 1:
                    raise ValueError(f"mapping entry {char!r} is not a single character")
                key = fold_case(char)
                if key in owner and owner[key] != digit:
                    raise ValueError(
                        f"character {char!r} is in classes {owner[key]} and {digit}"
                    )
                owner[key] = digit
        return value

    def to_script_config(self) -> ScriptConfig:
        return ScriptConfig(
            name=self.name,
            alphabet=self.alphabet,
            detection=self.detection,
            mapping=self.mapping,
        )


class EncoderConfig(BaseModel):
    """Top-level configuration.

    Scripts declared under ``scripts`` are tried before the built-ins, so a
    custom script can shadow a built-in one whose detection rule overlaps.
    """

    scripts: list[ScriptDef] = Field(default_factory=list)
    builtin_scripts: list[str] = Field(
        default_factory=lambda: ["latin", "devanagari"]
    )
    unicode_form: str = "NFC"
    log_level: str = "INFO"

    @field_validator("builtin_scripts")
    @classmethod
    def _known_builtins(cls, value: list[str]) -> list[str]:
        unknown = [name for name in value if name not in BUILTIN_SCRIPTS]
        if unknown:
            raise ValueError(
                f"unknown built-in scripts {unknown}; "
                f"available: {sorted(BUILTIN_SCRIPTS)}"
            )
        return value

    @field_validator("unicode_form")
    @classmethod
    def _known_form(cls, value: str) -> str:
        if value not in ("NFC", "NFD", "NFKC", "NFKD"):
            raise ValueError(f"unsupported unicode form {value!r}")
        return value

    def script_configs(self) -> list[ScriptConfig]:
        """Return the configured scripts in dispatch order."""
        configs = [script.to_script_config() for script in self.scripts]
        configs.extend(BUILTIN_SCRIPTS[name] for name in self.builtin_scripts)
        return configs
