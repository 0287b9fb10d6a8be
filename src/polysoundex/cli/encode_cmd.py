"""CLI handlers for the encode, encode-file and scripts subcommands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import orjson
import typer

from polysoundex.config.loader import load_config
from polysoundex.config.schema import EncoderConfig
from polysoundex.encoder.errors import PhoneticEncoderError
from polysoundex.encoder.phonetic_encoder import PhoneticEncoder
from polysoundex.factory import build_encoder
from polysoundex.normalise.text_cleanup import full_cleanup
from polysoundex.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _load(config_path: str | None) -> tuple[EncoderConfig, PhoneticEncoder]:
    cfg = load_config(config_path) if config_path else EncoderConfig()
    setup_logging(cfg.log_level)
    return cfg, build_encoder(cfg)


def encode_record(encoder: PhoneticEncoder, word: str) -> dict[str, Any]:
    """Encode one word into an output record; failures become an ``error`` field."""
    try:
        code = encoder.encode(word)
    except PhoneticEncoderError as exc:
        return {"input": word, "error": str(exc)}
    config = None if word.isdecimal() else encoder.find_config(word)
    return {
        "input": word,
        "script": config.name if config is not None else None,
        "code": code,
    }


def run_encode(words: list[str], config_path: str | None) -> int:
    """Echo ``word<TAB>code`` lines and return the number of failures."""
    cfg, encoder = _load(config_path)
    failures = 0
    for word in words:
        record = encode_record(encoder, full_cleanup(word, cfg.unicode_form))
        if "error" in record:
            failures += 1
            typer.echo(f"{word}\t{record['error']}", err=True)
        else:
            typer.echo(f"{record['input']}\t{record['code']}")
    return failures


def run_encode_file(input_path: str, output_path: str, config_path: str | None) -> None:
    cfg, encoder = _load(config_path)

    src = Path(input_path)
    dst = Path(output_path)
    dst.parent.mkdir(parents=True, exist_ok=True)

    logger.info("Encoding %s", src.name)
    count = 0
    errors = 0
    with src.open("r", encoding="utf-8") as fin, dst.open("wb") as fout:
        for line in fin:
            word = full_cleanup(line, cfg.unicode_form)
            if not word:
                continue
            record = encode_record(encoder, word)
            if "error" in record:
                errors += 1
            fout.write(orjson.dumps(record) + b"\n")
            count += 1
    logger.info("  Wrote %d records (%d errors) to %s", count, errors, dst)


def run_list_scripts(config_path: str | None) -> None:
    _, encoder = _load(config_path)
    for position, config in enumerate(encoder.configs, start=1):
        typer.echo(f"{position}. {config.name}\t[{config.alphabet}]")
