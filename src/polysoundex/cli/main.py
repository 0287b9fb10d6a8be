"""Main Typer application."""

from __future__ import annotations

from typing import Optional

import typer

app = typer.Typer(
    name="polysoundex",
    help="Multi-script Soundex-style phonetic codes.",
    no_args_is_help=True,
)

_CONFIG_HELP = "Path to config YAML (built-in scripts when omitted)"


@app.command()
def encode(
    words: list[str] = typer.Argument(..., help="Words to encode"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
) -> None:
    """Print the phonetic code of each word."""
    from .encode_cmd import run_encode

    failures = run_encode(words, config)
    if failures:
        raise typer.Exit(code=1)


@app.command()
def encode_file(
    input_path: str = typer.Argument(..., help="Text file, one word per line"),
    output_path: str = typer.Argument(..., help="Destination JSONL file"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
) -> None:
    """Encode every line of a text file into JSONL records."""
    from .encode_cmd import run_encode_file

    run_encode_file(input_path, output_path, config)


@app.command()
def scripts(
    config: Optional[str] = typer.Option(None, "--config", "-c", help=_CONFIG_HELP),
) -> None:
    """List configured scripts in the order they are tried."""
    from .encode_cmd import run_list_scripts

    run_list_scripts(config)


if __name__ == "__main__":
    app()
