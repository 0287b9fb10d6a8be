"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from polysoundex.encoder.phonetic_encoder import PhoneticEncoder
from polysoundex.encoder.scripts import default_scripts

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def config_path() -> Path:
    return FIXTURES_DIR / "config_test.yaml"


@pytest.fixture
def words_path() -> Path:
    return FIXTURES_DIR / "words.txt"


@pytest.fixture
def encoder() -> PhoneticEncoder:
    return PhoneticEncoder(default_scripts())
