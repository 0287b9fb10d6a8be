"""Tests for script configuration and the built-in tables."""

from __future__ import annotations

import dataclasses

import pytest

from polysoundex.encoder.errors import InvalidConfiguration
from polysoundex.encoder.models import ScriptConfig, fold_case
from polysoundex.encoder.scripts import BUILTIN_SCRIPTS, DEVANAGARI, LATIN, default_scripts


class TestFoldCase:
    def test_latin(self):
        assert fold_case("b") == "B"

    def test_caseless_script(self):
        assert fold_case("क") == "क"

    def test_expanding_character_kept(self):
        assert fold_case("ß") == "ß"


class TestScriptConfig:
    def test_default_detection_is_anchored(self):
        cfg = ScriptConfig(name="t", alphabet="A-Za-z", mapping={1: "B"})
        assert cfg.matches("Bob")
        assert not cfg.matches("Bob!")
        assert not cfg.matches("")

    def test_default_detection_rejects_trailing_newline(self):
        cfg = ScriptConfig(name="t", alphabet="A-Za-z", mapping={1: "B"})
        assert not cfg.matches("Bob\n")

    def test_custom_detection(self):
        cfg = ScriptConfig(name="t", alphabet="A-Za-z", detection="^[A-Z]", mapping={1: "B"})
        assert cfg.matches("Bob and friends")
        assert not cfg.matches("bob")

    def test_normalise_upper_cases_and_filters(self):
        cfg = ScriptConfig(name="t", alphabet="A-Za-z", mapping={1: "B"})
        assert cfg.normalise("o'bri-en 2") == "OBRIEN"

    def test_lower_case_mapping_is_folded(self):
        cfg = ScriptConfig(name="t", alphabet="A-Za-z", mapping={1: "bf"})
        assert cfg.digit_for("B") == "1"
        assert cfg.digit_for("F") == "1"
        assert cfg.digit_for("b") is None

    def test_unmapped_character(self):
        assert LATIN.digit_for("A") is None
        assert LATIN.digit_for("!") is None

    def test_overlap_lowest_class_wins(self):
        cfg = ScriptConfig(name="t", alphabet="A-Z", mapping={4: "LB", 1: "B"})
        assert cfg.digit_for("B") == "1"
        assert cfg.digit_for("L") == "4"

    def test_has_mapping(self):
        assert LATIN.has_mapping
        assert not ScriptConfig(name="t", alphabet="A-Z", mapping={}).has_mapping
        assert not ScriptConfig(name="t", alphabet="A-Z", mapping=None).has_mapping

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            LATIN.name = "other"

    def test_hashable(self):
        assert hash(LATIN) == hash(LATIN)
        assert {LATIN, DEVANAGARI, LATIN} == {LATIN, DEVANAGARI}

    def test_source_mapping_copied(self):
        source = {1: "B", 6: "R"}
        cfg = ScriptConfig(name="t", alphabet="A-Z", mapping=source)
        source[5] = "M"
        assert 5 not in cfg.mapping
        assert cfg.digit_for("M") is None
        assert cfg == ScriptConfig(name="t", alphabet="A-Z", mapping={1: "B", 6: "R"})

    def test_mapping_read_only(self):
        with pytest.raises(TypeError):
            LATIN.mapping[7] = "X"
        assert LATIN.mapping[1] == ("B", "F", "P", "V")


class TestScriptConfigValidation:
    def test_class_out_of_range(self):
        with pytest.raises(InvalidConfiguration):
            ScriptConfig(name="t", alphabet="A-Z", mapping={7: "B"})
        with pytest.raises(InvalidConfiguration):
            ScriptConfig(name="t", alphabet="A-Z", mapping={0: "B"})

    def test_multi_character_entry(self):
        with pytest.raises(InvalidConfiguration):
            ScriptConfig(name="t", alphabet="A-Z", mapping={1: ["BF"]})

    def test_bad_alphabet(self):
        with pytest.raises(InvalidConfiguration):
            ScriptConfig(name="t", alphabet="Z-A", mapping={1: "B"})

    def test_bad_detection(self):
        with pytest.raises(InvalidConfiguration):
            ScriptConfig(name="t", alphabet="A-Z", detection="(", mapping={1: "B"})

    def test_empty_alphabet(self):
        with pytest.raises(InvalidConfiguration):
            ScriptConfig(name="t", alphabet="", mapping={1: "B"})

    def test_message_names_script(self):
        with pytest.raises(InvalidConfiguration, match="'broken'"):
            ScriptConfig(name="broken", alphabet="A-Z", mapping={9: "B"})


class TestBuiltinScripts:
    def test_registry(self):
        assert BUILTIN_SCRIPTS == {"latin": LATIN, "devanagari": DEVANAGARI}

    def test_default_order(self):
        assert default_scripts() == (LATIN, DEVANAGARI)

    def test_latin_classes(self):
        assert LATIN.digit_for("P") == "1"
        assert LATIN.digit_for("Q") == "2"
        assert LATIN.digit_for("T") == "3"
        assert LATIN.digit_for("L") == "4"
        assert LATIN.digit_for("N") == "5"
        assert LATIN.digit_for("R") == "6"
        for vowel in "AEIOUYHW":
            assert LATIN.digit_for(vowel) is None

    def test_devanagari_classes(self):
        assert DEVANAGARI.digit_for("क") == "1"
        assert DEVANAGARI.digit_for("ज") == "2"
        assert DEVANAGARI.digit_for("द") == "3"
        assert DEVANAGARI.digit_for("न") == "4"
        assert DEVANAGARI.digit_for("ब") == "5"
        assert DEVANAGARI.digit_for("र") == "6"
        # vowel signs are unmapped
        assert DEVANAGARI.digit_for("ि") is None
        assert DEVANAGARI.digit_for("ा") is None

    def test_devanagari_detection(self):
        assert DEVANAGARI.matches("बिराज")
        assert not DEVANAGARI.matches("Biraj")
        assert not DEVANAGARI.matches("बिराज Biraj")
