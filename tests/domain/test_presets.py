"""Tests for the preset table and mode resolution."""

from __future__ import annotations

import pytest

from xkpass.domain.errors import InvalidConfiguration
from xkpass.domain.models import (
    DEFAULT_SYMBOLS,
    WEB_SEPARATORS,
    WEB_SYMBOLS,
    CustomMode,
    PassphraseConfig,
    PresetMode,
    make_config,
)
from xkpass.domain.presets import (
    DEFAULT_PRESET,
    PRESETS,
    canonical_preset_name,
    get_preset,
    resolve_mode,
)
from xkpass.domain.types import CasePolicy


class TestPresetTable:
    def test_all_presets_present(self) -> None:
        assert set(PRESETS) == {
            "AppleID",
            "Default",
            "NTLM",
            "SecurityQ",
            "Web16",
            "Web32",
            "WiFi",
            "XKCD",
        }

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            PRESETS["Custom"] = PassphraseConfig()  # type: ignore[index]

    def test_default_preset_matches_model_defaults(self) -> None:
        assert PRESETS[DEFAULT_PRESET] == PassphraseConfig()

    def test_symbol_set_sizes(self) -> None:
        assert len(DEFAULT_SYMBOLS) == 18
        assert len(WEB_SEPARATORS) == 9
        assert len(WEB_SYMBOLS) == 13

    @pytest.mark.parametrize(
        ("name", "words", "bounds", "case", "digits", "symbol_counts", "pad"),
        [
            ("Default", 3, (4, 8), CasePolicy.EVERY_OTHER_UPPER_LOWER, (2, 2), (2, 2), 0),
            ("AppleID", 3, (5, 7), CasePolicy.RANDOM_UPPER_LOWER, (2, 2), (1, 1), 0),
            ("NTLM", 3, (5, 7), CasePolicy.FIRST_LETTER_UPPER, (1, 0), (0, 1), 0),
            ("SecurityQ", 6, (4, 8), CasePolicy.NONE, (0, 0), (0, 1), 0),
            ("Web16", 3, (4, 4), CasePolicy.RANDOM_UPPER_LOWER, (0, 0), (1, 1), 0),
            ("Web32", 4, (4, 5), CasePolicy.EVERY_OTHER_UPPER_LOWER, (2, 2), (1, 1), 0),
            ("WiFi", 6, (4, 8), CasePolicy.RANDOM_UPPER_LOWER, (4, 4), (0, 0), 63),
            ("XKCD", 4, (4, 8), CasePolicy.RANDOM_UPPER_LOWER, (0, 0), (0, 0), 0),
        ],
    )
    def test_preset_values(
        self,
        name: str,
        words: int,
        bounds: tuple[int, int],
        case: CasePolicy,
        digits: tuple[int, int],
        symbol_counts: tuple[int, int],
        pad: int,
    ) -> None:
        cfg = PRESETS[name]
        assert cfg.word_count == words
        assert (cfg.min_length, cfg.max_length) == bounds
        assert cfg.case is case
        assert (cfg.digits_before, cfg.digits_after) == digits
        assert (cfg.symbols_before, cfg.symbols_after) == symbol_counts
        assert cfg.pad_to_length == pad

    def test_character_sets(self) -> None:
        assert PRESETS["AppleID"].separators == "-:.,"
        assert PRESETS["AppleID"].symbols == "!?@&"
        assert PRESETS["SecurityQ"].separators == " "
        assert PRESETS["SecurityQ"].symbols == ".!?"
        assert PRESETS["XKCD"].separators == "-"
        assert PRESETS["XKCD"].symbols == ""
        assert PRESETS["WiFi"].separators == WEB_SEPARATORS
        assert PRESETS["WiFi"].symbols == WEB_SYMBOLS


class TestResolution:
    def test_lookup_is_case_insensitive(self) -> None:
        assert canonical_preset_name("wifi") == "WiFi"
        assert canonical_preset_name(" xkcd ") == "XKCD"
        assert get_preset("appleid") is PRESETS["AppleID"]

    def test_unknown_preset_raises(self) -> None:
        with pytest.raises(InvalidConfiguration, match="Available") as exc_info:
            get_preset("Fort Knox")
        assert exc_info.value.detail["preset"] == "Fort Knox"

    def test_preset_mode(self) -> None:
        assert resolve_mode(PresetMode("XKCD")) is PRESETS["XKCD"]

    def test_custom_mode_returns_its_config(self) -> None:
        cfg = make_config(word_count=7)
        assert resolve_mode(CustomMode(cfg)) == cfg

    def test_custom_mode_revalidates_unchecked_copy(self) -> None:
        broken = PRESETS["XKCD"].model_copy(update={"min_length": 9, "max_length": 2})
        with pytest.raises(InvalidConfiguration, match="exceeds max_length"):
            resolve_mode(CustomMode(broken))

    def test_custom_mode_revalidates_constructed_config(self) -> None:
        broken = PassphraseConfig.model_construct(word_count=0)
        with pytest.raises(InvalidConfiguration, match="word_count"):
            resolve_mode(CustomMode(broken))

    def test_unsupported_mode_raises(self) -> None:
        with pytest.raises(InvalidConfiguration):
            resolve_mode("XKCD")  # type: ignore[arg-type]
