"""Tests for config sections: defaults and validation."""

import pytest
from pydantic import ValidationError

from xkpass.config.models import DictionaryConfig, GenerateConfig


class TestDictionaryConfig:
    def test_defaults_to_bundled_list(self) -> None:
        assert DictionaryConfig().path is None

    def test_frozen(self) -> None:
        cfg = DictionaryConfig(path="words.txt")
        with pytest.raises(ValidationError):
            cfg.path = "other.txt"  # type: ignore[misc]


class TestGenerateConfig:
    def test_defaults(self) -> None:
        cfg = GenerateConfig()
        assert cfg.preset == "Default"
        assert cfg.count == 1
        assert cfg.min_entropy == 52.0

    def test_sparse_override(self) -> None:
        cfg = GenerateConfig.model_validate({"count": 5})
        assert cfg.count == 5
        assert cfg.preset == "Default"

    def test_count_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            GenerateConfig(count=0)
