from __future__ import annotations

import dataclasses

import pytest

from kanaslug.config import ConfigError, SlugConfig


def test_defaults() -> None:
    config = SlugConfig()
    assert config.max_length == 50
    assert config.separator == "-"
    assert config.use_morphology is True
    assert config.fold_hiragana is False
    assert config.trim_truncated_separator is True
    assert config.truncation_enabled


@pytest.mark.parametrize("separator", ["", "a", "1", "x-", "_9", "漢"])
def test_rejects_unusable_separators(separator: str) -> None:
    with pytest.raises(ConfigError):
        SlugConfig(separator=separator)


def test_rejects_non_integer_length() -> None:
    with pytest.raises(ConfigError):
        SlugConfig(max_length=True)
    with pytest.raises(ConfigError):
        SlugConfig(max_length="10")  # type: ignore[arg-type]


def test_non_positive_length_disables_truncation() -> None:
    assert not SlugConfig(max_length=0).truncation_enabled
    assert not SlugConfig(max_length=-1).truncation_enabled


def test_config_is_frozen_and_copies_are_validated() -> None:
    config = SlugConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.separator = "_"  # type: ignore[misc]
    assert config.with_options(separator="_").separator == "_"
    with pytest.raises(ConfigError):
        config.with_options(separator="")
