from __future__ import annotations

import pytest

import kanaslug.converter as converter_module
from kanaslug.config import SlugConfig
from kanaslug.converter import SlugConverter, set_debug_logging, slugify
from kanaslug.segment import AnalyzedToken, AnalyzerUnavailableError


class _StubAnalyzer:
    readings = {
        "認証": "ニンショウ",
        "機能": "キノウ",
        "の": "ノ",
        "実装": "ジッソウ",
        "テスト": "テスト",
    }

    def __init__(self, *surfaces: str) -> None:
        self.surfaces = surfaces

    def analyze(self, text: str) -> list[AnalyzedToken]:
        return [AnalyzedToken(surface, self.readings.get(surface)) for surface in self.surfaces]


class _FailingAnalyzer:
    def __init__(self) -> None:
        raise AnalyzerUnavailableError("no dictionary")


def test_morphological_conversion_joins_words() -> None:
    analyzer = _StubAnalyzer("認証", "機能", "の", "実装")
    converter = SlugConverter(analyzer=analyzer)
    assert converter.convert("認証機能の実装") == "ninshou-kinou-no-jissou"


def test_morphological_conversion_with_custom_separator() -> None:
    converter = SlugConverter(SlugConfig(separator="_"), analyzer=_StubAnalyzer("テスト", "機能"))
    assert converter.convert("テスト機能") == "tesuto_kinou"


def test_fragments_without_romaji_are_skipped() -> None:
    converter = SlugConverter(analyzer=_StubAnalyzer("テスト", "、", "機能", "。"))
    assert converter.convert("テスト、機能。") == "tesuto-kinou"


def test_direct_conversion_ignores_analyzer() -> None:
    config = SlugConfig(use_morphology=False)
    converter = SlugConverter(config)
    assert converter.analyzer is None
    assert converter.convert("テスト") == "tesuto"
    assert converter.convert("テスト機能") == "tesuto"
    assert converter.convert("ラーメン 2") == "ramen2"


def test_truncation_strips_separator_in_morphological_mode() -> None:
    analyzer = _StubAnalyzer("認証", "機能", "の", "実装")
    assert SlugConverter(SlugConfig(max_length=16), analyzer=analyzer).convert("x") == "ninshou-kinou-no"
    assert SlugConverter(SlugConfig(max_length=14), analyzer=analyzer).convert("x") == "ninshou-kinou"
    keep = SlugConfig(max_length=14, trim_truncated_separator=False)
    assert SlugConverter(keep, analyzer=analyzer).convert("x") == "ninshou-kinou-"


def test_truncation_in_direct_mode() -> None:
    converter = SlugConverter(SlugConfig(max_length=4, use_morphology=False))
    assert converter.convert("テスト") == "tesu"
    unlimited = SlugConverter(SlugConfig(max_length=0, use_morphology=False))
    assert unlimited.convert("テスト" * 30) == "tesuto" * 30


def test_hiragana_folding_is_opt_in() -> None:
    analyzer = _StubAnalyzer("ねこ", "テスト")
    assert SlugConverter(analyzer=analyzer).convert("x") == "tesuto"
    folded = SlugConverter(SlugConfig(fold_hiragana=True), analyzer=analyzer)
    assert folded.convert("x") == "neko-tesuto"


def test_convert_many_is_independent_per_input() -> None:
    converter = SlugConverter(SlugConfig(use_morphology=False))
    assert converter.convert_many(["テスト", "", "ラーメン"]) == ["tesuto", "", "ramen"]


def test_analyzer_initialization_failure_propagates(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(converter_module, "FugashiAnalyzer", _FailingAnalyzer)
    with pytest.raises(AnalyzerUnavailableError):
        SlugConverter()


def test_slugify_helper() -> None:
    assert slugify("テスト", use_morphology=False) == "tesuto"
    assert slugify("x", analyzer=_StubAnalyzer("テスト", "機能"), separator="_") == "tesuto_kinou"


def test_debug_logging_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    set_debug_logging(True)
    try:
        SlugConverter(SlugConfig(use_morphology=False)).convert("テスト")
    finally:
        set_debug_logging(False)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[kanaslug debug]" in captured.err
    assert "tesuto" in captured.err


def test_negative_max_length_disables_truncation() -> None:
    analyzer = _StubAnalyzer("認証", "機能", "の", "実装")
    converter = SlugConverter(SlugConfig(max_length=-5), analyzer=analyzer)
    assert converter.convert("x") == "ninshou-kinou-no-jissou"
