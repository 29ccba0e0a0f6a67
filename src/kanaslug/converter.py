from __future__ import annotations

import sys
from typing import Iterable

from .config import SlugConfig
from .normalize import build_slug
from .romaji import Transliterator, fold_hiragana
from .segment import Analyzer, FugashiAnalyzer, segment

__all__ = [
    "SlugConverter",
    "set_debug_logging",
    "slugify",
]

_DEBUG_LOG = False


def set_debug_logging(enabled: bool) -> None:
    global _DEBUG_LOG
    _DEBUG_LOG = enabled


def _debug_log(message: str) -> None:
    if _DEBUG_LOG:
        print(f"[kanaslug debug] {message}", file=sys.stderr)


class SlugConverter:
    """
    Turn Japanese text into a romaji slug.

    The converter holds no per-call state: the configuration, the mapping
    table and the analyzer are fixed at construction, so one instance can
    serve concurrent callers as long as the analyzer can.
    """

    def __init__(
        self,
        config: SlugConfig | None = None,
        *,
        analyzer: Analyzer | None = None,
        transliterator: Transliterator | None = None,
    ) -> None:
        self.config = config or SlugConfig()
        self.transliterator = transliterator or Transliterator()
        if self.config.use_morphology and analyzer is None:
            analyzer = FugashiAnalyzer()
        self.analyzer = analyzer

    def convert(self, text: str) -> str:
        if self.config.use_morphology:
            return self._convert_with_morphology(text)
        return self._convert_direct(text)

    def convert_many(self, texts: Iterable[str]) -> list[str]:
        return [self.convert(text) for text in texts]

    def _romanize(self, reading: str) -> str:
        if self.config.fold_hiragana:
            reading = fold_hiragana(reading)
        return self.transliterator.transliterate(reading)

    def _convert_with_morphology(self, text: str) -> str:
        readings = segment(text, True, self.analyzer)
        fragments: list[str] = []
        for reading in readings:
            romaji = self._romanize(reading)
            _debug_log(f"{reading!r} -> {romaji!r}")
            if romaji:
                fragments.append(romaji)
        return self._finish(fragments)

    def _convert_direct(self, text: str) -> str:
        (reading,) = segment(text, False)
        romaji = self._romanize(reading)
        _debug_log(f"{reading!r} -> {romaji!r}")
        return self._finish([romaji])

    def _finish(self, fragments: list[str]) -> str:
        slug = build_slug(
            fragments,
            self.config.separator,
            self.config.max_length if self.config.truncation_enabled else 0,
            strip_trailing=self.config.trim_truncated_separator,
        )
        _debug_log(f"slug: {slug!r}")
        return slug


def slugify(text: str, *, analyzer: Analyzer | None = None, **options: object) -> str:
    """One-shot conversion; ``options`` are ``SlugConfig`` fields."""
    config = SlugConfig(**options)  # type: ignore[arg-type]
    return SlugConverter(config, analyzer=analyzer).convert(text)
