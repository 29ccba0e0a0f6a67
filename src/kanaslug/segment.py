from __future__ import annotations

import importlib.util
import shlex
import warnings
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from .tools import get_unidic_dicdir

__all__ = [
    "AnalyzedToken",
    "Analyzer",
    "AnalyzerUnavailableError",
    "FugashiAnalyzer",
    "SegmentationError",
    "UNKNOWN_READING",
    "reading_for_token",
    "segment",
]

UNKNOWN_READING = "*"

# Feature names probed for the katakana reading, UniDic first.
_READING_ATTRS = ("kana", "reading", "reading_form", "pron", "pronunciation")
# IPA-style feature tuples keep the reading at this position.
_IPA_READING_INDEX = 7


class AnalyzerUnavailableError(RuntimeError):
    """Raised when the morphological analyzer cannot be initialized."""


class SegmentationError(RuntimeError):
    """Raised when the analyzer fails while splitting text into tokens."""


@dataclass(frozen=True)
class AnalyzedToken:
    surface: str
    reading: str | None = None


class Analyzer(Protocol):
    def analyze(self, text: str) -> Iterable[AnalyzedToken]:
        ...


def reading_for_token(token: AnalyzedToken) -> str:
    """Prefer the analyzer's reading; the surface stands in when it is missing or unknown."""
    if token.reading and token.reading != UNKNOWN_READING:
        return token.reading
    return token.surface


def segment(text: str, use_morphology: bool, analyzer: Analyzer | None = None) -> list[str]:
    """
    Split ``text`` into readings.

    Without morphology the whole text is the single reading and the analyzer
    is never consulted. Otherwise each analyzer token contributes its reading
    (or surface), and tokens that end up empty are dropped.
    """
    if not use_morphology:
        return [text]
    if analyzer is None:
        raise ValueError("Morphological segmentation requires an analyzer.")
    try:
        tokens = list(analyzer.analyze(text))
    except AnalyzerUnavailableError:
        raise
    except Exception as exc:
        raise SegmentationError(f"Morphological analysis failed: {exc}") from exc
    readings: list[str] = []
    for token in tokens:
        reading = reading_for_token(token)
        if reading:
            readings.append(reading)
    return readings


class FugashiAnalyzer:
    """Fugashi (MeCab) tokenizer exposing only surface and reading per token."""

    def __init__(self) -> None:
        try:
            from fugashi import GenericTagger, Tagger  # type: ignore
            from fugashi import fugashi as fugashi_core  # type: ignore
        except ImportError as exc:
            raise AnalyzerUnavailableError(
                "Morphological mode requires 'fugashi' (MeCab) to be installed."
            ) from exc

        dicdir = get_unidic_dicdir()
        if dicdir:
            args = f"-d {shlex.quote(str(dicdir))}"
            feature_wrapper = getattr(fugashi_core, "UnidicFeatures29", None)
            try:
                if feature_wrapper is not None:
                    self._tagger = GenericTagger(args, feature_wrapper)
                else:
                    self._tagger = GenericTagger(args)
            except RuntimeError as exc:
                raise AnalyzerUnavailableError(
                    f"Failed to initialize UniDic dictionary at '{dicdir}': {exc}"
                ) from exc
        else:
            if importlib.util.find_spec("unidic_lite") is None:
                # Reported at the caller of SlugConverter(), two frames up.
                warnings.warn(
                    "No UniDic dictionary detected; falling back to the default MeCab dictionary.",
                    RuntimeWarning,
                    stacklevel=3,
                )
            try:
                self._tagger = Tagger()
            except RuntimeError as exc:
                raise AnalyzerUnavailableError(f"Failed to initialize MeCab: {exc}") from exc

    def analyze(self, text: str) -> list[AnalyzedToken]:
        if not text:
            return []
        tokens: list[AnalyzedToken] = []
        for raw in self._tagger(text):
            surface = raw.surface
            if not surface:
                continue
            tokens.append(AnalyzedToken(surface=surface, reading=_extract_reading(raw)))
        return tokens


def _extract_reading(token) -> Optional[str]:
    feature = getattr(token, "feature", None)
    if feature is None:
        return None
    for attr in _READING_ATTRS:
        if hasattr(feature, attr):
            value = getattr(feature, attr)
        else:
            try:
                value = feature[attr]
            except (KeyError, TypeError, IndexError):
                value = None
        if value and value != UNKNOWN_READING:
            return str(value)
    if isinstance(feature, (tuple, list)) and len(feature) > _IPA_READING_INDEX:
        value = feature[_IPA_READING_INDEX]
        if value and value != UNKNOWN_READING:
            return str(value)
    return None
