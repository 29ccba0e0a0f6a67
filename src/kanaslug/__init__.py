from .config import ConfigError, SlugConfig
from .converter import SlugConverter, slugify
from .normalize import build_slug, normalize_slug, truncate_slug
from .romaji import Transliterator, transliterate
from .segment import (
    AnalyzedToken,
    AnalyzerUnavailableError,
    FugashiAnalyzer,
    SegmentationError,
    segment,
)

__all__ = [
    "SlugConfig",
    "ConfigError",
    "SlugConverter",
    "slugify",
    "Transliterator",
    "transliterate",
    "build_slug",
    "normalize_slug",
    "truncate_slug",
    "AnalyzedToken",
    "FugashiAnalyzer",
    "AnalyzerUnavailableError",
    "SegmentationError",
    "segment",
]
