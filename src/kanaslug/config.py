from __future__ import annotations

from dataclasses import dataclass, replace

__all__ = [
    "ConfigError",
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_SEPARATOR",
    "SlugConfig",
]

DEFAULT_MAX_LENGTH = 50
DEFAULT_SEPARATOR = "-"


class ConfigError(ValueError):
    """Raised when a slug configuration cannot produce well-formed slugs."""


@dataclass(frozen=True, slots=True)
class SlugConfig:
    """
    Settings resolved once before any conversion.

    ``max_length`` of zero or below disables truncation. ``separator`` must be
    non-empty and free of letters and digits, otherwise it would be
    indistinguishable from slug content. ``trim_truncated_separator`` controls
    whether a separator left at the truncation point is removed; it applies to
    both conversion modes.
    """

    max_length: int = DEFAULT_MAX_LENGTH
    separator: str = DEFAULT_SEPARATOR
    use_morphology: bool = True
    fold_hiragana: bool = False
    trim_truncated_separator: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.max_length, bool) or not isinstance(self.max_length, int):
            raise ConfigError(f"max_length must be an integer, got {self.max_length!r}")
        if not isinstance(self.separator, str) or not self.separator:
            raise ConfigError("separator must be a non-empty string")
        if any(ch.isalnum() for ch in self.separator):
            raise ConfigError(f"separator must not contain letters or digits: {self.separator!r}")

    @property
    def truncation_enabled(self) -> bool:
        return self.max_length > 0

    def with_options(self, **changes: object) -> SlugConfig:
        return replace(self, **changes)
