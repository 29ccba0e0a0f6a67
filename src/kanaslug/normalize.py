from __future__ import annotations

import re
import string
from typing import Iterable

__all__ = [
    "build_slug",
    "normalize_slug",
    "truncate_slug",
]

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _collapse(text: str, separator: str) -> str:
    if not separator:
        return text
    pattern = re.compile(f"(?:{re.escape(separator)}){{2,}}")
    return pattern.sub(lambda _: separator, text)


def _filter(text: str, separator: str) -> str:
    kept: list[str] = []
    i = 0
    while i < len(text):
        if separator and text.startswith(separator, i):
            kept.append(separator)
            i += len(separator)
            continue
        ch = text[i]
        if ("a" <= ch <= "z") or ("0" <= ch <= "9"):
            kept.append(ch)
        i += 1
    return "".join(kept)


def _trim(text: str, separator: str) -> str:
    if not separator:
        return text
    while text.startswith(separator):
        text = text[len(separator):]
    while text.endswith(separator):
        text = text[: -len(separator)]
    return text


def normalize_slug(text: str, separator: str) -> str:
    """
    Lowercase ``text`` and reduce it to ``[a-z0-9]`` plus single, inner
    occurrences of ``separator``.

    The separator is matched literally. Collapsing runs again after the
    character filter keeps the result free of adjacent separators even when
    dropped characters sat between two of them, so the function is
    idempotent.
    """
    text = text.translate(_ASCII_LOWER)
    text = _collapse(text, separator)
    text = _filter(text, separator)
    text = _collapse(text, separator)
    return _trim(text, separator)


def truncate_slug(
    slug: str,
    max_length: int,
    separator: str,
    *,
    strip_trailing: bool = True,
) -> str:
    """
    Cut ``slug`` to ``max_length`` code points. A non-positive limit disables
    truncation. With ``strip_trailing`` a separator left at the cut (or the
    leading part of a multi-character separator) is removed.
    """
    if max_length <= 0 or len(slug) <= max_length:
        return slug
    slug = slug[:max_length]
    if strip_trailing and separator:
        for width in range(len(separator), 0, -1):
            if slug.endswith(separator[:width]):
                slug = slug[:-width]
                break
    return slug


def build_slug(
    fragments: Iterable[str],
    separator: str,
    max_length: int,
    *,
    strip_trailing: bool = True,
) -> str:
    joined = separator.join(fragments)
    slug = normalize_slug(joined, separator)
    return truncate_slug(slug, max_length, separator, strip_trailing=strip_trailing)
