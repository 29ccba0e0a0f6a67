from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Mapping, Sequence

from .kana_table import KANA_TABLE

__all__ = [
    "SOKUON",
    "CHOONPU",
    "Step",
    "Transliterator",
    "fold_hiragana",
    "transliterate",
]

SOKUON = "ッ"
CHOONPU = "ー"
_SILENT_CHARS = frozenset({CHOONPU, " ", "　"})


@dataclass(frozen=True)
class Step:
    """One decision taken while scanning a reading."""

    rule: str
    consumed: str
    emitted: str


# A rule sees the reading and the cursor and returns (emitted, width) or None
# when it does not apply.
_Rule = Callable[["Transliterator", Sequence[str], int], "tuple[str, int] | None"]


def _sokuon_rule(engine: Transliterator, chars: Sequence[str], i: int) -> tuple[str, int] | None:
    if chars[i] != SOKUON:
        return None
    if i + 1 < len(chars):
        following = engine.table.get(chars[i + 1])
        if following:
            return following[0], 1
    return "", 1


def _silent_rule(engine: Transliterator, chars: Sequence[str], i: int) -> tuple[str, int] | None:
    if chars[i] in _SILENT_CHARS:
        return "", 1
    return None


def _combo_rule(width: int) -> _Rule:
    def _rule(engine: Transliterator, chars: Sequence[str], i: int) -> tuple[str, int] | None:
        if i + width > len(chars):
            return None
        romaji = engine.table.get("".join(chars[i:i + width]))
        if romaji is None:
            return None
        return romaji, width

    return _rule


def _ascii_rule(engine: Transliterator, chars: Sequence[str], i: int) -> tuple[str, int] | None:
    ch = chars[i]
    if ch.isascii() and ch.isalnum():
        return ch, 1
    return None


def _drop_rule(engine: Transliterator, chars: Sequence[str], i: int) -> tuple[str, int] | None:
    return "", 1


# Ordered, first match wins. Longer combinations must precede shorter ones.
RULES: tuple[tuple[str, _Rule], ...] = (
    ("sokuon", _sokuon_rule),
    ("silent", _silent_rule),
    ("combo3", _combo_rule(3)),
    ("combo2", _combo_rule(2)),
    ("combo1", _combo_rule(1)),
    ("ascii", _ascii_rule),
    ("drop", _drop_rule),
)


class Transliterator:
    """Katakana to Hepburn romaji using longest-match lookups against a fixed table."""

    def __init__(self, table: Mapping[str, str] | None = None) -> None:
        self._table = KANA_TABLE if table is None else table

    @property
    def table(self) -> Mapping[str, str]:
        return self._table

    def steps(self, reading: str) -> Iterator[Step]:
        chars = list(reading)
        i = 0
        while i < len(chars):
            for name, rule in RULES:
                outcome = rule(self, chars, i)
                if outcome is None:
                    continue
                emitted, width = outcome
                yield Step(rule=name, consumed="".join(chars[i:i + width]), emitted=emitted)
                i += width
                break

    def transliterate(self, reading: str) -> str:
        return "".join(step.emitted for step in self.steps(reading))


def fold_hiragana(text: str) -> str:
    result = []
    for ch in text:
        code = ord(ch)
        if 0x3041 <= code <= 0x3096:
            result.append(chr(code + 0x60))
        elif ch == "ゝ":
            result.append("ヽ")
        elif ch == "ゞ":
            result.append("ヾ")
        else:
            result.append(ch)
    return "".join(result)


_DEFAULT = Transliterator()


def transliterate(reading: str) -> str:
    return _DEFAULT.transliterate(reading)
