"""Spelling of decimal numbers with a number dictionary."""

from __future__ import annotations

from numwords.dictionary import NumberDictionary

_DIGITS = frozenset("0123456789")


class _Words:
    """Collects names, separating them with single spaces."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._started = False

    def add(self, word: str) -> None:
        if self._started:
            self._parts.append(" ")
        self._started = True
        self._parts.append(word)

    def add_bare(self, word: str) -> None:
        # A lone zero is written without a separator and starts nothing.
        self._parts.append(word)

    def text(self) -> str:
        return "".join(self._parts)


def leading_group(number: str) -> str:
    """Return the leading digits that precede the full groups of three."""
    return number[: (len(number) - 1) % 3 + 1]


def group_is_zero(group: str) -> bool:
    """Tell whether every digit of ``group`` is zero."""
    return all(digit == "0" for digit in group)


def _spell_hundreds(dictionary: NumberDictionary, digits: str, words: _Words) -> None:
    length = len(digits)
    if length >= 3 and digits[-3] != "0":
        words.add(dictionary.units[int(digits[-3])])
        words.add(dictionary.scales[0])
    if length >= 2 and digits[-2] == "1":
        words.add(dictionary.teens[int(digits[-1])])
        return
    if length >= 2 and digits[-2] != "0":
        words.add(dictionary.tens[int(digits[-2])])
    if length == 1 and digits == "0":
        words.add_bare(dictionary.units[0])
    elif length > 0 and digits[-1] != "0":
        words.add(dictionary.units[int(digits[-1])])


def spell_number(dictionary: NumberDictionary, number: str) -> str:
    """Spell the decimal string ``number`` using the names in ``dictionary``."""
    if not set(number) <= _DIGITS:
        raise ValueError(f"not a number: {number!r}")
    if len(number) > dictionary.max_digits:
        raise ValueError(f"number too large: {len(number)} digits")

    words = _Words()
    rest = number
    while len(rest) > 3:
        group = leading_group(rest)
        scale = (len(rest) - 1) // 3
        _spell_hundreds(dictionary, group, words)
        if not group_is_zero(group):
            words.add(dictionary.scales[scale])
        rest = rest[len(group):]
    _spell_hundreds(dictionary, rest, words)
    return words.text()