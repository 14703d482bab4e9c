"""Loading of number-name dictionaries.

A dictionary file holds lines of the form ``<number>: <name>``. Every
entry is looked up by searching the text for the first occurrence of the
number; the name is whatever follows the colon on that line, with the
leading spaces removed.
"""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Optional, Union

_SCALE_COUNT = 13  # hundred, then thousand up to 10**36


class DictError(Exception):
    """Raised when a dictionary cannot be read or lacks an entry."""

    def __init__(self, message: str = "Dict Error") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class NumberDictionary:
    """Names of the numbers needed to spell any integer.

    ``units`` is indexed by digit (0-9), ``teens`` by the second digit of
    10-19, ``tens`` by the first digit of 20-90 (entries 0 and 1 are unused)
    and ``scales`` by power of a thousand, with index 0 holding "100".
    """

    units: tuple[Optional[str], ...]
    teens: tuple[Optional[str], ...]
    tens: tuple[Optional[str], ...]
    scales: tuple[Optional[str], ...]

    @property
    def max_digits(self) -> int:
        """The longest number these scales can spell."""
        return 3 * len(self.scales)


def dictionary_keys() -> Iterator[str]:
    """Yield, in lookup order, every number a dictionary must name."""
    for value in range(10):
        yield str(value)
    for value in range(10, 20):
        yield str(value)
    for value in range(20, 100, 10):
        yield str(value)
    yield "100"
    for power in range(1, _SCALE_COUNT):
        yield "1" + "000" * power


def find_entry(text: str, key: str) -> str:
    """Return the text from the first occurrence of ``key`` onwards."""
    position = text.find(key)
    if position < 0:
        raise DictError()
    return text[position:]


def entry_value(line: str) -> str:
    """Return the name after the colon on the first line of ``line``."""
    first_line = line.split("\n", 1)[0]
    colon = first_line.find(":")
    if colon < 0:
        raise DictError()
    value = first_line[colon + 1:].lstrip(" ")
    if not value:
        raise DictError()
    return value


def parse_dictionary(text: str) -> NumberDictionary:
    """Build a dictionary from the contents of a dictionary file."""
    units: list[Optional[str]] = [None] * 10
    teens: list[Optional[str]] = [None] * 10
    tens: list[Optional[str]] = [None] * 10
    scales: list[Optional[str]] = [None] * _SCALE_COUNT

    for key in dictionary_keys():
        value = entry_value(find_entry(text, key))
        if len(key) == 1:
            units[int(key)] = value
        elif len(key) == 2 and key[0] == "1":
            teens[int(key[1])] = value
        elif len(key) == 2:
            tens[int(key[0])] = value
        else:
            scales[(len(key) - 1) // 3] = value

    return NumberDictionary(tuple(units), tuple(teens), tuple(tens), tuple(scales))


def load_dictionary(path: Union[str, PathLike]) -> NumberDictionary:
    """Read and parse the dictionary file at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as error:
        raise DictError() from error
    return parse_dictionary(text)