"""Command line: spell a number with a number dictionary."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from numwords.dictionary import DictError, load_dictionary
from numwords.speller import spell_number

DEFAULT_DICTIONARY = "srcs/numbers.dict"

_DIGITS = frozenset("0123456789")


def is_number(text: str) -> bool:
    """Tell whether ``text`` consists only of ASCII decimal digits."""
    return set(text) <= _DIGITS


def _spell_and_print(number: str, path: str) -> int:
    try:
        dictionary = load_dictionary(path)
    except DictError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    try:
        text = spell_number(dictionary, number)
    except ValueError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write(text + "\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Spell ``NUMBER`` using ``[DICTIONARY]``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 1:
        if not is_number(args[0]):
            sys.stderr.write("Error\n")
            return 1
        return _spell_and_print(args[0], DEFAULT_DICTIONARY)
    if len(args) == 2:
        return _spell_and_print(args[0], args[1])
    sys.stderr.write("Error! Number of arguments is incorrect\n")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())