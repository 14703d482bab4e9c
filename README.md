# numwords

Turns a non-negative whole number, given as a string of decimal digits,
into its name in words, such as `42` → `forty two`. Every word comes from
a plain-text dictionary file, so you can change the wording or the
language by editing that file.

## Dictionary format

Each line has a number, a colon and the word for that number:

```
0: zero
1: one
...
19: nineteen
20: twenty
...
90: ninety
100: hundred
1000: thousand
1000000: million
...
```

The dictionary must name 0–9, 10–19, the tens 20–90, 100, and every power
of one thousand from 1000 up to 10^36 (a 1 followed by 36 zeros).

Each entry is found by searching the whole text for the first place the
number's digits appear; the word is whatever follows the first colon on
that line, with leading spaces removed. Because of this, list the entries
in ascending order, as above, so that for example `1` is met on its own
line before it is met inside `10`. If a number cannot be found, or its line
has no colon or nothing after the colon, loading fails with `DictError`
("Dict Error"). The file is read as UTF-8.

## Command line

```
numwords NUMBER [DICTIONARY]
```

- With one argument, the number must consist of the digits 0–9 only,
  otherwise `Error` is printed. The words are then looked up in
  `srcs/numbers.dict`, relative to the current directory.
- With two arguments, the second argument is the path of the dictionary
  to use.

The words go to standard output followed by a newline. On failure a
message goes to standard error and the exit status is 1:

- `Error` — the number is not made of digits, or is longer than the
  dictionary can spell (39 digits).
- `Dict Error` — the dictionary cannot be read or lacks an entry.
- `Error! Number of arguments is incorrect` — not one or two arguments.

```
$ numwords 1234567 numbers.dict
one million two hundred thirty four thousand five hundred sixty seven
$ numwords 12a
Error
```

The same command can be run as `python -m numwords.cli`.

## Library

```python
from numwords.dictionary import load_dictionary, parse_dictionary
from numwords.speller import spell_number

words = load_dictionary("numbers.dict")
print(spell_number(words, "1005"))   # one thousand five
print(spell_number(words, "0"))      # zero
```

- `numwords.dictionary`
  - `load_dictionary(path)` reads and parses a dictionary file;
    `parse_dictionary(text)` does the same from the text itself. Both
    return a `NumberDictionary` and raise `DictError` on failure.
  - `NumberDictionary` is a frozen dataclass with the tuples `units`,
    `teens`, `tens` and `scales` (`scales[0]` is the word for 100,
    `scales[n]` the word for 1000^n) and the property `max_digits`.
  - `dictionary_keys()` yields every number a dictionary must name, in
    lookup order; `find_entry(text, key)` and `entry_value(line)` are the
    two lookup steps.
- `numwords.speller`
  - `spell_number(dictionary, number)` returns the words for a digit
    string, separated by single spaces. It raises `ValueError` if the
    string holds anything but digits or is longer than
    `dictionary.max_digits`.
  - `leading_group(number)` returns the leading one to three digits that
    come before the full groups of three; `group_is_zero(group)` tells
    whether a group is all zeros.
- `numwords.cli`
  - `main(argv=None)` runs the command and returns the exit status;
    `is_number(text)` is the digit check it uses.

## What it does not do

- It ships no dictionary file; you supply one, either at
  `srcs/numbers.dict` or by passing its path.
- It handles non-negative integers only: no signs, decimal points,
  fractions or ordinals, and no words such as "and" between parts.