import pytest

from numwords.cli import is_number, main
from numwords.dictionary import load_dictionary
from numwords.speller import spell_number

_SMALL = [
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen",
]
_TENS = ["twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]
_SCALES = [
    "thousand", "million", "billion", "trillion", "quadrillion", "quintillion",
    "sextillion", "septillion", "octillion", "nonillion", "decillion",
    "undecillion",
]


def _dictionary_text():
    lines = [f"{number}: {word}" for number, word in enumerate(_SMALL)]
    lines += [f"{(i + 2) * 10}: {word}" for i, word in enumerate(_TENS)]
    lines.append("100: hundred")
    lines += [f"1{'000' * (i + 1)}: {word}" for i, word in enumerate(_SCALES)]
    return "\n".join(lines) + "\n"


@pytest.fixture
def dict_path(tmp_path):
    path = tmp_path / "custom.dict"
    path.write_text(_dictionary_text(), encoding="utf-8")
    return path


def test_is_number():
    assert is_number("0123456789") is True
    assert is_number("") is True
    assert is_number("12a") is False
    assert is_number("-1") is False


def test_custom_dictionary(dict_path, capsys):
    assert main(["42", str(dict_path)]) == 0
    assert capsys.readouterr().out == "forty two\n"


def test_output_matches_speller(dict_path, capsys):
    assert main(["1000001", str(dict_path)]) == 0
    expected = spell_number(load_dictionary(dict_path), "1000001") + "\n"
    assert capsys.readouterr().out == expected


def test_default_dictionary(tmp_path, monkeypatch, capsys):
    (tmp_path / "srcs").mkdir()
    (tmp_path / "srcs" / "numbers.dict").write_text(_dictionary_text(), encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main(["0"]) == 0
    assert capsys.readouterr().out == "zero\n"


def test_invalid_number(capsys):
    assert main(["12a"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


@pytest.mark.parametrize("args", [[], ["1", "2", "3"]])
def test_wrong_argument_count(args, capsys):
    assert main(args) == 1
    assert capsys.readouterr().err == "Error! Number of arguments is incorrect\n"


def test_missing_dictionary(tmp_path, capsys):
    assert main(["5", str(tmp_path / "absent.dict")]) == 1
    assert capsys.readouterr().err == "Dict Error\n"


def test_incomplete_dictionary(tmp_path, capsys):
    path = tmp_path / "short.dict"
    path.write_text("0: zero\n1: one\n", encoding="utf-8")
    assert main(["1", str(path)]) == 1
    assert capsys.readouterr().err == "Dict Error\n"


def test_unspellable_number_with_dictionary(dict_path, capsys):
    assert main(["4x", str(dict_path)]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_number_too_large(dict_path, capsys):
    assert main(["1" * 40, str(dict_path)]) == 1
    assert capsys.readouterr().err == "Error\n"