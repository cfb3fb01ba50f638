import string

import pytest

from netcrypt.caesar import caesar, main


def test_known_shift():
    assert caesar("Hello, World!", 3) == "Khoor, Zruog!"


def test_wraps_around_alphabet():
    assert caesar("xyz", 3) == "abc"


@pytest.mark.parametrize("shift", range(-30, 31, 7))
def test_round_trip(shift):
    text = "The quick brown Fox, 42 jumps!"
    assert caesar(caesar(text, shift), -shift) == text


@pytest.mark.parametrize("shift", [0, 26, -26, 52])
def test_full_turn_is_identity(shift):
    assert caesar(string.ascii_letters, shift) == string.ascii_letters


def test_negative_shift_equals_complement():
    assert caesar("Attack at dawn", -5) == caesar("Attack at dawn", 21)


def test_non_letters_unchanged():
    text = "123 !?-_ é ü"
    assert caesar(text, 11) == text


def test_case_is_preserved():
    result = caesar("AbCdE", 4)
    assert [c.isupper() for c in result] == [c.isupper() for c in "AbCdE"]


def test_main_with_arguments(capsys):
    assert main(["Hello there", "5"]) == 0
    out = capsys.readouterr().out
    assert f"Encrypted: {caesar('Hello there', 5)}" in out
    assert "Decrypted: Hello there" in out


def test_main_prompts(monkeypatch, capsys):
    answers = iter(["Hello", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"Encrypted: {caesar('Hello', 3)}" in out
    assert "Decrypted: Hello" in out