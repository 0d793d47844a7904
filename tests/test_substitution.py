import io
import string

import pytest

from cipherbox import substitution


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_example_message_encrypts():
    assert (
        substitution.encrypt("je suis venu jai vu jai vaincu")
        == "qcgemgtcweqrmteqrmtrmwxe"
    )


def test_invert_key_maps_back():
    inverted = substitution.invert_key(substitution.KEY)
    assert inverted["r"] == "a"
    assert inverted["n"] == "z"
    assert sorted(inverted) == list(string.ascii_lowercase)


def test_round_trip_drops_spaces():
    message = "je suis venu jai vu jai vaincu"
    assert substitution.decrypt(substitution.encrypt(message)) == message.replace(" ", "")


def test_key_is_permutation():
    assert sorted(substitution.KEY.values()) == list(string.ascii_lowercase)


def test_unknown_characters_are_dropped():
    assert substitution.encrypt("A1!") == ""
    assert substitution.encrypt("aB") == substitution.KEY["a"]


def test_custom_key_round_trip():
    key = dict(zip(string.ascii_lowercase, reversed(string.ascii_lowercase)))
    text = "the quick brown fox"
    assert substitution.decrypt(substitution.encrypt(text, key), key) == text.replace(" ", "")


def test_group_letters_trailing_space_on_full_group():
    assert substitution.group_letters("abcde", 5) == "abcde "


def test_group_letters_partial_group():
    assert substitution.group_letters("abcdefg", 5) == "abcde fg"


def test_group_letters_preserves_letters():
    text = string.ascii_lowercase
    assert substitution.group_letters(text, 4).replace(" ", "") == text


def test_group_letters_rejects_bad_size():
    with pytest.raises(ValueError):
        substitution.group_letters("abc", 0)


def test_main_rejects_bad_action(monkeypatch, capsys):
    _feed(monkeypatch, "3\n")
    assert substitution.main([]) == 1
    assert "Acceptable answer should be 1 or 2" in capsys.readouterr().out


def test_main_encrypts(monkeypatch, capsys):
    _feed(monkeypatch, "1\nje suis venu jai vu jai vaincu\n")
    assert substitution.main([]) == 0
    out = capsys.readouterr().out
    assert "Encrypted Message:  qcgemgtcweqrmteqrmtrmwxe" in out
    assert "qcgem gtcwe qrmte qrmtr mwxe" in out


def test_main_decrypts(monkeypatch, capsys):
    _feed(monkeypatch, "2\nqcgem gtcwe qrmte qrmtr mwxe\n")
    assert substitution.main([]) == 0
    assert "Decrypted Message:  jesuisvenujaivujaivaincu" in capsys.readouterr().out