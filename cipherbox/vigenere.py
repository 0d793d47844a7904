"""Vigenère cipher: each letter is shifted by the matching letter of the key."""

from __future__ import annotations

import string
import sys
from collections.abc import Iterator, Sequence
from itertools import cycle, islice

ALPHABET = string.ascii_lowercase
EXAMPLE_MESSAGE = "je suis venu jai vu jai vaincu"

_RULE = "-" * 108


def clean_key(key: str) -> str:
    """Return ``key`` with every space removed."""
    return key.replace(" ", "")


def _check_letters(text: str, what: str, allow_space: bool) -> None:
    for char in text:
        if char == " " and allow_space:
            continue
        if char not in ALPHABET:
            raise ValueError(
                f"{what} character {char!r} is not a lowercase letter from 'a' to 'z'"
            )


def _key_letters(key: str) -> str:
    letters = clean_key(key)
    if not letters:
        raise ValueError("key must contain at least one letter")
    _check_letters(letters, "key", allow_space=False)
    return letters


def _key_stream(message: str, key: str) -> Iterator[str]:
    # Key letters line up with every position of the message, spaces included.
    return islice(cycle(_key_letters(key)), len(message))


def _combine(message: str, key: str, sign: int) -> str:
    _check_letters(message, "message", allow_space=True)
    return "".join(
        char
        if char == " "
        else ALPHABET[(ALPHABET.index(char) + sign * ALPHABET.index(k)) % len(ALPHABET)]
        for char, k in zip(message, _key_stream(message, key))
    )


def encrypt(message: str, key: str) -> str:
    """Add the key letters to the message letters, modulo 26; spaces are kept."""
    return _combine(message, key, 1)


def decrypt(message: str, key: str) -> str:
    """Subtract the key letters from the message letters, modulo 26; spaces are kept."""
    return _combine(message, key, -1)


def _bracket(items: Sequence[str]) -> str:
    return "[" + " ".join(items) + "]"


def _read_line() -> str | None:
    try:
        return input()
    except EOFError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive Vigenère cipher menu."""
    print()
    print(_RULE)
    print("Chiffre de Vigenère")
    print(
        "La clé est mise en dessous du message et chaque lettre du message "
        "est codée avec la lettre correspondante de la clé"
    )
    print()
    print(_RULE)
    print("Do you want to:")
    print("  1- crypt")
    print("  2- decrypt")
    print("?: ", end="")
    sys.stdout.flush()
    tokens = (_read_line() or "").split()
    try:
        action = int(tokens[0]) if tokens else 0
    except ValueError:
        action = 0

    if action not in (1, 2):
        print("Acceptable answer should be 1 or 2. Exiting...")
        return 1

    print()
    print(_RULE)
    print("Key to use (with space chars if you want)? :")
    key = clean_key(_read_line() or "")
    print()
    print("Used formatted key will be: ", key)
    print("Length: ", len(key))

    try:
        if action == 1:
            print("Example of message: ", EXAMPLE_MESSAGE)
            print("Warning: no uppercase, just letters from 'a' to 'z' or white space ' '")
            print()
            print("Which message do you want me to crypt:")
            line = _read_line()
            message = EXAMPLE_MESSAGE if line is None else line
            crypted = encrypt(message, key)
            print()
            print(_RULE)
            print("Clear Message Provided Slice     : ", _bracket(list(message)))
            print("Key Slice                        : ", _bracket(list(_key_stream(message, key))))
            print(_RULE)
            print("Crypted Message Slice            : ", _bracket(list(crypted)))
            print()
            print(_RULE)
            print("Clear Message Provided:   ", message)
            print("  --> Crypted Message:    ", crypted)
        else:
            print("Give me the crypted message you want me to decrypt:")
            crypted = _read_line() or ""
            clear = decrypt(crypted, key)
            print()
            print(_RULE)
            print("Crypted Message Provided Slice     : ", _bracket(list(crypted)))
            print("Key Slice                          : ", _bracket(list(_key_stream(crypted, key))))
            print(_RULE)
            print("Clear Message Slice                : ", _bracket(list(clear)))
            print()
            print(_RULE)
            print("Crypted Message Provided:   ", crypted)
            print("  --> Clear Message:        ", clear)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print()
    print(_RULE)
    return 0


if __name__ == "__main__":
    sys.exit(main())