"""Monoalphabetic substitution cipher with a fixed substitution table."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence

KEY: dict[str, str] = {
    "a": "r",
    "b": "f",
    "c": "x",
    "d": "p",
    "e": "c",
    "f": "l",
    "g": "d",
    "h": "j",
    "i": "m",
    "j": "q",
    "k": "a",
    "l": "v",
    "m": "i",
    "n": "w",
    "o": "k",
    "p": "b",
    "q": "s",
    "r": "z",
    "s": "g",
    "t": "u",
    "u": "e",
    "v": "t",
    "w": "h",
    "x": "o",
    "y": "y",
    "z": "n",
}

EXAMPLE_MESSAGE = "je suis venu jai vu jai vaincu"

_RULE = "-" * 108


def invert_key(key: Mapping[str, str]) -> dict[str, str]:
    """Build the decryption table from an encryption table."""
    return {value: letter for letter, value in key.items()}


def _substitute(message: str, table: Mapping[str, str]) -> str:
    # Spaces are removed; characters absent from the table yield nothing.
    return "".join(table.get(char, "") for char in message if char != " ")


def encrypt(message: str, key: Mapping[str, str] = KEY) -> str:
    """Substitute each letter of ``message`` using ``key``, dropping spaces."""
    return _substitute(message, key)


def decrypt(message: str, key: Mapping[str, str] = KEY) -> str:
    """Undo :func:`encrypt` for the same encryption ``key``."""
    return _substitute(message, invert_key(key))


def group_letters(text: str, size: int = 5) -> str:
    """Insert a space after every ``size`` characters of ``text``."""
    if size <= 0:
        raise ValueError("group size must be positive")
    return "".join(
        text[start : start + size] + (" " if start + size <= len(text) else "")
        for start in range(0, len(text), size)
    )


def _format_map(table: Mapping[str, str]) -> str:
    return "map[" + " ".join(f"{k}:{table[k]}" for k in sorted(table)) + "]"


def _read_line() -> str:
    try:
        return input()
    except EOFError:
        return ""


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive substitution cipher menu."""
    print()
    print(_RULE)
    print("Chiffrement par substitution")
    print("La clé est le tableau de substitution")
    print()
    print(_RULE)
    print("           key: ", _format_map(KEY))
    print("Decrypting key: ", _format_map(invert_key(KEY)))
    print()
    print()
    print(_RULE)
    print("Do you want to:")
    print("  1- crypt")
    print("  2- decrypt")
    print("?: ", end="")
    sys.stdout.flush()
    tokens = _read_line().split()
    try:
        action = int(tokens[0]) if tokens else 0
    except ValueError:
        action = 0
    print()

    if action not in (1, 2):
        print("Acceptable answer should be 1 or 2. Exiting...")
        return 1

    if action == 1:
        message_provided = EXAMPLE_MESSAGE
        print("Example of message: ", message_provided)
        print("Warning: no uppercase, just letters from 'a' to 'z' or white space ' '")
        print()
        print("Which message do you want me to crypt:")
        message_provided = _read_line()
        message = encrypt(message_provided)
        print()
        print(_RULE)
        print("Clear Message Provided:   ", message_provided, " --> Encrypted Message: ", message)
        print(
            "Clear Message Provided:   ",
            message_provided,
            " --> Encrypted Formatted Output: ",
            group_letters(message),
        )
    else:
        print("Give me the crypted message you want me to decrypt:")
        crypted_provided = _read_line()
        print()
        print(_RULE)
        print(
            "Crypted Message Provided: ",
            crypted_provided,
            " --> Decrypted Message: ",
            decrypt(crypted_provided),
        )

    print()
    print(_RULE)
    return 0


if __name__ == "__main__":
    sys.exit(main())