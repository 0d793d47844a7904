"""Caesar shift cipher: encrypt, decrypt and brute-force attack."""

from __future__ import annotations

import string
import sys
from collections.abc import Iterator, Sequence

ALPHABET = string.ascii_lowercase
EXAMPLE_MESSAGE = "jesuisvenujaivujaivaincu"
EXAMPLE_CIPHERTEXT = "rmacqadmvcriqdcriqdiqvkc"
EXAMPLE_KEY = 8

_RULE = "-" * 108


def shifted_alphabet(key: int) -> str:
    """Return the alphabet rotated left by ``key`` positions."""
    shift = key % len(ALPHABET)
    return ALPHABET[shift:] + ALPHABET[:shift]


def _translate(message: str, table: str) -> str:
    try:
        return "".join(table[ALPHABET.index(char)] for char in message)
    except ValueError:
        bad = next(char for char in message if char not in ALPHABET)
        raise ValueError(
            f"character {bad!r} is not a lowercase letter from 'a' to 'z'"
        ) from None


def encrypt(message: str, key: int) -> str:
    """Shift every letter of ``message`` forward by ``key``."""
    return _translate(message, shifted_alphabet(key))


def decrypt(message: str, key: int) -> str:
    """Shift every letter of ``message`` back by ``key``."""
    return _translate(message, shifted_alphabet(-key))


def brute_force(ciphertext: str) -> Iterator[tuple[int, str]]:
    """Yield ``(key, plaintext)`` for every key from 1 to 25."""
    for key in range(1, len(ALPHABET)):
        yield key, decrypt(ciphertext, key)


def _bracket(letters: Sequence[str]) -> str:
    return "[" + " ".join(letters) + "]"


def _read_token() -> str:
    try:
        line = input()
    except EOFError:
        return ""
    parts = line.split()
    return parts[0] if parts else ""


def _read_int() -> int:
    try:
        return int(_read_token())
    except ValueError:
        return 0


def _show_encryption(key: int) -> None:
    print("Encryption: ", _bracket(ALPHABET), " -> ", _bracket(shifted_alphabet(key)))


def _show_decryption(key: int) -> None:
    print("Decryption: ", _bracket(ALPHABET), " -> ", _bracket(shifted_alphabet(-key)))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive Caesar cipher menu."""
    message_provided = EXAMPLE_MESSAGE
    crypted_provided = EXAMPLE_CIPHERTEXT
    print(
        "Example of messages: ",
        message_provided,
        f" --(key={EXAMPLE_KEY})--> ",
        crypted_provided,
    )
    print("Warning: no space, no uppercase, just letters from 'a' to 'z'")
    print()
    print("Do you want to:")
    print("  1- crypt")
    print("  2- decrypt")
    print("  3- attack a crypted message")
    print("  4- get just an example")
    print("?: ", end="")
    sys.stdout.flush()
    action = _read_int()

    if action not in (1, 2, 3, 4):
        print("Acceptable answer should be 1, 2, 3 or 4. Exiting...")
        return 1

    try:
        if action == 1:
            print("Which message do you want me to crypt:")
            message_provided = _read_token() or message_provided
            print("Give me the key (number between 1 to 25::")
            key = _read_int()
            print(_RULE)
            print("key: ", key)
            _show_encryption(key)
            print(
                "Clear Message Provided:   ",
                message_provided,
                " --> Encrypted Message: ",
                encrypt(message_provided, key),
            )
        elif action == 2:
            print("Give me the crypted message you want me to decrypt:")
            crypted_provided = _read_token() or crypted_provided
            print("Give me the key (number between 1 to 25::")
            key = _read_int()
            print(_RULE)
            print("key: ", key)
            _show_decryption(key)
            print()
            print(
                "Crypted Message Provided: ",
                crypted_provided,
                " --> Decrypted Message: ",
                decrypt(crypted_provided, key),
            )
            print()
        elif action == 3:
            print("Give me the crypted message you want me to attack:")
            crypted_provided = _read_token() or crypted_provided
            for key, plaintext in brute_force(crypted_provided):
                print(_RULE)
                print("key: ", key)
                _show_decryption(key)
                print()
                print(
                    "Crypted Message Provided: ",
                    crypted_provided,
                    " --> Decrypted Message: ",
                    plaintext,
                )
                print()
        else:
            print("Please find hereunder just an example:")
            for key in range(1, len(ALPHABET)):
                print(_RULE)
                print("key: ", key)
                _show_encryption(key)
                _show_decryption(key)
                print()
                print(
                    "Clear Message Provided:   ",
                    message_provided,
                    " --> Encrypted Message: ",
                    encrypt(message_provided, key),
                )
                print(
                    "Crypted Message Provided: ",
                    crypted_provided,
                    " --> Decrypted Message: ",
                    decrypt(crypted_provided, key),
                )
                print()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())