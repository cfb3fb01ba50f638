"""Vigenere cipher over ASCII letters."""

from __future__ import annotations

import argparse
import itertools
import string
import sys


def _check_key(key: str) -> None:
    if not key or not all(ch in string.ascii_letters for ch in key):
        raise ValueError("key must be a non-empty string of letters")


def generate_key(text: str, key: str) -> str:
    """Repeat the upper-cased key once for every letter of text."""
    _check_key(key)
    letters = sum(ch in string.ascii_letters for ch in text)
    return "".join(itertools.islice(itertools.cycle(key.upper()), letters))


def _shift(text: str, key: str, direction: int) -> str:
    shifts = iter(generate_key(text, key))
    result = []
    for ch in text:
        if ch in string.ascii_letters:
            base = ord("A") if ch.isupper() else ord("a")
            offset = ord(next(shifts)) - ord("A")
            result.append(chr((ord(ch.upper()) - ord("A") + direction * offset) % 26 + base))
        else:
            result.append(ch)
    return "".join(result)


def encrypt(text: str, key: str) -> str:
    """Encrypt letters of text, keeping case and other characters."""
    return _shift(text, key, 1)


def decrypt(text: str, key: str) -> str:
    """Reverse encrypt for the same key."""
    return _shift(text, key, -1)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Vigenere cipher.")
    parser.add_argument("text", nargs="?", help="text to encrypt")
    parser.add_argument("key", nargs="?", help="cipher key")
    args = parser.parse_args(argv)

    text = args.text if args.text is not None else input("Enter the text: ")
    key = args.key if args.key is not None else input("Enter the key: ").strip()
    try:
        encrypted = encrypt(text, key)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Encrypted Text: {encrypted}")
    print(f"Decrypted Text: {decrypt(encrypted, key)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())