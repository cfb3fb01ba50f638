"""Playfair digraph cipher with I and J sharing a cell."""

from __future__ import annotations

import argparse
import string
import sys

_ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"


def _normalise(text: str) -> str:
    """Keep ASCII letters, upper-cased, with J folded into I."""
    return "".join(
        "I" if ch.upper() == "J" else ch.upper() for ch in text if ch in string.ascii_letters
    )


def prepare_text(text: str) -> str:
    """Split text into digraphs, separating doubled letters with X and padding with X."""
    clean = _normalise(text)
    prepared = []
    i = 0
    while i < len(clean):
        first = clean[i]
        prepared.append(first)
        if i + 1 < len(clean):
            if clean[i + 1] == first:
                prepared.append("X")
                i += 1
            else:
                prepared.append(clean[i + 1])
                i += 2
        else:
            i += 1
    if len(prepared) % 2:
        prepared.append("X")
    return "".join(prepared)


class PlayfairCipher:
    """A Playfair cipher keyed by a 5x5 letter square."""

    def __init__(self, key: str) -> None:
        letters = "".join(dict.fromkeys(_normalise(key) + _ALPHABET))
        self.matrix = tuple(letters[row * 5 : row * 5 + 5] for row in range(5))
        self._position = {ch: divmod(index, 5) for index, ch in enumerate(letters)}

    def encrypt(self, text: str) -> str:
        """Prepare text and encrypt it."""
        return self._transform(prepare_text(text), 1)

    def decrypt(self, text: str) -> str:
        """Decrypt text; its letters must form whole digraphs."""
        letters = _normalise(text)
        if len(letters) % 2:
            raise ValueError("ciphertext must have an even number of letters")
        return self._transform(letters, 4)

    def _transform(self, text: str, shift: int) -> str:
        matrix = self.matrix
        result = []
        for a, b in zip(text[::2], text[1::2]):
            r1, c1 = self._position[a]
            r2, c2 = self._position[b]
            if r1 == r2:
                result += [matrix[r1][(c1 + shift) % 5], matrix[r2][(c2 + shift) % 5]]
            elif c1 == c2:
                result += [matrix[(r1 + shift) % 5][c1], matrix[(r2 + shift) % 5][c2]]
            else:
                result += [matrix[r1][c2], matrix[r2][c1]]
        return "".join(result)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Playfair cipher.")
    parser.add_argument("key", nargs="?", help="cipher key")
    parser.add_argument("plaintext", nargs="?", help="text to encrypt")
    args = parser.parse_args(argv)

    key = args.key if args.key is not None else input("Enter key: ")
    plaintext = args.plaintext if args.plaintext is not None else input("Enter plaintext: ")

    cipher = PlayfairCipher(key)
    prepared = prepare_text(plaintext)
    try:
        encrypted = cipher.encrypt(plaintext)
        decrypted = cipher.decrypt(encrypted)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print()
    print(f"Prepared text: {prepared}")
    print(f"Encrypted text: {encrypted}")
    print(f"Decrypted text: {decrypted}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())