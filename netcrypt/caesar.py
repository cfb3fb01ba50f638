"""Caesar shift cipher over ASCII letters."""

from __future__ import annotations

import argparse
import string
import sys


def caesar(text: str, shift: int) -> str:
    """Shift every ASCII letter by shift places, keeping case; other characters stay."""
    shift %= 26

    def rotate(ch: str) -> str:
        if ch not in string.ascii_letters:
            return ch
        base = ord("A") if ch.isupper() else ord("a")
        return chr((ord(ch) - base + shift) % 26 + base)

    return "".join(rotate(ch) for ch in text)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Caesar cipher.")
    parser.add_argument("text", nargs="?", help="plain text")
    parser.add_argument("shift", nargs="?", type=int, help="shift value")
    args = parser.parse_args(argv)

    try:
        text = args.text if args.text is not None else input("Enter plain text: ")
        shift = args.shift if args.shift is not None else int(input("Enter shift value: "))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    encrypted = caesar(text, shift)
    print(f"Encrypted: {encrypted}")
    print(f"Decrypted: {caesar(encrypted, -shift)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())