"""Diffie-Hellman key exchange between two parties over small integers."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """Return base**exponent % modulus; a non-positive exponent yields 1."""
    if modulus == 0:
        raise ValueError("modulus must be non-zero")
    if exponent <= 0:
        return 1
    return pow(base, exponent, modulus)


@dataclass(frozen=True)
class KeyExchange:
    """Values exchanged and derived by Alice and Bob."""

    alice_public: int
    bob_public: int
    alice_key: int
    bob_key: int

    @property
    def matches(self) -> bool:
        return self.alice_key == self.bob_key

    @property
    def shared_key(self) -> int:
        """The agreed key; raises ValueError if both sides disagree."""
        if not self.matches:
            raise ValueError("keys do not match")
        return self.alice_key


def exchange(p: int, g: int, a: int, b: int) -> KeyExchange:
    """Run the exchange for prime p, base g and secrets a (Alice) and b (Bob)."""
    alice_public = mod_exp(g, a, p)
    bob_public = mod_exp(g, b, p)
    return KeyExchange(
        alice_public=alice_public,
        bob_public=bob_public,
        alice_key=mod_exp(bob_public, a, p),
        bob_key=mod_exp(alice_public, b, p),
    )


def _ask(value: int | None, prompt: str) -> int:
    return value if value is not None else int(input(prompt))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Diffie-Hellman key exchange.")
    parser.add_argument("p", nargs="?", type=int, help="prime modulus")
    parser.add_argument("g", nargs="?", type=int, help="base")
    parser.add_argument("a", nargs="?", type=int, help="Alice's secret number")
    parser.add_argument("b", nargs="?", type=int, help="Bob's secret number")
    args = parser.parse_args(argv)

    try:
        p = _ask(args.p, "Enter a prime number (p): ")
        g = _ask(args.g, "Enter base (g): ")
        a = _ask(args.a, "Enter Alice's secret number (a): ")
        b = _ask(args.b, "Enter Bob's secret number (b): ")
        result = exchange(p, g, a, b)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Alice sends: {result.alice_public}")
    print(f"Bob sends: {result.bob_public}")
    print(f"Alice's computed key: {result.alice_key}")
    print(f"Bob's computed key: {result.bob_key}")
    if result.matches:
        print(f"Shared secret key = {result.shared_key}")
    else:
        print("Error: Keys do not match!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())