"""Textbook RSA over small primes, one character at a time."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable
from dataclasses import dataclass

from .diffie_hellman import mod_exp


@dataclass(frozen=True)
class KeyPair:
    """An RSA exponent pair sharing modulus n."""

    e: int
    d: int
    n: int

    @property
    def public_key(self) -> tuple[int, int]:
        return (self.e, self.n)

    @property
    def private_key(self) -> tuple[int, int]:
        return (self.d, self.n)


def mod_inverse(e: int, phi: int) -> int:
    """Smallest d in [1, phi) with e*d = 1 (mod phi), found by search."""
    for d in range(1, phi):
        if e * d % phi == 1:
            return d
    raise ValueError(f"{e} has no inverse modulo {phi}")


def generate_keys(p: int, q: int, e: int = 7) -> KeyPair:
    """Build keys from primes p and q, raising e until it is coprime with phi."""
    if p < 2 or q < 2:
        raise ValueError("p and q must be primes")
    n = p * q
    phi = (p - 1) * (q - 1)
    while math.gcd(e, phi) != 1:
        e += 1
    return KeyPair(e=e, d=mod_inverse(e, phi), n=n)


def encrypt(message: str, public_key: tuple[int, int]) -> list[int]:
    """Encrypt each character code of message."""
    e, n = public_key
    return [mod_exp(ord(ch), e, n) for ch in message]


def decrypt(values: Iterable[int], private_key: tuple[int, int]) -> str:
    """Decrypt a sequence of values back to text."""
    d, n = private_key
    return "".join(chr(mod_exp(value, d, n)) for value in values)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="RSA demonstration with small primes.")
    parser.add_argument("message", nargs="?", help="message to encrypt")
    args = parser.parse_args(argv)

    keys = generate_keys(17, 11)
    print(f"Public Key: ({keys.e}, {keys.n})")
    print(f"Private Key: ({keys.d}, {keys.n})")

    message = args.message if args.message is not None else input("Enter a message: ")
    values = encrypt(message, keys.public_key)
    print("Encrypted values: " + "".join(f"{value} " for value in values))
    print(f"Decrypted message: {decrypt(values, keys.private_key)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())