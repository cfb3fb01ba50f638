"""Cyclic redundancy check over binary strings using modulo-2 division."""

from __future__ import annotations

import argparse
import sys


def _check_binary(value: str, what: str) -> None:
    if not set(value) <= {"0", "1"}:
        raise ValueError(f"{what} must be a binary string: {value!r}")


def _check_generator(generator: str) -> None:
    _check_binary(generator, "generator")
    if not generator.startswith("1"):
        raise ValueError("generator must be non-empty and start with '1'")


def xor_division(encoded: str, generator: str) -> str:
    """Divide encoded by generator modulo 2 and return the reduced bit string."""
    _check_generator(generator)
    _check_binary(encoded, "encoded")
    size = len(generator)
    if len(encoded) < size:
        raise ValueError("encoded string is shorter than the generator")

    bits = list(encoded)
    i = 0
    while i <= len(bits) - size:
        if bits[i] == "1":
            window = bits[i : i + size]
            bits[i : i + size] = ["0" if x == g else "1" for x, g in zip(window, generator)]
        while i < len(bits) and bits[i] != "1":
            i += 1
    return "".join(bits)


def _tail(remainder: str, generator: str) -> str:
    return remainder[len(remainder) - len(generator) + 1 :]


def checksum(data: str, generator: str) -> str:
    """Return the CRC bits appended to data for the given generator."""
    _check_generator(generator)
    padded = data + "0" * (len(generator) - 1)
    return _tail(xor_division(padded, generator), generator)


def encode(data: str, generator: str) -> str:
    """Return data followed by its CRC bits."""
    return data + checksum(data, generator)


def has_error(received: str, generator: str) -> bool:
    """True if the received message leaves a non-zero remainder."""
    return "1" in _tail(xor_division(received, generator), generator)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="CRC sender and receiver.")
    parser.add_argument("data", nargs="?", help="data bits")
    parser.add_argument("generator", nargs="?", help="generator polynomial bits")
    parser.add_argument("received", nargs="?", help="received message bits")
    args = parser.parse_args(argv)

    try:
        print("------Sender Side------")
        data = args.data if args.data is not None else input("Enter data (binary): ")
        generator = (
            args.generator
            if args.generator is not None
            else input("Enter generator polynomial (binary): ")
        )
        check = checksum(data.strip(), generator.strip())
        print(f"Checksum generated: {check}")
        print(f"Transmitted message: {data.strip() + check}")

        print("------Receiver Side------")
        received = (
            args.received if args.received is not None else input("Enter received message: ")
        )
        if has_error(received.strip(), generator.strip()):
            print("Error detected in transmission")
        else:
            print("No error in transmission")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())