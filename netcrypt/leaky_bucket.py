"""Leaky bucket traffic shaping simulation."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Tick:
    """One second of transmission from the bucket."""

    time: int
    sent: int
    remaining: int


@dataclass(frozen=True)
class Arrival:
    """An incoming burst and the transmission it caused."""

    incoming: int
    overflow: bool
    pending: int
    ticks: tuple[Tick, ...]


def simulate(output_rate: int, bucket_size: int, packets: Iterable[int]) -> Iterator[Arrival]:
    """Yield one Arrival per incoming burst until a burst of 0 or the input ends."""
    if output_rate <= 0:
        raise ValueError("output rate must be positive")
    if bucket_size < 0:
        raise ValueError("bucket size must not be negative")
    return _run(output_rate, bucket_size, packets)


def _run(output_rate: int, bucket_size: int, packets: Iterable[int]) -> Iterator[Arrival]:
    clock = itertools.count()
    for incoming in packets:
        if incoming == 0:
            return
        overflow = not 0 <= incoming <= bucket_size
        pending = 0 if overflow else incoming
        ticks = []
        remaining = pending
        while remaining:
            sent = min(output_rate, remaining)
            remaining -= sent
            ticks.append(Tick(time=next(clock), sent=sent, remaining=remaining))
        yield Arrival(incoming=incoming, overflow=overflow, pending=pending, ticks=tuple(ticks))


def _prompted_packets() -> Iterator[int]:
    while True:
        yield int(input("Enter incoming packet:(0 to stop)"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Leaky bucket simulation.")
    parser.add_argument("--rate", type=int, help="packets transmitted per second")
    parser.add_argument("--size", type=int, help="bucket capacity")
    parser.add_argument("packets", nargs="*", type=int, help="incoming bursts")
    args = parser.parse_args(argv)

    try:
        if args.rate is None or args.size is None:
            parts = input("Enter outputRate and bucketSize: ").split()
            if len(parts) != 2:
                raise ValueError("expected two integers")
            rate, size = (int(part) for part in parts)
        else:
            rate, size = args.rate, args.size
        packets = args.packets if args.packets else _prompted_packets()
        for arrival in simulate(rate, size, packets):
            if arrival.overflow:
                print("Overflow!! Dropping packets")
            print("------------------", end="")
            print(f"Incoming packet :{arrival.incoming}")
            print(f"Transmission left:{arrival.pending}")
            for tick in arrival.ticks:
                print(f"Time:{tick.time}sec-Transmitted{rate} packets")
                print(f"Bytes remaining:{tick.remaining}")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())