"""Total cost of an online purchase: price, sales tax and weight-based shipping."""

from __future__ import annotations

import struct
import sys
from typing import Optional


def _f32(value: float) -> float:
    """Round to single precision, the precision the calculation is defined in."""
    return struct.unpack("f", struct.pack("f", value))[0]


_TAX_RATE = _f32(4.225 / 100)

# (upper weight bound, rate per pound); the last tier has no bound.
_TIERS = ((1, 10.0), (5, 7.0), (8, 5.0), (10, 3.0), (20, 2.0))
_HEAVY_RATE = 1.0


def shipping_cost(weight: float) -> float:
    """Shipping charge: the whole weight at the rate of the tier it falls in."""
    weight = _f32(weight)
    rate = next((r for bound, r in _TIERS if weight < bound), _HEAVY_RATE)
    return _f32(rate * weight)


def total_cost(price: float, weight: float) -> float:
    """Price plus tax plus shipping."""
    price = _f32(price)
    tax = _f32(price * _TAX_RATE)
    return _f32(_f32(price + tax) + shipping_cost(weight))


def _ask(prompt: str) -> float:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line.split():
        raise ValueError("no value given")
    return float(line.split()[0])


def main(argv: Optional[list[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    sys.stdout.write("Calculate the total cost of an online purchase\n")
    try:
        if len(argv) >= 2:
            price, weight = float(argv[0]), float(argv[1])
        else:
            price = _ask("\nEnter the item's price: ")
            weight = _ask("Enter the item's weight: ")
    except ValueError:
        sys.stderr.write("\nError: invalid input\n")
        return 1
    sys.stdout.write(f"\nTotal price: {total_cost(price, weight):.2f}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())