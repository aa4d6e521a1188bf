"""Circumference of a circle from its radius."""

from __future__ import annotations

import math
import struct
import sys
from typing import Optional


def _f32(value: float) -> float:
    """Round to single precision, the precision the calculation is defined in."""
    return struct.unpack("f", struct.pack("f", value))[0]


def circumference(radius: float) -> float:
    """Return 2 * pi * radius. Raises ValueError unless the radius is positive."""
    if not radius > 0:
        raise ValueError("the radius must be positive")
    return _f32(2 * math.pi * _f32(radius))


def _read_radius() -> float:
    while True:
        sys.stdout.write("\nPlease enter a positive radius: ")
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError("no radius given")
        tokens = line.split()
        if not tokens:
            continue
        try:
            radius = float(tokens[0])
        except ValueError:
            sys.stderr.write("Error: invalid input\n")
            continue
        if radius > 0:
            return radius


def main(argv: Optional[list[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    sys.stdout.write(
        "Welcome to the Circumference Calculation Program\n"
        "Enter the radius and I'll find the circumference of the circle!\n"
    )
    try:
        if argv:
            radius = float(argv[0])
            result = circumference(radius)
        else:
            radius = _read_radius()
            result = circumference(radius)
    except ValueError:
        sys.stderr.write("\nError: invalid radius\n")
        return 2
    except EOFError:
        sys.stderr.write("\nError: no radius given\n")
        return 1

    sys.stdout.write(
        f"\nYou entered the radius: {format(_f32(radius), 'g')}"
        f"\nThe circumference of the circle: {format(result, 'g')}\n"
    )
    sys.stdout.write("\nHave A Great Day!\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())