"""Small list exercises: summing and echoing numbers, and deleting repeats."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, TextIO

SIZE_LIMIT = 1024
ECHO_COUNT = 10


def echo_sum(numbers: Iterable[int]) -> tuple[int, list[int]]:
    """Return the sum of the numbers together with the numbers themselves."""
    values = list(numbers)
    return sum(values), values


def delete_repeats(
    chars: Iterable[str],
) -> tuple[list[str], list[tuple[int, int, str, tuple[str, ...]]]]:
    """Remove every later repeat of each element, keeping first occurrences.

    Returns the remaining elements and, for each removal, the 1-based positions
    of the kept and removed elements, the element, and the list after removal.
    """
    items = list(chars)
    steps: list[tuple[int, int, str, tuple[str, ...]]] = []
    i = 0
    while i < len(items) - 1:
        j = i + 1
        while j < len(items):
            while j < len(items) and items[i] == items[j]:
                char = items[j]
                del items[j]
                steps.append((i + 1, j + 1, char, tuple(items)))
            j += 1
        i += 1
    return items, steps


class _Scanner:
    """Reads single characters and whitespace-separated words from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buf = ""
        self._pos = 0

    def _skip_whitespace(self) -> None:
        while True:
            while self._pos < len(self._buf) and self._buf[self._pos].isspace():
                self._pos += 1
            if self._pos < len(self._buf):
                return
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._buf, self._pos = line, 0

    def char(self) -> str:
        self._skip_whitespace()
        char = self._buf[self._pos]
        self._pos += 1
        return char

    def word(self) -> str:
        self._skip_whitespace()
        start = self._pos
        while self._pos < len(self._buf) and not self._buf[self._pos].isspace():
            self._pos += 1
        return self._buf[start:self._pos]

    def integer(self) -> int:
        return int(self.word())


def _listing(items: Iterable[str]) -> str:
    return "\nUpdated array: " + "".join(f"{item} " for item in items)


def _run_echo(scanner: _Scanner, out: TextIO) -> None:
    out.write(f"Enter {ECHO_COUNT} numbers:\n")
    numbers = [scanner.integer() for _ in range(ECHO_COUNT)]
    total, values = echo_sum(numbers)
    out.write(f"\nSum is: {total}\nThe list of numbers were: ")
    out.write("".join(f"{value} " for value in values) + "\n")


def _read_size(scanner: _Scanner, out: TextIO, err: TextIO) -> int:
    out.write("\nWhat is the size: ")
    size = scanner.integer()
    while size > SIZE_LIMIT or size < 0:
        err.write(f"\nInvalid size. Please enter a size between 0 and {SIZE_LIMIT}")
        out.write("\n\nWhat is the size: ")
        size = scanner.integer()
    return size


def _run_repeats(scanner: _Scanner, out: TextIO, err: TextIO) -> None:
    while True:
        size = _read_size(scanner, out, err)
        out.write("Enter the array (one character at a time): \n")
        chars = [scanner.char() for _ in range(size)]

        remaining, steps = delete_repeats(chars)
        for first, second, char, snapshot in steps:
            out.write(f"\nFound duplicates at {first} and {second} : {char} and {char}\n")
            out.write(_listing(snapshot))

        out.write("\n\nThe array after delete repeats")
        out.write(_listing(remaining))
        out.write("\n\nRepeat? (y/n): ")
        out.flush()
        if scanner.char() in ("n", "N"):
            out.write("\n")
            return


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="List exercises.")
    parser.add_argument("mode", nargs="?", default="echo", choices=("echo", "repeats"))
    args = parser.parse_args(argv)

    scanner = _Scanner(sys.stdin)
    try:
        if args.mode == "echo":
            _run_echo(scanner, sys.stdout)
        else:
            _run_repeats(scanner, sys.stdout, sys.stderr)
    except ValueError:
        sys.stderr.write("\nError: invalid input\n")
        return 1
    except EOFError:
        if args.mode == "echo":
            sys.stderr.write("\nError: not enough numbers\n")
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())