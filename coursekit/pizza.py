"""A small take-away menu: pick items by letter and keep a running total."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional, TextIO

MENU = {
    "A": ("Pizza", 15.50),
    "B": ("Soda", 2.00),
    "C": ("Chicken Nuggets", 7.00),
    "D": ("Breadsticks", 9.75),
}
EXIT_LETTER = "E"

_RULE = "====================================================="
_DASHES = "-----------------------------------------------------"
_PRICE_COLUMN = 31


@dataclass
class Order:
    """The letters of the items ordered so far."""

    items: list[str] = field(default_factory=list)

    def add(self, letter: str) -> float:
        """Add the item with this (upper-case) letter and return its price.

        Raises ValueError for a letter that is not on the menu.
        """
        if letter not in MENU:
            raise ValueError(f"no menu item {letter!r}")
        self.items.append(letter)
        return MENU[letter][1]

    @property
    def total(self) -> float:
        return sum(MENU[letter][1] for letter in self.items)

    def __len__(self) -> int:
        return len(self.items)


def _menu_text() -> str:
    lines = [f"{_DASHES}\n\n"]
    for letter, (name, price) in MENU.items():
        lines.append(f"\t{letter}\t{name}{price:{_PRICE_COLUMN - len(name)}.2f}\n")
    lines.append(f"\t{EXIT_LETTER}\tExit\n")
    return "".join(lines)


def _letters(stream: TextIO) -> Iterator[str]:
    for line in stream:
        for char in line:
            if not char.isspace():
                yield char


def main(argv: Optional[list[str]] = None) -> int:
    argparse.ArgumentParser(description="Order food from the menu.").parse_args(argv)
    out, err = sys.stdout, sys.stderr
    out.write(f"{_RULE}\n\t\tWelcome to Pizza Palace\n{_RULE}\n")

    order = Order()
    letters = _letters(sys.stdin)
    while True:
        out.write(_menu_text())
        out.write("\nPlease enter the next menu item Letter: ")
        out.flush()
        letter = next(letters, None)
        if letter is None:
            out.write("\n")
            break
        if letter != EXIT_LETTER:
            try:
                order.add(letter)
            except ValueError:
                err.write("\nPlease pick a valid option\n")
        out.write(f"\nNumber of items: {len(order)}\n")
        out.write(f"Total: {order.total:.2f}\n")
        if letter == EXIT_LETTER:
            break

    out.write("\nThank you! Enjoy!\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())