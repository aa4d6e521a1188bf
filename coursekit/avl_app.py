"""Interactive stock lookup backed by an AVL tree, plus a traversal demonstration."""

from __future__ import annotations

import random
import re
import sys
from pathlib import Path
from typing import Optional, TextIO

from coursekit.avl_tree import AVLTree, format_traversal
from coursekit.stock import Stock, read_stocks

_MENU = (
    "\nMenu Options:\n"
    "a) Display a stock's name given its symbol\n"
    "b) Display a stock's price given its symbol\n"
    "c) Insert a new stock\n"
    "d) Display all stocks\n"
    "e) Quit\n"
    "Enter your choice: "
)
_WORD = re.compile(r"\S+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WHITESPACE = " \t\n\v\f\r"


class _Input:
    """Reads characters, words, lines and numbers from a text stream, line by line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buf = ""
        self._pos = 0

    def _fill(self) -> bool:
        line = self._stream.readline()
        if not line:
            return False
        self._buf = line
        self._pos = 0
        return True

    def _skip_whitespace(self) -> None:
        while True:
            while self._pos < len(self._buf) and self._buf[self._pos].isspace():
                self._pos += 1
            if self._pos < len(self._buf):
                return
            if not self._fill():
                raise EOFError

    def char(self) -> str:
        self._skip_whitespace()
        char = self._buf[self._pos]
        self._pos += 1
        return char

    def word(self) -> str:
        self._skip_whitespace()
        match = _WORD.match(self._buf, self._pos)
        self._pos = match.end()
        return match.group()

    def line(self) -> str:
        if self._pos >= len(self._buf) and not self._fill():
            raise EOFError
        text = self._buf[self._pos:]
        self._pos = len(self._buf)
        return text.rstrip("\n").rstrip("\r")

    def ignore_line(self) -> None:
        if self._pos >= len(self._buf) and not self._fill():
            return
        self._pos = len(self._buf)

    def number(self) -> float:
        self._skip_whitespace()
        match = _FLOAT.match(self._buf, self._pos)
        if match is None:
            raise ValueError("not a number")
        self._pos = match.end()
        return float(match.group())


def traverse_report(tree: AVLTree) -> str:
    """Render the in-order, pre-order and post-order traversals of ``tree``."""
    return (
        "In-order: \n"
        + format_traversal(tree.inorder())
        + "\nPre-order: \n"
        + format_traversal(tree.preorder())
        + "\nPost-order: \n"
        + format_traversal(tree.postorder())
    )


def _lookup(tree: AVLTree, reader: _Input, choice: str, out: TextIO, err: TextIO) -> None:
    out.write("\nEnter stock symbol: ")
    symbol = reader.word()
    found = tree.search(Stock("", symbol))
    if found is None:
        err.write("Error: stock not found\n")
    elif choice == "a":
        out.write(f"Stock name: {found.name}\n")
    else:
        out.write(f"Stock price: {format(float(found.price), 'g')}\n")


def _read_new_stock(reader: _Input, out: TextIO, err: TextIO) -> Stock:
    reader.ignore_line()
    while True:
        out.write("\nEnter stock name: ")
        name = reader.line()
        if name:
            break
        err.write("Error: invalid input\n")

    while True:
        out.write("Enter stock symbol: ")
        symbol = reader.line()
        if symbol and not any(c in _WHITESPACE for c in symbol):
            break
        err.write("Error: invalid input\n\n")

    out.write("Enter stock price: ")
    while True:
        try:
            price = reader.number()
        except ValueError:
            price = None
        if price is not None and price >= 0:
            return Stock(name, symbol, price)
        reader.ignore_line()
        err.write("Error: invalid input\n\n")
        out.write("Enter stock price: ")


def run_menu(
    tree: AVLTree,
    infile: TextIO,
    out: TextIO,
    err: TextIO,
    save_path: Optional[str | Path] = None,
) -> None:
    """Run the stock menu until the user quits or the input ends.

    On quitting, the in-order listing is written to ``save_path`` if one is given.
    """
    reader = _Input(infile)
    try:
        while True:
            out.write(_MENU)
            choice = reader.char().lower()
            if choice in ("a", "b"):
                _lookup(tree, reader, choice, out, err)
            elif choice == "c":
                tree.insert(_read_new_stock(reader, out, err))
            elif choice == "d":
                out.write("\n\tStocks\n----------------------\n")
                out.write(format_traversal(tree.inorder()))
            elif choice == "e":
                if save_path is not None:
                    Path(save_path).write_text(
                        format_traversal(tree.inorder()), encoding="utf-8"
                    )
                return
            else:
                err.write("\nError: invalid choice\n")
    except EOFError:
        return


def main(argv: Optional[list[str]] = None) -> int:
    """Show traversals of a random integer tree, then run the stock menu."""
    argv = sys.argv[1:] if argv is None else argv
    stock_path = argv[0] if argv else "Stock.txt"
    save_path = argv[1] if len(argv) > 1 else "Stock_BF.txt"

    rng = random.Random()
    int_tree: AVLTree[int] = AVLTree()
    for _ in range(10):
        int_tree.insert(rng.randint(1, 5000))
    sys.stdout.write(traverse_report(int_tree))
    sys.stdout.write(f"\nHeight: {int_tree.height()}\n")

    try:
        stocks = read_stocks(stock_path)
    except FileNotFoundError:
        sys.stderr.write("\nError: file not found\n")
        return 1

    stock_tree: AVLTree[Stock] = AVLTree()
    for stock in stocks:
        stock_tree.insert(stock)
    run_menu(stock_tree, sys.stdin, sys.stdout, sys.stderr, save_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())