"""Huffman trees over weighted stocks: building, code tables, encoding and decoding."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Optional, Sequence

from coursekit.stock import Stock

_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a stock, inner nodes only a weight."""

    value: Any = None
    frequency: float = 0.0
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class _Reader:
    """Reads lines and whitespace-separated numbers from text, as a stream would."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def line(self) -> str:
        if self._pos >= len(self._text):
            raise ValueError("unexpected end of stock data")
        end = self._text.find("\n", self._pos)
        if end == -1:
            end = len(self._text)
        line = self._text[self._pos:end]
        self._pos = end + 1
        return line.rstrip("\r")

    def number(self, pattern: re.Pattern) -> str:
        text = self._text
        while self._pos < len(text) and text[self._pos].isspace():
            self._pos += 1
        match = pattern.match(text, self._pos)
        if match is None:
            raise ValueError(f"expected a number at offset {self._pos}")
        self._pos = match.end()
        return match.group()

    def skip_line(self) -> None:
        end = self._text.find("\n", self._pos)
        self._pos = len(self._text) if end == -1 else end + 1


def read_weighted_stocks(path: str | Path) -> tuple[list[Stock], list[float]]:
    """Read a count, then name, symbol, price and frequency for each stock.

    A file without a leading count yields no stocks. Raises FileNotFoundError
    when the file is missing and ValueError when a record is malformed.
    """
    with open(path, encoding="utf-8") as fh:
        reader = _Reader(fh.read())

    try:
        size = int(reader.number(_INT))
    except ValueError:
        return [], []
    if size < 0:
        raise ValueError(f"negative stock count: {size}")
    reader.skip_line()

    stocks: list[Stock] = []
    freqs: list[float] = []
    for _ in range(size):
        name = reader.line()
        symbol = reader.line()
        price = float(reader.number(_FLOAT))
        freq = float(reader.number(_FLOAT))
        reader.skip_line()
        stocks.append(Stock(name, symbol, price))
        freqs.append(freq)
    return stocks, freqs


def build_huffman_tree(stocks: Sequence[Stock], freqs: Sequence[float]) -> HuffmanNode:
    """Repeatedly join the two lightest nodes; the lightest goes on the left."""
    if len(stocks) != len(freqs):
        raise ValueError("stocks and frequencies differ in length")
    if not stocks:
        raise ValueError("cannot build a Huffman tree from no stocks")

    elements = [HuffmanNode(stock, float(freq)) for stock, freq in zip(stocks, freqs)]

    while len(elements) > 1:
        index1 = index2 = 0
        freq1 = freq2 = math.inf
        for i, node in enumerate(elements):
            if node.frequency < freq1:
                freq2, index2 = freq1, index1
                freq1, index1 = node.frequency, i
            elif node.frequency < freq2 and i != index1:
                freq2, index2 = node.frequency, i
        if index1 == index2:
            raise ValueError("frequencies must be finite numbers")

        joined = HuffmanNode(
            left=elements[index1], right=elements[index2], frequency=freq1 + freq2
        )
        low, high = sorted((index1, index2))
        elements[low] = joined
        del elements[high]

    return elements[0]


def leaf_codes(root: HuffmanNode) -> list[tuple[Any, str]]:
    """Return (stock, bit string) for every leaf, left to right."""

    def walk(node: Optional[HuffmanNode], path: str) -> Iterator[tuple[Any, str]]:
        if node is None:
            return
        if node.is_leaf():
            yield node.value, path
        else:
            yield from walk(node.left, path + "0")
            yield from walk(node.right, path + "1")

    return list(walk(root, ""))


def encode_sentence(root: HuffmanNode) -> str:
    """Concatenate the codes of all leaves in left-to-right order."""
    return "".join(code for _, code in leaf_codes(root))


def decode(root: HuffmanNode, sentence: str) -> list[Any]:
    """Walk the tree along the bits; characters other than 0 and 1 are skipped.

    A trailing incomplete code produces nothing. Raises ValueError when the
    bits lead off the tree.
    """
    decoded: list[Any] = []
    current = root
    for char in sentence:
        if char == "0":
            current = current.left
        elif char == "1":
            current = current.right
        if current is None:
            raise ValueError("bit sequence leads past a leaf")
        if current.is_leaf():
            decoded.append(current.value)
            current = root
    return decoded


def format_code_table(root: HuffmanNode) -> str:
    """Render each leaf's stock followed by the bits of its code."""
    return "".join(
        f"{stock}\t\t\t\t" + "".join(f"{bit} " for bit in code) + "\n"
        for stock, code in leaf_codes(root)
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Print the code table and decode a bit string (by default, every code in turn)."""
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else "HuffmanStocks.txt"

    try:
        stocks, freqs = read_weighted_stocks(path)
    except FileNotFoundError:
        sys.stderr.write("\nError: file not found\n")
        stocks, freqs = [], []

    if not stocks:
        sys.stderr.write("\nError: no stocks found\n")
        return 1

    root = build_huffman_tree(stocks, freqs)
    sentence = argv[1] if len(argv) > 1 else encode_sentence(root)
    sys.stdout.write(format_code_table(root))
    sys.stdout.write("\n")
    try:
        decoded = decode(root, sentence)
    except ValueError as exc:
        sys.stderr.write(f"\nError: {exc}\n")
        return 1
    for stock in decoded:
        sys.stdout.write(f"{stock.name}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())