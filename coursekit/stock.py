"""Stock records ordered by ticker symbol, and a reader for stock data files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from pathlib import Path
from typing import Iterator

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@total_ordering
@dataclass(frozen=True, eq=False)
class Stock:
    """A company's stock. Equality and ordering use the symbol alone."""

    name: str = ""
    symbol: str = ""
    price: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stock):
            return NotImplemented
        return self.symbol == other.symbol

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Stock):
            return NotImplemented
        return self.symbol < other.symbol

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Stock):
            return NotImplemented
        return self.symbol > other.symbol

    def __hash__(self) -> int:
        return hash(self.symbol)

    def __str__(self) -> str:
        return f"{self.name}\n{self.symbol}\n{format(float(self.price), 'g')}"


def _parse_records(lines: list[str]) -> Iterator[Stock]:
    it = iter(lines)
    while True:
        name = next(it, None)
        symbol = next(it, None)
        if name is None or symbol is None:
            return
        price_line = next(it, None)
        while price_line is not None and not price_line.strip():
            price_line = next(it, None)
        if price_line is None:
            return
        match = _NUMBER.match(price_line.lstrip())
        if match is None:
            return
        yield Stock(name, symbol, float(match.group()))


def read_stocks(path: str | Path) -> list[Stock]:
    """Read name/symbol/price line triples until the data runs out or is malformed.

    Raises FileNotFoundError when the file does not exist.
    """
    with open(path, encoding="utf-8") as fh:
        lines = [line.rstrip("\n").rstrip("\r") for line in fh]
    return list(_parse_records(lines))