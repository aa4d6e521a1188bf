"""Load stocks into a SortedAList and show each sorting algorithm at work."""

from __future__ import annotations

import random
import sys
from typing import Optional, TextIO

from coursekit.sorted_list import SortedAList
from coursekit.stock import Stock, read_stocks

_SORTS = (
    ("Quick Sort Ascending", "quick_sort", False),
    ("Quick Sort Descending", "quick_sort", True),
    ("Selection Sort Ascending", "selection_sort", False),
    ("Selection Sort Descending", "selection_sort", True),
    ("Heap Sort Ascending", "heap_sort", False),
    ("Heap Sort Descending", "heap_sort", True),
)


def _listing(stock_list: SortedAList) -> str:
    return "".join(f"{item}\n" for item in stock_list)


def check_report(stock_list: SortedAList) -> str:
    """Describe the list's size, capacity, fullness and contents."""
    lines = [f"\nvalues: {len(stock_list)}\n", f"capacity: {stock_list.capacity()}\n"]
    if stock_list.is_full():
        lines.append("stock list full\n")
    elif stock_list.is_empty():
        lines.append("stock list empty\n")
    lines.append(_listing(stock_list))
    return "".join(lines)


def run_demo(stock_list: SortedAList, rng: random.Random, out: TextIO) -> None:
    """Shuffle and then sort the list with every algorithm, writing each state."""
    for label, method, descending in _SORTS:
        stock_list.randomise(rng)
        out.write("\nRandomise:\n")
        out.write(_listing(stock_list))
        getattr(stock_list, method)(descending=descending)
        out.write(f"\n{label}:\n")
        out.write(_listing(stock_list))


def main(argv: Optional[list[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else "Stock.txt"
    stock_list: SortedAList[Stock] = SortedAList()

    sys.stdout.write(check_report(stock_list))
    try:
        stocks = read_stocks(path)
    except FileNotFoundError:
        sys.stderr.write("\nError: file not found\n")
        return 1

    for stock in stocks:
        stock_list.insert(stock)
    sys.stdout.write(check_report(stock_list))
    stock_list.insert(Stock("Computer Science Club", "CSC", 110101))
    sys.stdout.write(check_report(stock_list))

    run_demo(stock_list, random.Random(), sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())