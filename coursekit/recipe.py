"""A greeting, a cookie recipe, and ingredient quantities scaled by the dozen."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

_TITLE = "Chocolate Chip Cookies - 4 dozen cookies"

_INSTRUCTIONS = (
    "Preheat oven to 350 F. In a large bowl, mix butter, sugar, eggs, and vanilla\n"
    "until light and fluffy. In a separate bowl, combine flour, baking soda, and\n"
    "salt; stir into the butter mixture until well-blended stir in chocolate chips.\n"
    "Drop by rounded teaspoons onto ungreased cookie sheets. Bake 8-10 minutes until\n"
    "just set. Cool slightly on cookie sheets before transferring to cooling racks\n"
    "to cool completely."
)

# Quantities for one batch (four dozen cookies).
_INGREDIENTS = (
    (1, "cup butter"),
    (1.5, "cups white sugar"),
    (2, "eggs"),
    (2, "tsp vanilla extract"),
    (2, "cups all-purpose flour"),
    (0.75, "baking soda"),
    (0.25, "tsp salt"),
    (2, "cups chocolate chips"),
)

_FRACTION_LIST = (
    "\t1 cup butter\n"
    "\t1 1 / 2 cups white sugar\n"
    "\t2 eggs\n"
    "\t2 tsp vanilla extract\n"
    "\t2 cups all-purpose flour\n"
    "\t3 / 4 baking soda\n"
    "\t1 / 4 tsp salt\n"
    "\t2 cups chocolate chips\n"
)


def greeting() -> str:
    return "Hello, World!"


def recipe_text() -> str:
    """The full recipe with fractional quantities."""
    return f"{_TITLE}\n\n{_FRACTION_LIST}\n{_INSTRUCTIONS}\n"


def _number(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return format(value, "g")


def scaled_ingredients(dozens: int) -> str:
    """Ingredient lines for ``dozens`` cookies, in whole batches of four dozen."""
    batches = abs(dozens) // 4
    if dozens < 0:
        batches = -batches
    return "".join(
        f"\t{_number(batches * amount)} {label}\n" for amount, label in _INGREDIENTS
    )


def _read_int(stream) -> int:
    for line in iter(stream.readline, ""):
        token = line.split()
        if token:
            return int(token[0])
    raise EOFError("no number given")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Greeting and cookie recipe.")
    parser.add_argument(
        "program", nargs="?", default="recipe", choices=("hello", "recipe", "scale")
    )
    parser.add_argument("dozens", nargs="?", type=int)
    args = parser.parse_args(argv)

    out = sys.stdout
    if args.program == "hello":
        out.write(greeting() + "\n")
        return 0
    if args.program == "recipe":
        out.write(recipe_text())
        return 0

    out.write(f"{_TITLE}\n\n{scaled_ingredients(4)}\n{_INSTRUCTIONS}\n")
    out.write("\nHow many dozens are you planning to make (Please give a multiple of four)?\n")
    dozens = args.dozens
    if dozens is None:
        try:
            dozens = _read_int(sys.stdin)
        except (EOFError, ValueError):
            sys.stderr.write("Error: invalid number\n")
            return 1
    out.write("\n\n" + scaled_ingredients(dozens))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())