"""Weighted grade calculation for a course with four graded deliverables."""

from __future__ import annotations

import argparse
import math
import struct
import sys
from typing import Optional, TextIO

ASSIGN_PERCENT = 15
TEST_PERCENT = 50
EXAM_PERCENT = 30
PARTIC_PERCENT = 5

_LABELS = (
    "Programming Assignments",
    "Chapter Tests",
    "Final Exam",
    "Class Participation",
)
_WEIGHTS = (ASSIGN_PERCENT, TEST_PERCENT, EXAM_PERCENT, PARTIC_PERCENT)

# Inclusive score ranges; a score between two ranges earns an F.
_LETTERS = (
    (97, math.inf, "A+"),
    (94, 96, "A"),
    (90, 93, "A-"),
    (87, 89, "B+"),
    (84, 86, "B"),
    (80, 83, "B-"),
    (77, 79, "C+"),
    (74, 76, "C"),
    (70, 73, "C-"),
    (60, 69, "D"),
)


def _f32(value: float) -> float:
    """Round to single precision, the precision grades are computed in."""
    return struct.unpack("f", struct.pack("f", value))[0]


def weighted_scores(
    assign: float, test: float, exam: float, partic: float
) -> tuple[float, float, float, float]:
    """Each percentage scaled by its deliverable's weight."""
    scores = (assign, test, exam, partic)
    return tuple(
        _f32(_f32(_f32(score) * weight) / 100) for score, weight in zip(scores, _WEIGHTS)
    )


def final_grade(assign: float, test: float, exam: float, partic: float) -> float:
    """The weighted average of the four percentages."""
    total = 0.0
    for score in weighted_scores(assign, test, exam, partic):
        total = _f32(total + score)
    return total


def letter_grade(avg: float) -> str:
    """The letter grade for a final percentage."""
    return next((letter for low, high, letter in _LETTERS if low <= avg <= high), "F")


def _weights_text(blank_line: bool) -> str:
    lines = [
        "Grade Calculator - Computer Programming I\n",
        "\nThe weight of each deliverable on their final grade\n",
    ]
    if blank_line:
        lines.append("\n")
    lines.extend(f"\t{label}: {weight}%\n" for label, weight in zip(_LABELS, _WEIGHTS))
    return "".join(lines)


def _read_scores(infile: TextIO, out: TextIO) -> list[float]:
    scores = []
    for index, label in enumerate(_LABELS):
        prefix = "\n" if index == 0 else ""
        out.write(f"{prefix}What is the graded percentage (out of 100%) for {label}? ")
        out.flush()
        line = infile.readline()
        tokens = line.split()
        if not tokens:
            raise ValueError("no percentage given")
        scores.append(float(tokens[0]))
    return scores


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Course grade calculator.")
    parser.add_argument("scores", nargs="*", type=float)
    parser.add_argument(
        "--simple", action="store_true", help="show weighted scores without a letter grade"
    )
    args = parser.parse_args(argv)
    out = sys.stdout

    if args.scores and len(args.scores) != 4:
        sys.stderr.write("Error: give four percentages\n")
        return 2

    out.write(_weights_text(blank_line=args.simple))
    try:
        scores = args.scores or _read_scores(sys.stdin, out)
    except ValueError:
        sys.stderr.write("\nError: invalid input\n")
        return 1

    weighted = weighted_scores(*scores)
    avg = final_grade(*scores)

    if args.simple:
        out.write("\n")
        out.write(
            "".join(
                f"\t{format(score, 'g')}% in {label}\n"
                for score, label in zip(weighted, _LABELS)
            )
        )
        out.write(f"\nFinal Grade: {format(avg, 'g')}%\n")
        return 0

    out.write("\n\n")
    out.write(
        "".join(f"\t{score:.2f}% in {label}\n" for score, label in zip(weighted, _LABELS))
    )
    out.write(f"\n\nFinal Grade: {avg:.2f}%\n")
    out.write(f"\nYour Grade is {letter_grade(avg)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())