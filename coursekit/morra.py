"""Simulated games of Morra, singly or as a series, with their printed results."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

MIN_FINGERS = 1
MAX_FINGERS = 5
MIN_GUESS = 0
MAX_GUESS = 10

TIE = "tie"
PLAYER_ONE = "player 1"
PLAYER_TWO = "player 2"
NO_ONE = "no one"

_ROUND_MESSAGES = {
    TIE: "TIE",
    PLAYER_ONE: "PLAYER 1 WINS",
    PLAYER_TWO: "PLAYER 2 WINS",
    NO_ONE: "NO ONE WINS",
}
_SERIES_MESSAGES = {
    TIE: "TIE",
    PLAYER_ONE: "Player 1 Wins",
    PLAYER_TWO: "Player 2 Wins",
    NO_ONE: "NO ONE WINS",
}
_RULE = "====================================="


@dataclass(frozen=True)
class MorraRound:
    """Fingers shown and totals guessed by both players in one game."""

    player_one_fingers: int
    player_one_guess: int
    player_two_fingers: int
    player_two_guess: int

    def total(self) -> int:
        return self.player_one_fingers + self.player_two_fingers

    def outcome(self) -> str:
        """TIE, PLAYER_ONE, PLAYER_TWO or NO_ONE, by whose guess matches the total."""
        total = self.total()
        one = self.player_one_guess == total
        two = self.player_two_guess == total
        if one and two:
            return TIE
        if one:
            return PLAYER_ONE
        if two:
            return PLAYER_TWO
        return NO_ONE


def play_round(rng: Optional[random.Random] = None) -> MorraRound:
    """Play one game: 1 to 4 fingers and a guess of 0 to 9 for each player."""
    rng = rng or random.Random()

    def fingers() -> int:
        return rng.randrange(MAX_FINGERS - MIN_FINGERS) + MIN_FINGERS

    def guess() -> int:
        return rng.randrange(MAX_GUESS - MIN_GUESS) + MIN_GUESS

    one_fingers = fingers()
    one_guess = guess()
    two_fingers = fingers()
    two_guess = guess()
    return MorraRound(one_fingers, one_guess, two_fingers, two_guess)


def play_series(rng: Optional[random.Random] = None, games: int = 10) -> list[MorraRound]:
    """Play ``games`` games in a row."""
    if games < 0:
        raise ValueError("the number of games cannot be negative")
    rng = rng or random.Random()
    return [play_round(rng) for _ in range(games)]


def series_winner(player_one_wins: int, player_two_wins: int) -> str:
    """Describe who won the series from each player's number of wins."""
    if player_one_wins > player_two_wins:
        return "Player 1"
    if player_one_wins < player_two_wins:
        return "Player 2"
    return "It is a TIE"


def _round_report(game: MorraRound) -> str:
    return (
        "Fingers\tTotal\n"
        f"{game.player_one_fingers}\t\t{game.player_one_guess}\n"
        f"{game.player_two_fingers}\t\t{game.player_two_guess}\n"
        f"\nCorrect total is {game.total()}\n"
        f"{_ROUND_MESSAGES[game.outcome()]}\n"
    )


def _series_game_report(number: int, game: MorraRound) -> str:
    return (
        f"Game {number}:\n"
        f"{'Player':<12}{'|Fingers':<12}{'|Total':<12}\n"
        "============|===========|============\n"
        f"{'1':<12}|{game.player_one_fingers:<11}|{game.player_one_guess}\n"
        f"{'2':<12}|{game.player_two_fingers:<11}|{game.player_two_guess}\n"
        f"\nCorrect total is {game.total()}\n"
        f"{_SERIES_MESSAGES[game.outcome()]}\n"
        "\n-------------------------------------\n"
    )


def _series_summary(games: list[MorraRound]) -> str:
    outcomes = [game.outcome() for game in games]
    one = outcomes.count(PLAYER_ONE)
    two = outcomes.count(PLAYER_TWO)
    return (
        f"{_RULE}\nSummary of the series\n{_RULE}\n"
        f"Player 1 won {one} games\n"
        f"Player 2 won {two} games\n"
        f"\nWinner of the series: {series_winner(one, two)}\n"
    )


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate games of Morra.")
    parser.add_argument("mode", nargs="?", default="round", choices=("round", "series"))
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--output", default=None, help="file for the results")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    if args.mode == "round":
        path = Path(args.output or "result.txt")
        path.write_text(_round_report(play_round(rng)), encoding="utf-8")
        return 0

    try:
        games = play_series(rng, args.games)
    except ValueError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 2
    for number, game in enumerate(games, start=1):
        sys.stdout.write(_series_game_report(number, game))
    summary = _series_summary(games)
    sys.stdout.write(summary)
    Path(args.output or "morraSeriesResults.txt").write_text(summary, encoding="utf-8")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())