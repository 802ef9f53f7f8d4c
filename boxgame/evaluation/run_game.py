"""
Game Runner
===========

Runs a box game over a token sequence given on the command line.

Usage:
    python -m boxgame.evaluation.run_game --weights 1 1 2 3
    python -m boxgame.evaluation.run_game --fibonacci 8 --turns
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

import yaml

from boxgame.core.config_loader import GameConfig, load_config
from boxgame.core.game import CoreGame, format_scores
from boxgame.core.state_snapshot import GameResult, TurnRecord


def fibonacci_weights(count: int) -> List[int]:
    """
    First `count` Fibonacci numbers starting 1, 1, 2, 3.

    Args:
        count: Number of weights to generate.

    Returns:
        List of token weights.
    """
    weights: List[int] = []
    a, b = 1, 1
    for _ in range(count):
        weights.append(a)
        a, b = b, a + b
    return weights


def format_turn(turn: TurnRecord) -> str:
    """Format a single turn for display."""
    return (
        f"  [{turn.index + 1:>3}] player {turn.player}: "
        f"token {turn.token_weight:g} -> {turn.box_kind.value} box {turn.box_index} "
        f"(+{turn.points:g}, total {turn.player_score:g})"
    )


def run_game(
    input_weights: Sequence[int],
    config: Optional[GameConfig] = None,
    show_turns: bool = False,
    verbose: bool = True
) -> GameResult:
    """
    Play one game and report it.

    Args:
        input_weights: Token weights in turn order.
        config: Game configuration. Uses default if None.
        show_turns: If True, print every turn.
        verbose: If True, print the score summary and winner.

    Returns:
        GameResult for the game.
    """
    game = CoreGame(config)
    result = game.run(input_weights)

    if show_turns:
        print(f"Turns ({len(result.turns)}):")
        for turn in result.turns:
            print(format_turn(turn))

    if verbose:
        print(format_scores(result.scores, result.names))
        if result.winner is None:
            print("Result: tie")
        else:
            print(f"Winner: player {result.winner}")

    return result


def _non_negative_int(value: str) -> int:
    """argparse type for token weights."""
    try:
        weight = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if weight < 0:
        raise argparse.ArgumentTypeError(f"token weight must be non-negative: {weight}")
    return weight


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="boxgame",
        description="Play the box game over a sequence of token weights"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--weights",
        type=_non_negative_int,
        nargs="+",
        help="Token weights in turn order"
    )
    source.add_argument(
        "--fibonacci",
        type=_non_negative_int,
        metavar="N",
        help="Use the first N Fibonacci numbers as token weights"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to game config YAML (uses default if not specified)"
    )
    parser.add_argument(
        "--turns",
        action="store_true",
        help="Print every turn"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress the score summary"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}")
        return 1

    if args.fibonacci is not None:
        weights = fibonacci_weights(args.fibonacci)
    else:
        weights = args.weights

    run_game(
        weights,
        config=config,
        show_turns=args.turns,
        verbose=not args.quiet
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
