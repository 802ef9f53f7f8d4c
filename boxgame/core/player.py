"""
Player
======

Accumulates the scores returned by the boxes it feeds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from boxgame.core.boxes import Box, select_lightest


@dataclass
class Absorption:
    """Outcome of a single turn."""
    box_index: int
    points: float


class Player:
    """A game participant with a running score."""

    def __init__(self, name: str):
        self._name = name
        self._score: float = 0.0
        self._turns: int = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def score(self) -> float:
        """Sum of all points earned so far."""
        return self._score

    @property
    def turns(self) -> int:
        """Number of turns taken."""
        return self._turns

    def take_turn(self, token_weight: float, boxes: List[Box]) -> Absorption:
        """
        Feed a token to the lightest box and bank its score.

        Args:
            token_weight: Weight of the token to absorb.
            boxes: The session's boxes, in selection order.

        Returns:
            Absorption with the chosen box index and points earned.
        """
        box_index = select_lightest(boxes)
        points = boxes[box_index].absorb(token_weight)
        self._score += points
        self._turns += 1
        return Absorption(box_index=box_index, points=points)

    def reset(self) -> None:
        """Reset score to zero."""
        self._score = 0.0
        self._turns = 0

    def __repr__(self) -> str:
        return f"Player({self._name!r}, score={self._score:g})"
