"""
Boxes
=====

Stateful accumulators that absorb token weights and emit a score per absorption.

Two kinds exist:
- GreenBox: square of the mean of the most recently absorbed weights
- BlueBox: Cantor pairing of the smallest and largest absorbed weight
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from boxgame.core.config_loader import BoxConfig, GameConfig, get_config


# Recent weights averaged by a green box unless configured otherwise
DEFAULT_GREEN_WINDOW = 3


class BoxKind(Enum):
    """Closed set of box variants. Values match config_loader.BOX_KINDS."""
    GREEN = "green"
    BLUE = "blue"


def cantor_pairing(a: float, b: float) -> float:
    """
    Cantor's pairing function, pairing(0, 1) == 2.

    Args:
        a: First element (the smaller weight when used by BlueBox).
        b: Second element (the larger weight when used by BlueBox).

    Returns:
        0.5 * (a + b) * (a + b + 1) + b
    """
    return 0.5 * (a + b) * (a + b + 1) + b


class Box(ABC):
    """
    Base class for all boxes.

    A box holds a running weight and the ordered history of absorbed weights.
    Boxes compare by current weight so the lightest one can be picked with min().
    """

    kind: BoxKind

    def __init__(self, initial_weight: float):
        """
        Initialize box.

        Args:
            initial_weight: Weight before any token is absorbed.
        """
        self._initial_weight = float(initial_weight)
        self._weight = float(initial_weight)
        self._history: List[float] = []

    @property
    def initial_weight(self) -> float:
        """Weight the box was created with."""
        return self._initial_weight

    @property
    def current_weight(self) -> float:
        """Initial weight plus every absorbed weight."""
        return self._weight

    @property
    def absorbed_history(self) -> Tuple[float, ...]:
        """Absorbed weights, oldest first."""
        return tuple(self._history)

    @property
    def absorb_count(self) -> int:
        """Number of tokens absorbed so far."""
        return len(self._history)

    def absorb(self, weight: float) -> float:
        """
        Absorb a token weight and return the resulting score.

        Args:
            weight: Token weight. Not validated.

        Returns:
            Score after the absorption.
        """
        weight = float(weight)
        self._history.append(weight)
        self._weight += weight
        return self.calculate_score()

    @abstractmethod
    def calculate_score(self) -> float:
        """Score derived from the absorption history (0.0 when empty)."""

    def __lt__(self, other: "Box") -> bool:
        return self._weight < other._weight

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(weight={self._weight:g}, "
            f"absorbed={len(self._history)})"
        )


class GreenBox(Box):
    """Scores the square of the mean of the last `window` absorbed weights."""

    kind = BoxKind.GREEN

    def __init__(self, initial_weight: float, window: int = DEFAULT_GREEN_WINDOW):
        if window < 1:
            raise ValueError(f"window must be at least 1, got {window}")
        super().__init__(initial_weight)
        self._window = window

    @property
    def window(self) -> int:
        return self._window

    def calculate_score(self) -> float:
        if not self._history:
            return 0.0

        # Fewer absorptions than the window: average all of them
        recent = self._history[-self._window:]
        return float(np.mean(recent)) ** 2


class BlueBox(Box):
    """Scores cantor_pairing(min, max) over the full absorption history."""

    kind = BoxKind.BLUE

    def calculate_score(self) -> float:
        if not self._history:
            return 0.0

        weights = np.asarray(self._history, dtype=np.float64)
        smallest = float(np.min(weights))
        largest = float(np.max(weights))
        return cantor_pairing(smallest, largest)


def make_box(
    box_config: BoxConfig,
    config: Optional[GameConfig] = None
) -> Box:
    """
    Create a box from its configuration.

    Args:
        box_config: Kind and initial weight of the box.
        config: Game configuration for scoring parameters. Uses default if None.

    Returns:
        A new GreenBox or BlueBox.
    """
    if config is None:
        config = get_config()

    kind = BoxKind(box_config.kind)
    if kind is BoxKind.GREEN:
        return GreenBox(box_config.initial_weight, window=config.scoring.green_window)
    return BlueBox(box_config.initial_weight)


def make_boxes(config: Optional[GameConfig] = None) -> List[Box]:
    """Create the session's boxes in configured order."""
    if config is None:
        config = get_config()
    return [make_box(box_config, config) for box_config in config.boxes]


def select_lightest(boxes: List[Box]) -> int:
    """
    Index of the box with the smallest current weight.

    Boxes are scanned in collection order and the first minimum wins.

    Args:
        boxes: Non-empty box collection.

    Returns:
        Index into `boxes`.
    """
    lightest = 0
    for i in range(1, len(boxes)):
        if boxes[i] < boxes[lightest]:
            lightest = i
    return lightest
