"""
State Snapshot
==============

Turn records and point-in-time views of a game session.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, TYPE_CHECKING
import numpy as np

from boxgame.core.boxes import BoxKind

if TYPE_CHECKING:
    from boxgame.core.boxes import Box
    from boxgame.core.player import Player


class GamePhase(Enum):
    """Lifecycle of a game session."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass(frozen=True)
class TurnRecord:
    """Record of one consumed token."""
    index: int               # 0-based position in the input sequence
    player: str
    token_weight: float
    box_index: int
    box_kind: BoxKind
    points: float
    player_score: float      # Player's total after this turn

    def __repr__(self) -> str:
        return (
            f"TurnRecord({self.index}: {self.player} -> "
            f"{self.box_kind.value}[{self.box_index}] +{self.points:g})"
        )


@dataclass
class GameSnapshot:
    """
    Game state at a point in time.

    Arrays follow box collection order.
    """
    phase: GamePhase
    turns_played: int
    scores: Dict[str, float]
    box_weights: np.ndarray          # (num_boxes,) float64
    box_kinds: Tuple[BoxKind, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain Python values."""
        return {
            "phase": self.phase.value,
            "turns_played": self.turns_played,
            "scores": dict(self.scores),
            "box_weights": [float(w) for w in self.box_weights],
            "box_kinds": [kind.value for kind in self.box_kinds],
        }


@dataclass
class GameResult:
    """Final outcome of a game."""
    score_a: float
    score_b: float
    names: Tuple[str, str] = ("A", "B")
    turns: List[TurnRecord] = field(default_factory=list)

    @property
    def scores(self) -> Tuple[float, float]:
        return (self.score_a, self.score_b)

    @property
    def winner(self) -> Optional[str]:
        """Name of the player with the higher score, None on a tie."""
        if self.score_a > self.score_b:
            return self.names[0]
        if self.score_b > self.score_a:
            return self.names[1]
        return None

    def turns_for(self, player: str) -> List[TurnRecord]:
        """Turns taken by the given player."""
        return [t for t in self.turns if t.player == player]


def build_snapshot(
    phase: GamePhase,
    turns_played: int,
    boxes: List["Box"],
    players: List["Player"]
) -> GameSnapshot:
    """Build a snapshot from current session state."""
    return GameSnapshot(
        phase=phase,
        turns_played=turns_played,
        scores={p.name: p.score for p in players},
        box_weights=np.array([b.current_weight for b in boxes], dtype=np.float64),
        box_kinds=tuple(b.kind for b in boxes),
    )
