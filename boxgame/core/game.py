"""
Core Game
=========

Main game orchestrator combining boxes, players and turn alternation.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from boxgame.core.config_loader import GameConfig, get_config
from boxgame.core.boxes import Box, make_boxes
from boxgame.core.player import Player
from boxgame.core.state_snapshot import (
    GamePhase,
    GameResult,
    GameSnapshot,
    TurnRecord,
    build_snapshot,
)


class CoreGame:
    """
    Main game simulation class.

    Owns the boxes and both players for one session. Token i goes to the
    first player when i is even and to the second when i is odd; each
    player feeds the currently lightest box.

    One step = one token.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize game.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._boxes: List[Box] = make_boxes(config)
        self._players: List[Player] = [Player(name) for name in config.players.names]
        self._turns: List[TurnRecord] = []
        self._phase = GamePhase.NOT_STARTED

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def is_over(self) -> bool:
        """True if game has ended."""
        return self._phase is GamePhase.FINISHED

    @property
    def boxes(self) -> Tuple[Box, ...]:
        """Session boxes in selection order."""
        return tuple(self._boxes)

    @property
    def players(self) -> Tuple[Player, ...]:
        return tuple(self._players)

    @property
    def turns_played(self) -> int:
        """Number of tokens consumed."""
        return len(self._turns)

    @property
    def current_player(self) -> Player:
        """Player who takes the next token."""
        return self._players[len(self._turns) % 2]

    @property
    def scores(self) -> Tuple[float, float]:
        return (self._players[0].score, self._players[1].score)

    def reset(self) -> GameSnapshot:
        """
        Reset game to initial state with fresh boxes.

        Returns:
            Initial game snapshot.
        """
        self._boxes = make_boxes(self._config)
        for player in self._players:
            player.reset()
        self._turns = []
        self._phase = GamePhase.NOT_STARTED
        return self.snapshot()

    def step(self, token_weight: float) -> TurnRecord:
        """
        Consume one token: the current player feeds the lightest box.

        Args:
            token_weight: Weight of the next input token.

        Returns:
            TurnRecord describing the turn.

        Raises:
            RuntimeError: If the game has already finished.
        """
        if self.is_over:
            raise RuntimeError("Game already finished. Call reset() first.")

        self._phase = GamePhase.IN_PROGRESS

        player = self.current_player
        absorption = player.take_turn(token_weight, self._boxes)

        record = TurnRecord(
            index=len(self._turns),
            player=player.name,
            token_weight=float(token_weight),
            box_index=absorption.box_index,
            box_kind=self._boxes[absorption.box_index].kind,
            points=absorption.points,
            player_score=player.score,
        )
        self._turns.append(record)
        return record

    def finish(self) -> GameResult:
        """End the game and return its result."""
        self._phase = GamePhase.FINISHED
        return GameResult(
            score_a=self._players[0].score,
            score_b=self._players[1].score,
            names=(self._players[0].name, self._players[1].name),
            turns=list(self._turns),
        )

    def run(self, input_weights: Iterable[float]) -> GameResult:
        """
        Play every token in order and finish the game.

        Args:
            input_weights: Token weights, each consumed exactly once.

        Returns:
            GameResult with final scores and the turn log.

        Raises:
            RuntimeError: If the game has already finished.
        """
        if self.is_over:
            raise RuntimeError("Game already finished. Call reset() first.")

        for weight in input_weights:
            self.step(weight)
        return self.finish()

    def snapshot(self) -> GameSnapshot:
        """Build current game state snapshot."""
        return build_snapshot(
            phase=self._phase,
            turns_played=len(self._turns),
            boxes=self._boxes,
            players=self._players,
        )


def format_scores(scores: Tuple[float, float], names: Tuple[str, str] = ("A", "B")) -> str:
    """Summary line, e.g. 'Scores: player A 13, player B 25'."""
    return (
        f"Scores: player {names[0]} {scores[0]:g}, "
        f"player {names[1]} {scores[1]:g}"
    )


def play(
    input_weights: Iterable[float],
    config: Optional[GameConfig] = None,
    verbose: bool = True
) -> Tuple[float, float]:
    """
    Play a full game and return both final scores.

    Args:
        input_weights: Token weights in turn order.
        config: Game configuration. Uses default if None.
        verbose: If True, print the score summary.

    Returns:
        (score of player A, score of player B).
    """
    game = CoreGame(config)
    result = game.run(input_weights)

    if verbose:
        print(format_scores(result.scores, result.names))

    return result.scores
