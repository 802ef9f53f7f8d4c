"""
Box Core - The game engine.

This module provides the box variants, players, and the turn loop that
resolves a full game from a sequence of token weights.

Main exports:
- play: Run a game and return both final scores
- CoreGame: Step-by-step game session
- GreenBox, BlueBox: The two box variants
- GameConfig: Configuration loaded from game_config.yaml
"""

from boxgame.core.config_loader import GameConfig, load_config
from boxgame.core.boxes import (
    Box,
    BoxKind,
    GreenBox,
    BlueBox,
    cantor_pairing,
    make_box,
    select_lightest,
)
from boxgame.core.player import Player
from boxgame.core.state_snapshot import GamePhase, GameResult, GameSnapshot, TurnRecord
from boxgame.core.game import CoreGame, format_scores, play

__all__ = [
    "GameConfig",
    "load_config",
    "Box",
    "BoxKind",
    "GreenBox",
    "BlueBox",
    "cantor_pairing",
    "make_box",
    "select_lightest",
    "Player",
    "GamePhase",
    "GameResult",
    "GameSnapshot",
    "TurnRecord",
    "CoreGame",
    "format_scores",
    "play",
]
