"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import yaml


# Box kinds understood by the box factory; must match the values of boxes.BoxKind
BOX_KINDS = ("green", "blue")


@dataclass(frozen=True)
class BoxConfig:
    """Configuration for a single box."""
    kind: str                # "green" or "blue"
    initial_weight: float    # Weight before any token is absorbed


@dataclass(frozen=True)
class PlayerConfig:
    """Player names, in turn order."""
    names: Tuple[str, ...]


@dataclass(frozen=True)
class ScoringConfig:
    """Scoring parameters."""
    green_window: int        # Recent weights averaged by green boxes


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable so a game session cannot alter its own layout.
    """
    boxes: Tuple[BoxConfig, ...]
    players: PlayerConfig
    scoring: ScoringConfig

    @property
    def num_boxes(self) -> int:
        """Number of boxes in a session."""
        return len(self.boxes)

    @property
    def initial_weights(self) -> Tuple[float, ...]:
        """Initial box weights in collection order."""
        return tuple(box.initial_weight for box in self.boxes)

    def get_box(self, box_index: int) -> BoxConfig:
        """Get box config by index."""
        if 0 <= box_index < len(self.boxes):
            return self.boxes[box_index]
        raise ValueError(f"Invalid box index: {box_index}")


def _as_number(value, cast, name: str):
    """Convert a YAML scalar, reporting bad values as ValueError."""
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}")


def _parse_box(box_data: dict, index: int) -> BoxConfig:
    """Parse a single box entry from YAML."""
    if not isinstance(box_data, dict):
        raise ValueError(f"Box {index} must be a mapping, got {box_data!r}")
    if "kind" not in box_data:
        raise ValueError(f"Box {index} is missing required key 'kind'")
    return BoxConfig(
        kind=str(box_data["kind"]).lower(),
        initial_weight=_as_number(box_data.get("initial_weight", 0.0), float, f"Box {index} initial_weight")
    )


def _parse_names(names_data: List) -> Tuple[str, ...]:
    """Parse player names from YAML."""
    if not isinstance(names_data, list):
        raise ValueError(f"players.names must be a list, got {names_data!r}")
    return tuple(str(name) for name in names_data)


def _section(raw: dict, name: str) -> dict:
    """Get an optional mapping section from the raw YAML."""
    data = raw.get(name) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{name} must be a mapping, got {data!r}")
    return data


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    if not config.boxes:
        raise ValueError("At least one box must be configured")

    for i, box in enumerate(config.boxes):
        if box.kind not in BOX_KINDS:
            raise ValueError(
                f"Box {i}: kind must be one of {BOX_KINDS}, got '{box.kind}'"
            )

    if len(config.players.names) != 2:
        raise ValueError(
            f"Exactly 2 players are required, got {len(config.players.names)}"
        )

    if len(set(config.players.names)) != len(config.players.names):
        raise ValueError(f"Player names must be unique, got {config.players.names}")

    if config.scoring.green_window < 1:
        raise ValueError(
            f"scoring.green_window must be at least 1, got {config.scoring.green_window}"
        )


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    boxes_data = raw.get("boxes") or []
    if not isinstance(boxes_data, list):
        raise ValueError(f"boxes must be a list, got {boxes_data!r}")
    boxes = tuple(_parse_box(b, i) for i, b in enumerate(boxes_data))

    players_data = _section(raw, "players")
    players = PlayerConfig(
        names=_parse_names(players_data.get("names", ["A", "B"]))
    )

    scoring_data = _section(raw, "scoring")
    scoring = ScoringConfig(
        green_window=_as_number(scoring_data.get("green_window", 3), int, "scoring.green_window")
    )

    config = GameConfig(
        boxes=boxes,
        players=players,
        scoring=scoring
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
