"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Optional

import yaml


BOX_KINDS = ("green", "blue")


@dataclass(frozen=True)
class BoxConfig:
    """A single box slot on the table."""
    kind: str              # "green" (mean scorer) or "blue" (pairing scorer)
    initial_weight: float  # Weight before any token is absorbed


@dataclass(frozen=True)
class ScoringConfig:
    """Scoring parameters."""
    green_window: Optional[int]  # Recent tokens averaged by green boxes, None = all


@dataclass(frozen=True)
class PlayersConfig:
    """Player roster, in turn order."""
    names: Tuple[str, ...]


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    boxes: Tuple[BoxConfig, ...]
    scoring: ScoringConfig
    players: PlayersConfig

    @property
    def num_boxes(self) -> int:
        """Number of boxes on the table."""
        return len(self.boxes)

    @property
    def num_players(self) -> int:
        return len(self.players.names)

    def get_box(self, index: int) -> BoxConfig:
        """Get box config by position."""
        if 0 <= index < len(self.boxes):
            return self.boxes[index]
        raise ValueError(f"Invalid box index: {index}")


def _parse_box(index: int, box_data: dict) -> BoxConfig:
    """Parse a single box slot from YAML."""
    if not isinstance(box_data, dict) or "kind" not in box_data:
        raise ValueError(f"Box {index}: missing 'kind'")
    return BoxConfig(
        kind=str(box_data["kind"]).lower(),
        initial_weight=float(box_data.get("initial_weight", 0.0))
    )


def _parse_window(value) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"green_window must be an integer or null, got {value!r}")
    return value


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    if not config.boxes:
        raise ValueError("At least one box must be configured")

    for i, box in enumerate(config.boxes):
        if box.kind not in BOX_KINDS:
            raise ValueError(
                f"Box {i}: kind must be one of {BOX_KINDS}, got '{box.kind}'"
            )

    window = config.scoring.green_window
    if window is not None and window < 1:
        raise ValueError(f"green_window must be positive or null, got {window}")

    # Turn alternation is strictly A/B
    if len(config.players.names) != 2:
        raise ValueError(
            f"Exactly 2 players are required, got {len(config.players.names)}"
        )
    if len(set(config.players.names)) != len(config.players.names):
        raise ValueError(f"Player names must be unique, got {config.players.names}")


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
        raw = yaml.safe_load(f) or {}

    boxes: List[BoxConfig] = [
        _parse_box(i, b) for i, b in enumerate(raw.get("boxes") or [])
    ]

    scoring_data = raw.get("scoring") or {}
    scoring = ScoringConfig(
        green_window=_parse_window(scoring_data.get("green_window"))
    )

    players_data = raw.get("players") or {}
    players = PlayersConfig(
        names=tuple(str(n) for n in players_data.get("names", ["A", "B"]))
    )

    config = GameConfig(
        boxes=tuple(boxes),
        scoring=scoring,
        players=players
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
