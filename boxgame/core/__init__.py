"""
Box Core - The game mechanics.

Main exports:
- play: Run a full game and return both scores
- BoxGame: Game driver with turn-by-turn access
- GreenBox / BlueBox: The two box scoring rules
- Player: Score holder that picks the lightest box
- GameConfig: Configuration loaded from game_config.yaml
"""

from boxgame.core.config_loader import GameConfig, load_config
from boxgame.core.boxes import (
    TOKEN_MAX,
    Box,
    GreenBox,
    BlueBox,
    cantor_pairing,
    make_box,
    make_green_box,
    make_blue_box,
    validate_token,
)
from boxgame.core.player import Player, select_box
from boxgame.core.game import BoxGame, GameResult, TurnResult, format_summary, play

__all__ = [
    "GameConfig",
    "load_config",
    "TOKEN_MAX",
    "Box",
    "GreenBox",
    "BlueBox",
    "cantor_pairing",
    "make_box",
    "make_green_box",
    "make_blue_box",
    "validate_token",
    "Player",
    "select_box",
    "BoxGame",
    "GameResult",
    "TurnResult",
    "format_summary",
    "play",
]
