"""
Core Game
=========

Main game driver: builds the boxes, alternates players, and totals scores.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from boxgame.core.boxes import Box, make_box
from boxgame.core.config_loader import GameConfig, get_config
from boxgame.core.player import Player


@dataclass
class TurnResult:
    """Result of a single turn."""
    turn: int
    player: str
    box_index: int
    token: int
    points: float
    box_weight: float


@dataclass
class GameResult:
    """Final outcome of a game."""
    score_a: float
    score_b: float
    turns: List[TurnResult] = field(default_factory=list)
    names: Tuple[str, str] = ("A", "B")

    @property
    def winner(self) -> Optional[str]:
        """Name of the higher-scoring player, or None on a tie."""
        if self.score_a > self.score_b:
            return self.names[0]
        if self.score_b > self.score_a:
            return self.names[1]
        return None

    def as_tuple(self) -> Tuple[float, float]:
        return (self.score_a, self.score_b)


class BoxGame:
    """
    Two-player box game.

    Players alternate turns, the first player starting. Each turn the acting
    player drops the next token into the currently lightest box and adds the
    box's score to their own.
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
        self._players: List[Player] = [Player(name) for name in config.players.names]
        self._boxes: List[Box] = []
        self._turns: List[TurnResult] = []
        self.reset()

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config

    @property
    def boxes(self) -> Tuple[Box, ...]:
        """Boxes in table order."""
        return tuple(self._boxes)

    @property
    def players(self) -> Tuple[Player, ...]:
        return tuple(self._players)

    @property
    def turns_taken(self) -> int:
        return len(self._turns)

    @property
    def current_player(self) -> Player:
        """Player who acts on the next turn."""
        return self._players[len(self._turns) % len(self._players)]

    @property
    def scores(self) -> Tuple[float, float]:
        """(player A score, player B score)."""
        return (self._players[0].score, self._players[1].score)

    def _build_boxes(self) -> List[Box]:
        window = self._config.scoring.green_window
        return [
            make_box(box.kind, box.initial_weight, green_window=window)
            for box in self._config.boxes
        ]

    def reset(self) -> None:
        """Reset game to initial state with fresh boxes."""
        self._boxes = self._build_boxes()
        for player in self._players:
            player.reset()
        self._turns = []

    def step(self, token: int) -> TurnResult:
        """
        Execute one turn for the current player.

        Args:
            token: Token weight for this turn.

        Returns:
            TurnResult describing the move.
        """
        player = self.current_player
        box_index, points = player.take_turn(token, self._boxes)

        result = TurnResult(
            turn=len(self._turns),
            player=player.name,
            box_index=box_index,
            token=int(token),
            points=points,
            box_weight=self._boxes[box_index].weight
        )
        self._turns.append(result)
        return result

    def play(self, tokens: Iterable[int]) -> GameResult:
        """
        Play a full game from a fresh state.

        Args:
            tokens: Token weights, each used for exactly one turn.

        Returns:
            GameResult with final scores and every turn.
        """
        self.reset()
        for token in tokens:
            self.step(token)

        score_a, score_b = self.scores
        return GameResult(
            score_a=score_a,
            score_b=score_b,
            turns=list(self._turns),
            names=tuple(p.name for p in self._players)
        )

    def get_info(self) -> Dict[str, Any]:
        """Get summary info dict."""
        return {
            "scores": {p.name: p.score for p in self._players},
            "turns_taken": len(self._turns),
            "box_weights": [box.weight for box in self._boxes],
            "box_kinds": [box.kind for box in self._boxes],
        }


def format_summary(
    score_a: float,
    score_b: float,
    names: Tuple[str, str] = ("A", "B")
) -> str:
    """One-line human-readable summary of both scores."""
    return f"Scores: player {names[0]} {score_a:g}, player {names[1]} {score_b:g}"


def play(
    tokens: Iterable[int],
    verbose: bool = True,
    config: Optional[GameConfig] = None
) -> Tuple[float, float]:
    """
    Play one game and return both final scores.

    Args:
        tokens: Token weights in turn order. Player A takes even turns.
        verbose: If True, print a one-line score summary.
        config: Game configuration. Uses default if None.

    Returns:
        (player A score, player B score).
    """
    result = BoxGame(config).play(tokens)

    if verbose:
        print(format_summary(result.score_a, result.score_b, names=result.names))

    return result.as_tuple()
