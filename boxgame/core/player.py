"""
Players
=======

A player picks the lightest box each turn and banks its score.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from boxgame.core.boxes import Box


def select_box(boxes: Sequence[Box]) -> int:
    """
    Index of the box with the smallest weight.

    Ties go to the earliest box in the sequence.

    Raises:
        ValueError: If boxes is empty.
    """
    if not boxes:
        raise ValueError("Cannot select from an empty box list")
    # min() keeps the first of equal elements
    return min(range(len(boxes)), key=lambda i: boxes[i].weight)


class Player:
    """Tracks a player's running score."""

    def __init__(self, name: str):
        self._name = name
        self._score: float = 0.0
        self._turns: int = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def score(self) -> float:
        """Current total score."""
        return self._score

    @property
    def turns(self) -> int:
        """Number of turns taken."""
        return self._turns

    def take_turn(self, token: int, boxes: Sequence[Box]) -> Tuple[int, float]:
        """
        Play one token into the lightest box.

        Args:
            token: Token weight for this turn.
            boxes: Boxes on the table, in fixed order.

        Returns:
            (box_index, points) for the box that absorbed the token.
        """
        index = select_box(boxes)
        points = boxes[index].absorb(token)
        self._score += points
        self._turns += 1
        return index, points

    def reset(self) -> None:
        """Reset score to zero."""
        self._score = 0.0
        self._turns = 0

    def __repr__(self) -> str:
        return f"Player({self._name!r}, score={self._score:g})"
