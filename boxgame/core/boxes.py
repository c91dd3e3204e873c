"""
Boxes
=====

Token-absorbing boxes and their two scoring rules.

- Green boxes score the square of the mean of their recent tokens.
- Blue boxes score Cantor's pairing of the smallest and largest token seen.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Optional

import numpy as np


# Tokens are unsigned 32-bit weights
TOKEN_MIN = 0
TOKEN_MAX = 2 ** 32 - 1


def validate_token(token: int) -> int:
    """
    Check that a token is an unsigned 32-bit integer.

    Args:
        token: Token weight to check.

    Returns:
        The token as a plain int.

    Raises:
        TypeError: If token is not an integer.
        ValueError: If token is outside [TOKEN_MIN, TOKEN_MAX].
    """
    if isinstance(token, bool) or not isinstance(token, (int, np.integer)):
        raise TypeError(f"Token must be an integer, got {type(token).__name__}")
    token = int(token)
    if not TOKEN_MIN <= token <= TOKEN_MAX:
        raise ValueError(f"Token out of range [{TOKEN_MIN}, {TOKEN_MAX}]: {token}")
    return token


def cantor_pairing(k1: int, k2: int) -> int:
    """
    Cantor's pairing function pi(k1, k2).

    Python ints are unbounded, so two 32-bit inputs never overflow.

    >>> cantor_pairing(0, 1)
    2
    """
    s = k1 + k2
    return (s * (s + 1)) // 2 + k2


class Box(ABC):
    """
    Base class for a box that absorbs tokens.

    The total weight is always the initial weight plus every absorbed token.
    Boxes order by weight so the lightest one can be picked with min().
    """

    kind: str = ""

    def __init__(self, initial_weight: float = 0.0):
        """
        Initialize box.

        Args:
            initial_weight: Weight before any token is absorbed.
        """
        self._initial_weight = float(initial_weight)
        self._weight = float(initial_weight)
        self._absorbed: int = 0

    @property
    def weight(self) -> float:
        """Current total weight."""
        return self._weight

    @property
    def initial_weight(self) -> float:
        return self._initial_weight

    @property
    def absorbed(self) -> int:
        """Number of tokens absorbed so far."""
        return self._absorbed

    def __lt__(self, other: "Box") -> bool:
        return self._weight < other._weight

    def absorb(self, token: int) -> float:
        """
        Absorb a token and return the resulting score.

        Args:
            token: Unsigned 32-bit token weight.

        Returns:
            Score produced by this box's rule.
        """
        token = validate_token(token)
        self._weight += token
        self._absorbed += 1
        self._record(token)
        return self._score()

    @abstractmethod
    def _record(self, token: int) -> None:
        """Update variant state with a new token."""

    @abstractmethod
    def _score(self) -> float:
        """Score for the current variant state."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(weight={self._weight:g}, absorbed={self._absorbed})"


class GreenBox(Box):
    """
    Scores the square of the mean of recently absorbed tokens.

    With a window of N, only the N most recent tokens count (all of them while
    fewer than N have arrived). With no window, every token counts.
    """

    kind = "green"

    def __init__(self, initial_weight: float = 0.0, window: Optional[int] = None):
        if window is not None and window < 1:
            raise ValueError(f"window must be positive or None, got {window}")
        super().__init__(initial_weight)
        self._window = window
        self._history: Deque[int] = deque(maxlen=window)

    @property
    def window(self) -> Optional[int]:
        return self._window

    @property
    def history(self) -> tuple:
        """Tokens currently contributing to the mean, oldest first."""
        return tuple(self._history)

    def _record(self, token: int) -> None:
        self._history.append(token)

    def _score(self) -> float:
        mean = float(np.mean(self._history))
        return mean * mean


class BlueBox(Box):
    """Scores cantor_pairing(smallest, largest) over all absorbed tokens."""

    kind = "blue"

    def __init__(self, initial_weight: float = 0.0):
        super().__init__(initial_weight)
        self._min_token: Optional[int] = None
        self._max_token: Optional[int] = None

    @property
    def min_token(self) -> Optional[int]:
        """Smallest token absorbed, or None before the first absorb."""
        return self._min_token

    @property
    def max_token(self) -> Optional[int]:
        """Largest token absorbed, or None before the first absorb."""
        return self._max_token

    def _record(self, token: int) -> None:
        if self._min_token is None or token < self._min_token:
            self._min_token = token
        if self._max_token is None or token > self._max_token:
            self._max_token = token

    def _score(self) -> float:
        return float(cantor_pairing(self._min_token, self._max_token))


def make_green_box(initial_weight: float, window: Optional[int] = None) -> GreenBox:
    return GreenBox(initial_weight, window=window)


def make_blue_box(initial_weight: float) -> BlueBox:
    return BlueBox(initial_weight)


def make_box(kind: str, initial_weight: float, green_window: Optional[int] = None) -> Box:
    """
    Create a box by kind name.

    Args:
        kind: "green" or "blue".
        initial_weight: Weight before any token is absorbed.
        green_window: Mean window for green boxes. Ignored for blue boxes.

    Returns:
        New Box instance.
    """
    if kind == GreenBox.kind:
        return make_green_box(initial_weight, window=green_window)
    if kind == BlueBox.kind:
        return make_blue_box(initial_weight)
    raise ValueError(f"Unknown box kind: '{kind}'")
