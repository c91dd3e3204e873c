"""
boxgame Package
===============

A two-player scoring game played over green and blue boxes.

- Box scoring rules
- Lightest-box selection
- Turn alternation and final scores

Box layout and scoring parameters live in game_config.yaml.
"""

from boxgame.core import play

__all__ = ["play"]
