"""Keyboard-driven camera panning."""

from __future__ import annotations

import math
from typing import Tuple

Point = Tuple[float, float]

_DIRECTIONS = {"W": "up", "S": "down", "A": "left", "D": "right"}
_GAME_KEYS = frozenset({"Q", "R", "ESCAPE"})


def _normalize(key: str) -> str:
    return key.upper()


class CameraInput:
    """Tracks held WASD keys and turns them into camera movement."""

    def __init__(self, speed: float = 400.0):
        self.speed = speed
        self._held = {"up": False, "down": False, "left": False, "right": False}

    def press(self, key: str) -> bool:
        """Register a key press; True if the key is an action for the game."""
        name = _normalize(key)
        if name in _DIRECTIONS:
            self._held[_DIRECTIONS[name]] = True
        return name in _GAME_KEYS

    def release(self, key: str) -> None:
        name = _normalize(key)
        if name in _DIRECTIONS:
            self._held[_DIRECTIONS[name]] = False

    def movement(self, delta_time: float) -> Point:
        """Displacement for this frame; diagonals move at the same speed."""
        x = float(self._held["right"]) - float(self._held["left"])
        y = float(self._held["down"]) - float(self._held["up"])
        if x != 0.0 and y != 0.0:
            length = math.hypot(x, y)
            x /= length
            y /= length
        step = self.speed * delta_time
        return (x * step, y * step)