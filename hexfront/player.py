"""A square player moved with WASD inside a fixed window."""

from __future__ import annotations

from typing import Iterable, Tuple

Point = Tuple[float, float]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class Player:
    """A square that moves at constant speed and stays inside its bounds."""

    def __init__(self, speed: float = 200.0):
        self.speed = speed
        self.size: Point = (50.0, 50.0)
        self.bounds: Point = (800.0, 600.0)
        self.position: Point = (400.0, 300.0)
        self.velocity: Point = (0.0, 0.0)
        self.color = (255, 0, 0, 255)

    def handle_input(self, pressed: Iterable[str]) -> None:
        """Set the velocity from the currently held keys."""
        keys = {key.upper() for key in pressed}
        vx = vy = 0.0
        if "W" in keys:
            vy = -self.speed
        if "S" in keys:
            vy = self.speed
        if "A" in keys:
            vx = -self.speed
        if "D" in keys:
            vx = self.speed
        self.velocity = (vx, vy)

    def update(self, delta_time: float) -> None:
        """Move by the velocity, then keep the square inside the bounds."""
        x = self.position[0] + self.velocity[0] * delta_time
        y = self.position[1] + self.velocity[1] * delta_time
        x = _clamp(x, 0.0, self.bounds[0] - self.size[0])
        y = _clamp(y, 0.0, self.bounds[1] - self.size[1])
        self.position = (x, y)