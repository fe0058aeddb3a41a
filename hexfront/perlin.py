"""Two-dimensional gradient (Perlin) noise used for terrain generation."""

from __future__ import annotations

import math
import random
from typing import List, Optional


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def _grad(hash_value: int, x: float, y: float) -> float:
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = 0.0
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


class PerlinNoise:
    """Noise generator driven by a shuffled permutation of 0..255."""

    def __init__(self, seed: Optional[int] = None):
        rng = random.Random(seed)
        permutation = list(range(256))
        rng.shuffle(permutation)
        self._p: List[int] = permutation + permutation

    def noise(self, x: float, y: float) -> float:
        """Noise value at (x, y); zero at every integer lattice point."""
        fx, fy = math.floor(x), math.floor(y)
        xi = int(fx) & 255
        yi = int(fy) & 255
        x -= fx
        y -= fy

        u = _fade(x)
        v = _fade(y)

        p = self._p
        a = p[xi] + yi
        b = p[xi + 1] + yi

        return _lerp(
            v,
            _lerp(u, _grad(p[a], x, y), _grad(p[b], x - 1, y)),
            _lerp(u, _grad(p[a + 1], x, y - 1), _grad(p[b + 1], x - 1, y - 1)),
        )