"""Deterministic pseudo-random numbers built on the splitmix64 generator."""

from __future__ import annotations

import math
import time

_MASK64 = (1 << 64) - 1
_GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_MUL1 = 0xBF58476D1CE4E5B9
_MUL2 = 0x94D049BB133111EB
_TWO_POW_52 = float(1 << 52)


class Random:
    """A small splitmix64 random generator.

    Given the same seed it always produces the same sequence, so a whole
    optimisation run can be reproduced.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.time_ns() // 1_000_000
        if seed < 0:
            raise ValueError("seed must be a non-negative integer")
        self._state = seed & _MASK64

    def next_uint64(self) -> int:
        """Return the next raw 64-bit unsigned integer."""
        self._state = (self._state + _GOLDEN_GAMMA) & _MASK64
        z = self._state
        z = ((z ^ (z >> 30)) * _MUL1) & _MASK64
        z = ((z ^ (z >> 27)) * _MUL2) & _MASK64
        return z ^ (z >> 31)

    def _unit(self) -> float:
        # The top 52 bits become the mantissa of a double in [1, 2), minus one.
        return (self.next_uint64() >> 12) / _TWO_POW_52

    def rand(self, low: float = 0.0, high: float = 1.0) -> float:
        """Return a float uniformly drawn from [low, high)."""
        return (high - low) * self._unit() + low

    def rand_vector(self, n: int, low: float = 0.0, high: float = 1.0) -> list[float]:
        """Return ``n`` floats uniformly drawn from [low, high)."""
        return [self.rand(low, high) for _ in range(n)]

    def rand_uint(self, low: int, high: int) -> int:
        """Return an integer uniformly drawn from [low, high)."""
        span = high - low
        if span <= 0:
            raise ValueError(f"empty integer range [{low}, {high})")
        limit = (-span) & _MASK64
        while True:
            x = self.next_uint64()
            r = x % span
            if x - r <= limit:
                return r + low

    def norm(self, mean: float = 0.0, sigma: float = 1.0) -> float:
        """Return a normally distributed float (Box-Muller transform)."""
        u1 = self._unit()
        u2 = self._unit()
        radius = math.inf if u1 == 0.0 else math.sqrt(-2.0 * math.log(u1))
        return radius * math.cos(2.0 * math.pi * u2) * sigma + mean