"""Shared pseudo-random number helpers."""

from __future__ import annotations

import random
from typing import Optional

_rng = random.Random()


def seed(value: Optional[int] = None) -> None:
    """Reseed the generator; None seeds from the current time or OS entropy."""
    _rng.seed(value)


def rand_int(low: int = 0, high: int = 1) -> int:
    """Random integer in the closed range [low, high]."""
    if high < low:
        raise ValueError(f"empty range [{low}, {high}]")
    return _rng.randint(low, high)


def rand_float(low: float = 0.0, high: float = 1.0) -> float:
    """Random float in the half-open range [low, high)."""
    return _rng.random() * (high - low) + low