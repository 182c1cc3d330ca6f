"""
Dice - The engine's only source of nondeterminism.

A die is any zero-argument callable returning an int in 1-6.
roll_dice() takes one as an argument so tests and reproducible
servers can swap in a seeded die.
"""

from __future__ import annotations
import random
from typing import Callable

from .board import DIE_FACES

Die = Callable[[], int]


def system_die() -> int:
    """Roll with the module-level random generator."""
    return random.randint(1, DIE_FACES)


class SeededDie:
    """A die with its own generator, reproducible from a seed."""

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def __call__(self) -> int:
        return self._rng.randint(1, DIE_FACES)

    def __repr__(self) -> str:
        return f"SeededDie(seed={self.seed!r})"
