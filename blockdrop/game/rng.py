"""
Stateless linear congruential randomizer for piece selection.

Every call is a pure function of the seed it is given. The game never keeps
a generator object around; whoever drives the reducer supplies a fresh seed
(wall-clock milliseconds in play mode, a counter in tests) each time a new
piece is needed, so a recorded seed sequence replays the exact same game.
"""

from __future__ import annotations

import time

# GCC's LCG constants
LCG_MODULUS = 0x80000000  # 2**31
LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345


def hash_seed(seed: int) -> int:
    """Advance ``seed`` one LCG step.

    Args:
        seed: Any integer (negative values wrap into the modulus).

    Returns:
        Hash value in ``[0, LCG_MODULUS)``.
    """
    return (LCG_MULTIPLIER * seed + LCG_INCREMENT) % LCG_MODULUS


def scale(hash_value: int, maximum: int) -> int:
    """Map a hash value onto ``[0, maximum)``."""
    return (maximum * hash_value) // LCG_MODULUS


def next_index(seed: int, count: int) -> int:
    """Select an index in ``[0, count)`` from ``seed``.

    Args:
        seed: Seed for this single selection.
        count: Number of choices (the catalog size for piece selection).

    Returns:
        Integer index, deterministic for a given (seed, count).
    """
    return scale(hash_seed(seed), count)


def clock_seed() -> int:
    """Seed from the wall clock in milliseconds."""
    return time.time_ns() // 1_000_000
