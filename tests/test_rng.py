"""Tests for the stateless LCG randomizer."""

from __future__ import annotations

from blockdrop.game.rng import (
    LCG_MODULUS,
    clock_seed,
    hash_seed,
    next_index,
    scale,
)


def test_hash_matches_gcc_lcg():
    assert hash_seed(0) == 12345
    assert hash_seed(1) == 1103515245 + 12345


def test_hash_stays_in_modulus():
    for seed in (0, 1, 2**31 - 1, 2**40, -5):
        assert 0 <= hash_seed(seed) < LCG_MODULUS


def test_scale_bounds():
    assert scale(0, 7) == 0
    assert scale(LCG_MODULUS - 1, 7) == 6


def test_next_index_known_values():
    assert next_index(0, 7) == 0
    assert next_index(1, 7) == 3


def test_next_index_is_pure():
    assert [next_index(s, 7) for s in range(50)] == [next_index(s, 7) for s in range(50)]


def test_next_index_covers_every_piece():
    indices = {next_index(seed, 7) for seed in range(1000)}
    assert indices == set(range(7))


def test_clock_seed_is_int():
    assert isinstance(clock_seed(), int)
