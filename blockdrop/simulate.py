"""
Headless simulation: fold a seeded stream of random actions.

Used by ``main.py --mode simulate`` and by the GIF recorder. The action
stream mimics a player mashing keys between gravity ticks; the same seed
always yields the same game.
"""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from typing import Any, Iterator

from blockdrop.game.state import GameState, initial_state
from blockdrop.game.tetris import Action, Move, Rotate, Tick, scan_states

# Relative frequency of each action in the random stream
DEFAULT_MOVE_WEIGHTS: dict[str, float] = {
    "tick": 4.0,
    "left": 1.0,
    "right": 1.0,
    "rotate": 1.0,
}

_ACTIONS_BY_NAME: dict[str, Action] = {
    "tick": Tick(),
    "left": Move(-1, 0),
    "right": Move(1, 0),
    "rotate": Rotate(),
}


@dataclass
class SimulationResult:
    """Summary of one headless game."""

    final_state: GameState
    steps: int
    pieces_locked: int

    @property
    def ended(self) -> bool:
        return self.final_state.ended


def random_actions(
    rng: random.Random,
    weights: dict[str, float] | None = None,
) -> Iterator[Action]:
    """Yield an endless stream of actions drawn with the given weights.

    Args:
        rng: Source of randomness for the draw.
        weights: Action name ("tick", "left", "right", "rotate") to weight.

    Raises:
        ValueError: If ``weights`` names an unknown action.
    """
    weights = weights or DEFAULT_MOVE_WEIGHTS
    unknown = set(weights) - set(_ACTIONS_BY_NAME)
    if unknown:
        raise ValueError(f"Unknown actions in move weights: {sorted(unknown)}")
    names = list(weights)
    cumulative = list(itertools.accumulate(weights[name] for name in names))
    while True:
        name = rng.choices(names, cum_weights=cumulative)[0]
        yield _ACTIONS_BY_NAME[name]


def iter_game(
    seed: int,
    steps: int,
    weights: dict[str, float] | None = None,
) -> Iterator[GameState]:
    """Yield the initial state and then one state per action, up to ``steps``.

    Stops early once the game ends.
    """
    state = initial_state(seed)
    yield state
    actions = itertools.islice(random_actions(random.Random(seed), weights), steps)
    # Piece seeds continue from the two used for the initial pieces
    seeds = itertools.count(seed + 2)
    for state in scan_states(state, actions, seeds.__next__):
        yield state
        if state.ended:
            return


def simulate(
    seed: int,
    steps: int,
    weights: dict[str, float] | None = None,
) -> SimulationResult:
    """Play ``steps`` random actions from a seeded start and summarize.

    Args:
        seed: Seed for both the initial pieces and the action stream.
        steps: Maximum number of actions to apply.
        weights: Optional action weights (see DEFAULT_MOVE_WEIGHTS).

    Returns:
        SimulationResult with the final state, the number of actions applied
        and how many pieces were merged into the board.
    """
    pieces_locked = 0
    applied = -1
    previous: GameState | None = None
    for state in iter_game(seed, steps, weights):
        applied += 1
        if previous is not None and state.next_piece is not previous.next_piece:
            pieces_locked += 1
        previous = state
    return SimulationResult(final_state=previous, steps=applied, pieces_locked=pieces_locked)


def summarize(result: SimulationResult) -> dict[str, Any]:
    state = result.final_state
    return {
        "steps": result.steps,
        "pieces_locked": result.pieces_locked,
        "score": state.score,
        "highscore": state.highscore,
        "ended": state.ended,
        "filled_cells": state.board.filled_count(),
    }
