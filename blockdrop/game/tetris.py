"""
Action engine: the four actions and the reducer that applies them.

The game is a left fold over a stream of actions:

    state = reduce(state, action, seed)

Every action is a total function from one GameState to the next. Illegal
moves and rotations are rejected by returning the input state unchanged;
nothing in here raises for a move the board does not allow. ``seed`` feeds
the randomizer whenever the action needs new pieces (a piece locking on
Tick, or Restart) and is ignored otherwise, which keeps the reducer pure:
replaying the same actions with the same seeds replays the same game.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Iterable, Iterator, Union

from blockdrop.game.collision import (
    collides_with_floor,
    collides_with_side,
    collides_with_stack,
    piece_cells,
    reaches_ceiling,
)
from blockdrop.game.rng import clock_seed
from blockdrop.game.state import GameState, initial_state, random_piece


# =============================================================================
# Actions
# =============================================================================


@dataclass(frozen=True)
class Tick:
    """Descend one row. Emitted by the gravity timer and by soft drop."""


@dataclass(frozen=True)
class Move:
    """Translate the current piece by (dx, dy)."""

    dx: int
    dy: int = 0


@dataclass(frozen=True)
class Rotate:
    """Advance the current piece to its next rotation state."""


@dataclass(frozen=True)
class Restart:
    """Start a new game, keeping only the high score."""


Action = Union[Tick, Move, Rotate, Restart]


# =============================================================================
# Row clearing
# =============================================================================


def clear_rows(state: GameState) -> GameState:
    """Remove every full row at once and score one point per row.

    Rows above a cleared row fall by the number of cleared rows below them;
    new empty rows always enter at the top.
    """
    full = state.board.full_rows()
    if not full:
        return state
    remaining = state.board.remove_rows(full)
    board = remaining.with_empty_rows_on_top(state.board.height - remaining.height)
    return replace(state, board=board, score=state.score + len(full))


# =============================================================================
# Transitions
# =============================================================================


def tick(state: GameState, seed: int) -> GameState:
    """Apply gravity to the current piece.

    If the piece can fall it moves down one row. Otherwise it comes to rest:
    resting with any cell above row 0 ends the game, and resting inside the
    playfield merges it into the board, promotes the preview piece, draws a
    new preview from ``seed`` and clears full rows.
    """
    if state.ended:
        return state

    current = state.current_piece
    candidate = current.moved(0, 1)
    highscore = max(state.highscore, state.score)

    if not (collides_with_floor(candidate, state.board)
            or collides_with_stack(candidate, state.board)):
        return replace(state, current_piece=candidate, highscore=highscore)

    # Game end is judged on where the piece rests, not on the rejected step
    if reaches_ceiling(current):
        return replace(state, ended=True, highscore=highscore)

    merged = replace(
        state,
        board=state.board.with_cells(piece_cells(current), current.color),
        current_piece=state.next_piece,
        next_piece=random_piece(seed),
        highscore=highscore,
    )
    return clear_rows(merged)


def move(state: GameState, dx: int, dy: int = 0) -> GameState:
    """Translate the current piece, or keep the state if the target is blocked."""
    if state.ended:
        return state
    candidate = state.current_piece.moved(dx, dy)
    if (collides_with_stack(candidate, state.board)
            or collides_with_side(candidate, state.board)
            or collides_with_floor(candidate, state.board)):
        return state
    return replace(state, current_piece=candidate)


def rotate(state: GameState) -> GameState:
    """Rotate the current piece in place. No wall kicks are attempted."""
    if state.ended:
        return state
    candidate = state.current_piece.rotated()
    if (collides_with_stack(candidate, state.board)
            or collides_with_side(candidate, state.board)
            or collides_with_floor(candidate, state.board)):
        return state
    return replace(state, current_piece=candidate)


def restart(state: GameState, seed: int) -> GameState:
    """Start over on an empty board of the same size.

    Only the high score survives, and it absorbs the outgoing score so a
    clear made just before restarting still counts. ``seed`` and
    ``seed + 1`` pick the new current and next pieces. A fresh
    state is never ended; should one ever be built, it is rebuilt from the
    next pair of seeds instead of being returned.
    """
    # The high score never drops below any score seen this session.
    fresh = initial_state(
        seed,
        highscore=max(state.highscore, state.score),
        width=state.board.width,
        height=state.board.height,
    )
    if fresh.ended:
        return restart(fresh, seed + 2)
    return fresh


# =============================================================================
# Reducer and fold
# =============================================================================


def reduce(state: GameState, action: Action, seed: int) -> GameState:
    """Apply one action to ``state``.

    Args:
        state: State before the action.
        action: Tick, Move, Rotate or Restart instance.
        seed: Seed for any pieces the action has to generate.

    Returns:
        The successor state (the same object when the action was rejected
        or had no effect).

    Raises:
        TypeError: If ``action`` is not one of the four action types.
    """
    if isinstance(action, Tick):
        return tick(state, seed)
    if isinstance(action, Move):
        return move(state, action.dx, action.dy)
    if isinstance(action, Rotate):
        return rotate(state)
    if isinstance(action, Restart):
        return restart(state, seed)
    raise TypeError(f"Not a game action: {action!r}")


def scan_states(
    state: GameState,
    actions: Iterable[Action],
    seed_source: Callable[[], int] = clock_seed,
) -> Iterator[GameState]:
    """Fold ``actions`` into ``state`` one at a time, yielding each result.

    Actions are applied strictly in iteration order. ``seed_source`` is
    called once per action.
    """
    for action in actions:
        state = reduce(state, action, seed_source())
        yield state


def run(
    state: GameState,
    actions: Iterable[Action],
    seed_source: Callable[[], int] = clock_seed,
) -> GameState:
    """Return the final state after folding every action in ``actions``."""
    for state in scan_states(state, actions, seed_source):
        pass
    return state
