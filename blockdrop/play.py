"""
Interactive play mode.

Keyboard events and the gravity timer are both translated into action
values and folded into the game state in the order pygame delivers them:

  - A / Left arrow: move left
  - D / Right arrow: move right
  - S / Down arrow: soft drop (one Tick)
  - W / Up arrow: rotate
  - R: restart
  - Escape / close window: quit
"""

from __future__ import annotations

from typing import Any, Callable

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from blockdrop.game.rng import clock_seed
from blockdrop.game.state import TICK_RATE_MS, GameState, initial_state
from blockdrop.game.tetris import Action, Move, Restart, Rotate, Tick, reduce
from blockdrop.renderer import GameRenderer


# ── Keyboard mapping ────────────────────────────────────────────────────
KEY_MAP: dict[int, Action] = {}
if pygame is not None:
    KEY_MAP = {
        pygame.K_a: Move(-1, 0),
        pygame.K_LEFT: Move(-1, 0),
        pygame.K_d: Move(1, 0),
        pygame.K_RIGHT: Move(1, 0),
        pygame.K_s: Tick(),
        pygame.K_DOWN: Tick(),
        pygame.K_w: Rotate(),
        pygame.K_UP: Rotate(),
        pygame.K_r: Restart(),
    }
    GRAVITY_EVENT = pygame.USEREVENT + 1


def action_for_event(event: Any) -> Action | None:
    """Translate one pygame event into an action (None if it maps to nothing)."""
    if event.type == GRAVITY_EVENT:
        return Tick()
    if event.type == pygame.KEYDOWN:
        return KEY_MAP.get(event.key)
    return None


def play_manual(
    config: dict[str, Any],
    seed_source: Callable[[], int] = clock_seed,
) -> GameState:
    """Run the game in a pygame window until the player quits.

    Args:
        config: Config dict loaded from game.yaml.
        seed_source: Called for the initial pieces and once per action.

    Returns:
        The last state shown, so callers can report the final score.
    """
    if pygame is None:
        raise ImportError("pygame is required for play mode. Install it: pip install pygame")

    tick_rate_ms = config.get("tick_rate_ms", TICK_RATE_MS)
    fps = config.get("fps", 60)
    seed = config.get("seed")

    state = initial_state(seed if seed is not None else seed_source())
    renderer = GameRenderer(
        state.board.width,
        state.board.height,
        cell_size=config.get("cell_size", 20),
    )
    renderer.init()
    pygame.time.set_timer(GRAVITY_EVENT, tick_rate_ms)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
                break
            action = action_for_event(event)
            if action is not None:
                state = reduce(state, action, seed_source())

        renderer.render(state, fps)

    pygame.time.set_timer(GRAVITY_EVENT, 0)
    renderer.close()
    return state
