"""Tests for key bindings and a headless render pass."""

from __future__ import annotations

import os
from dataclasses import replace

import pytest

pygame = pytest.importorskip("pygame")

from blockdrop.game.state import initial_state
from blockdrop.game.tetris import Move, Restart, Rotate, Tick
from blockdrop.play import GRAVITY_EVENT, action_for_event
from blockdrop.renderer import EMPTY_CELL_COLOR, PALETTE, GameRenderer, rgb

from conftest import tick_until_locked


@pytest.mark.parametrize(
    "key, expected",
    [
        ("K_a", Move(-1, 0)),
        ("K_LEFT", Move(-1, 0)),
        ("K_d", Move(1, 0)),
        ("K_RIGHT", Move(1, 0)),
        ("K_s", Tick()),
        ("K_DOWN", Tick()),
        ("K_w", Rotate()),
        ("K_UP", Rotate()),
        ("K_r", Restart()),
    ],
)
def test_key_bindings(key, expected):
    event = pygame.event.Event(pygame.KEYDOWN, key=getattr(pygame, key))
    assert action_for_event(event) == expected


def test_gravity_timer_is_a_tick():
    assert action_for_event(pygame.event.Event(GRAVITY_EVENT)) == Tick()


def test_unbound_events_map_to_nothing():
    assert action_for_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q)) is None
    assert action_for_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_a)) is None


def test_rgb_resolves_tags():
    assert rgb(None) == EMPTY_CELL_COLOR
    assert rgb("yellow") == PALETTE["yellow"]


def test_headless_render(monkeypatch):
    monkeypatch.setitem(os.environ, "SDL_VIDEODRIVER", "dummy")
    state = tick_until_locked(initial_state(0))
    renderer = GameRenderer(state.board.width, state.board.height, cell_size=10)
    try:
        renderer.render(state, fps=0)
        renderer.render(replace(state, ended=True), fps=0)
        assert renderer.screen.get_size() == (renderer.window_width, renderer.window_height)
    finally:
        renderer.close()
