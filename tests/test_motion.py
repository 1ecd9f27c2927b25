from __future__ import annotations

import pygame
import pytest

from shakefizz.game import GameSessionController
from shakefizz.motion import ShakeInput, handle_key
from shakefizz.storage import MemoryStore


def _down(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def _up(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=pos)


def _move(pos):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos)


def test_drag_speed_becomes_g_sample() -> None:
    shake = ShakeInput(pixels_per_g=100.0)

    magnitude, taps = shake.update([_down((0, 0)), _move((3, 4)), _move((6, 8))], 0.05)

    assert magnitude == pytest.approx((10 / 0.05) / 100.0)
    assert taps == 0


def test_motion_without_button_is_ignored() -> None:
    shake = ShakeInput()

    magnitude, taps = shake.update([_move((100, 100)), _move((300, 100))], 1 / 60)

    assert magnitude == 0.0
    assert taps == 0


def test_click_without_drag_is_a_tap() -> None:
    shake = ShakeInput()

    _, taps = shake.update([_down((10, 10)), _up((10, 10))], 1 / 60)
    assert taps == 1

    shake.update([_down((10, 10)), _move((200, 10))], 1 / 60)
    _, taps = shake.update([_up((200, 10))], 1 / 60)
    assert taps == 0


def test_space_key_is_a_tap() -> None:
    shake = ShakeInput()

    _, taps = shake.update([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)], 1 / 60)

    assert taps == 1


def test_zero_dt_gives_no_sample() -> None:
    assert ShakeInput().to_g(50.0, 0.0) == 0.0


def test_keys_walk_the_game_to_countdown() -> None:
    game = GameSessionController(store=MemoryStore())

    assert handle_key(game, pygame.K_4) is False
    assert handle_key(game, pygame.K_1)
    assert handle_key(game, pygame.K_RETURN)
    assert handle_key(game, pygame.K_y)
    assert game.game_state == GameSessionController.STATE_COUNTDOWN

    assert handle_key(game, pygame.K_ESCAPE)
    assert game.game_state == GameSessionController.STATE_SELECTION
    assert handle_key(game, pygame.K_g)
    assert game.fizz_remaining == 5
    assert handle_key(game, pygame.K_q) is False
