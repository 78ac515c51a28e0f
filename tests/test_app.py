"""
Event pump tests for the game window, run on the dummy SDL driver.
"""

import pygame
import pytest

from lameboy.app import Lameboy
from lameboy.constants import BACKGROUND_COLOR, WINDOW_SIZE
from lameboy.controls import RADIO_REGION, Button
from lameboy.settings import GameSettings
from lameboy.world import GameState


@pytest.fixture
def game():
    settings = GameSettings.from_dict(
        {"profile": "desktop", "audio": {"enable": False}}
    )
    game = Lameboy(settings)
    pygame.event.clear()
    yield game
    pygame.quit()


def post(game, kind, **attrs):
    pygame.event.post(pygame.event.Event(kind, **attrs))
    game.handle_events()


def key(game, kind, code):
    post(game, kind, key=code, mod=0, unicode="", scancode=0)


def center_of(game, name):
    box = game.pointer.regions[name]
    return (int(box.x + box.width / 2), int(box.y + box.height / 2))


def test_desktop_mouse_presses_on_screen_buttons(game):
    assert not game.settings.is_mobile
    pos = center_of(game, Button.J.value)

    post(game, pygame.MOUSEBUTTONDOWN, button=1, pos=pos)
    assert game.input_state.is_held(Button.J)

    post(game, pygame.MOUSEBUTTONUP, button=1, pos=pos)
    assert not game.input_state.is_held(Button.J)


def test_on_screen_buttons_cover_every_button(game):
    assert {b.value for b in Button} | {RADIO_REGION} == set(
        game.pointer.regions
    )
    assert game.pointer.window_size == WINDOW_SIZE


def test_focus_loss_releases_held_buttons(game):
    key(game, pygame.KEYDOWN, pygame.K_RIGHT)
    key(game, pygame.KEYDOWN, pygame.K_j)
    assert game.input_state.is_held(Button.RIGHT)

    post(game, pygame.WINDOWFOCUSLOST)
    assert not any(game.input_state.snapshot().values())


@pytest.mark.parametrize(
    "kind, attrs",
    [
        (
            pygame.KEYDOWN,
            {"key": pygame.K_q, "mod": 0, "unicode": "q", "scancode": 0},
        ),
        (pygame.MOUSEBUTTONDOWN, {"button": 1, "pos": (1, 1)}),
        (
            pygame.FINGERDOWN,
            {"finger_id": 1, "touch_id": 0, "x": 0.0, "y": 0.0},
        ),
    ],
)
def test_first_interaction_unlocks_audio(game, kind, attrs):
    assert not game.audio.unlocked
    post(game, kind, **attrs)
    assert game.audio.unlocked


def test_mouse_motion_does_not_unlock_audio(game):
    post(game, pygame.MOUSEMOTION, pos=(5, 5), rel=(1, 1), buttons=(0, 0, 0))
    assert not game.audio.unlocked


def test_resize_to_nothing_is_ignored(game):
    post(game, pygame.VIDEORESIZE, w=0, h=0, size=(0, 0))
    assert game.scene.world.viewport == WINDOW_SIZE
    assert game.pointer.window_size == WINDOW_SIZE


def test_resize_moves_the_on_screen_buttons(game):
    post(game, pygame.VIDEORESIZE, w=640, h=576, size=(640, 576))
    assert game.scene.world.viewport == (640, 576)
    assert game.pointer.window_size == (640, 576)
    _, y = center_of(game, Button.J.value)
    assert y > WINDOW_SIZE[1]


def test_start_key_begins_a_game(game):
    key(game, pygame.KEYDOWN, pygame.K_RETURN)
    assert game.scene.state is GameState.PLAYING


def test_quit_stops_the_loop(game):
    post(game, pygame.QUIT)
    assert not game._carry_on  # pylint: disable=protected-access


def test_draw_stuff_paints_the_background(game):
    game.draw_stuff()
    surface = pygame.display.get_surface()
    assert surface.get_at((0, 0))[:3] == BACKGROUND_COLOR
