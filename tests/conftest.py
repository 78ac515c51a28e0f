"""
Shared fixtures
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# pylint: disable=wrong-import-position
import pytest

from lameboy.controls import Button, InputState
from lameboy.scenes.spaceship import SpaceshipScene

# pylint: enable=wrong-import-position

VIEWPORT = (320, 288)


class FixedRandom:
    """random.Random stand-in returning a fixed value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


class RecordingAudio:
    def __init__(self):
        self.played = []

    def play(self, name, volume=1.0):
        self.played.append((name, volume))
        return True


@pytest.fixture
def input_state():
    return InputState()


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def scene(input_state, audio):
    """A scene that never spawns enemies on its own."""
    return SpaceshipScene(
        viewport=VIEWPORT,
        input_state=input_state,
        audio=audio,
        rng=FixedRandom(0.999),
    )


@pytest.fixture
def playing(scene, input_state):
    input_state.press(Button.START)
    input_state.release(Button.START)
    return scene
