"""
Lameboy controls: logical buttons and the device adapters feeding them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

import pygame

from lameboy.entities import Box
from lameboy.utils import logger


class Button(str, Enum):
    """
    Logical buttons of the handheld.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    J = "j"
    B = "b"
    START = "start"
    SELECT = "select"


ButtonListener = Callable[[Button], None]

KEY_MAP: dict[int, Button] = {
    pygame.K_UP: Button.UP,
    pygame.K_DOWN: Button.DOWN,
    pygame.K_LEFT: Button.LEFT,
    pygame.K_RIGHT: Button.RIGHT,
    pygame.K_w: Button.UP,
    pygame.K_s: Button.DOWN,
    pygame.K_a: Button.LEFT,
    pygame.K_d: Button.RIGHT,
    pygame.K_j: Button.J,
    pygame.K_b: Button.B,
    pygame.K_RETURN: Button.START,
    pygame.K_KP_ENTER: Button.START,
    pygame.K_LSHIFT: Button.SELECT,
    pygame.K_RSHIFT: Button.SELECT,
}

RADIO_KEY = pygame.K_r


class InputState:
    """
    Current held flag for every logical button.

    Only edges are reported: pressing a held button or releasing a
    free one does nothing.
    """

    def __init__(self):
        self._held = {button: False for button in Button}
        self._on_press: list[ButtonListener] = []
        self._on_release: list[ButtonListener] = []

    def on_press(self, listener: ButtonListener):
        self._on_press.append(listener)

    def on_release(self, listener: ButtonListener):
        self._on_release.append(listener)

    def press(self, button: Button):
        """
        :param button: Button going down
        :type button: Button
        """
        if self._held[button]:
            return
        self._held[button] = True
        logger.debug(f"Button pressed: {button.value}")
        for listener in list(self._on_press):
            listener(button)

    def release(self, button: Button):
        """
        :param button: Button going up
        :type button: Button
        """
        if not self._held[button]:
            return
        self._held[button] = False
        for listener in list(self._on_release):
            listener(button)

    def release_all(self):
        for button in Button:
            self.release(button)

    def is_held(self, button: Button) -> bool:
        return self._held[button]

    def snapshot(self) -> dict[Button, bool]:
        return dict(self._held)


@dataclass
class KeyboardAdapter:
    """
    Translate pygame key events into button edges.
    """

    input_state: InputState
    on_radio: Optional[Callable[[], None]] = None

    def handle_event(self, event) -> bool:
        """
        :param event: pygame event
        :type event: pygame.event.Event

        :return: True if the event was consumed
        :rtype: bool
        """
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False

        if event.key == RADIO_KEY:
            if event.type == pygame.KEYDOWN and self.on_radio is not None:
                self.on_radio()
            return True

        button = KEY_MAP.get(event.key)
        if button is None:
            return False

        if event.type == pygame.KEYDOWN:
            self.input_state.press(button)
        else:
            self.input_state.release(button)
        return True


RADIO_REGION = "radio"


@dataclass
class PointerAdapter:
    """
    On-screen buttons driven by the mouse or by touch.

    Each region is keyed by a button value (or ``"radio"``). A pointer
    holds at most one button; leaving the region releases it.
    """

    input_state: InputState
    regions: dict[str, Box] = field(default_factory=dict)
    on_radio: Optional[Callable[[], None]] = None
    window_size: tuple[int, int] = (0, 0)

    # pointer id -> held button; the mouse uses id -1
    _held: dict[int, Button] = field(default_factory=dict)

    def region_at(self, x: float, y: float) -> str | None:
        for name, box in self.regions.items():
            if box.contains(x, y):
                return name
        return None

    def pointer_down(self, pointer_id: int, x: float, y: float):
        name = self.region_at(x, y)
        if name is None:
            return
        if name == RADIO_REGION:
            if self.on_radio is not None:
                self.on_radio()
            return
        button = Button(name)
        self._held[pointer_id] = button
        self.input_state.press(button)

    def pointer_up(self, pointer_id: int):
        button = self._held.pop(pointer_id, None)
        if button is not None:
            self.input_state.release(button)

    def pointer_move(self, pointer_id: int, x: float, y: float):
        button = self._held.get(pointer_id)
        if button is None:
            return
        if not self.regions[button.value].contains(x, y):
            self.pointer_up(pointer_id)

    def handle_event(self, event) -> bool:
        """
        :param event: pygame event
        :type event: pygame.event.Event

        :return: True if the event was consumed
        :rtype: bool
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.pointer_down(-1, *event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.pointer_up(-1)
        elif event.type == pygame.MOUSEMOTION:
            self.pointer_move(-1, *event.pos)
        elif event.type in (
            pygame.FINGERDOWN,
            pygame.FINGERUP,
            pygame.FINGERMOTION,
        ):
            # finger coordinates are normalized to the window
            ww, wh = self.window_size
            x, y = event.x * ww, event.y * wh
            if event.type == pygame.FINGERDOWN:
                self.pointer_down(event.finger_id, x, y)
            elif event.type == pygame.FINGERUP:
                self.pointer_up(event.finger_id)
            else:
                self.pointer_move(event.finger_id, x, y)
        else:
            return False
        return True


def default_touch_layout(width: int, height: int) -> dict[str, Box]:
    """
    D-pad bottom left, J/B bottom right, START/SELECT and radio along
    the bottom middle.

    :param width: Window width
    :type width: int

    :param height: Window height
    :type height: int

    :return: region name -> box
    :rtype: dict[str, Box]
    """
    pad = max(16, min(width, height) // 10)
    bottom = height - 3 * pad - 8
    left = 8
    right = width - 2 * pad - 16
    mid = width / 2
    small_y = height - pad // 2 - 8
    return {
        Button.UP.value: Box(left + pad, bottom, pad, pad),
        Button.LEFT.value: Box(left, bottom + pad, pad, pad),
        Button.RIGHT.value: Box(left + 2 * pad, bottom + pad, pad, pad),
        Button.DOWN.value: Box(left + pad, bottom + 2 * pad, pad, pad),
        Button.B.value: Box(right, bottom + pad, pad, pad),
        Button.J.value: Box(right + pad + 8, bottom + pad // 2, pad, pad),
        Button.SELECT.value: Box(mid - pad - 4, small_y, pad, pad // 2),
        Button.START.value: Box(mid + 4, small_y, pad, pad // 2),
        RADIO_REGION: Box(mid - pad // 2, 8, pad, pad // 2),
    }
