"""
Lameboy loop driver
"""

from __future__ import annotations

from typing import Callable

from lameboy.utils import logger


class LoopDriver:
    """
    Decides, once per display refresh, whether a frame does any work.

    When throttled, frames closer than ``1000 / target_fps`` ms to the last
    executed one are skipped. The simulation step only runs while a game
    is in progress; rendering runs on every executed frame.
    """

    def __init__(
        self,
        simulate: Callable[[float], None],
        render: Callable[[], None],
        is_playing: Callable[[], bool],
        has_geometry: Callable[[], bool] = lambda: True,
        target_fps: int = 60,
        throttle: bool = False,
    ):
        self._simulate = simulate
        self._render = render
        self._is_playing = is_playing
        self._has_geometry = has_geometry
        self.target_fps = target_fps
        self.throttle = throttle
        self.frame_interval = 1000 / target_fps
        self.last_frame_time = 0.0
        self.frames_run = 0

    def frame(self, now: float) -> bool:
        """
        :param now: Display timestamp in milliseconds
        :type now: float

        :return: True if the frame did any work
        :rtype: bool
        """
        if self.throttle and now - self.last_frame_time < self.frame_interval:
            return False
        self.last_frame_time = now

        if not self._has_geometry():
            logger.debug("Zero-sized play area, skipping frame")
            return False

        if self._is_playing():
            self._simulate(now)
        self._render()
        self.frames_run += 1
        return True
