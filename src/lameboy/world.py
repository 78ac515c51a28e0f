"""
Lameboy world
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mini_arcade_core.scenes.sim_scene import BaseWorld

from lameboy.constants import PLAYER_X
from lameboy.entities import Bullet, Enemy, Player, UltimateLaser
from lameboy.utils import logger


class GameState(str, Enum):
    """
    Lifecycle of a session.
    """

    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "gameover"


@dataclass
class SpaceshipWorld(BaseWorld):
    """
    Everything the simulation mutates, in one place.

    The player, bullets and enemies live in their own typed lists; the
    generic engine entity list stays empty.
    """

    entities: list = field(default_factory=list)
    viewport: tuple[float, float] = (0.0, 0.0)
    player: Player = field(default_factory=Player)
    bullets: list[Bullet] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)
    laser: UltimateLaser | None = None

    state: GameState = GameState.MENU
    score: int = 0
    game_speed: int = 1
    ultimate_charge: int = 0  # 0..100

    @property
    def ultimate_active(self) -> bool:
        return self.laser is not None

    @property
    def has_valid_geometry(self) -> bool:
        vw, vh = self.viewport
        return vw > 0 and vh > 0

    def center_player(self):
        """
        Put the player halfway down the play area.
        """
        _, vh = self.viewport
        if vh > 0:
            self.player.y = vh / 2 - self.player.height / 2

    def resize(self, width: float, height: float) -> bool:
        """
        Adopt a new play-area size; non-positive sizes are ignored.

        :param width: New width
        :type width: float

        :param height: New height
        :type height: float

        :return: True if the viewport changed
        :rtype: bool
        """
        if width <= 0 or height <= 0:
            logger.debug(f"Ignoring resize to {width}x{height}")
            return False
        self.viewport = (width, height)
        return True

    def init_game(self):
        """
        Reset the session and start playing.
        """
        self.state = GameState.PLAYING
        self.score = 0
        self.game_speed = 1
        self.ultimate_charge = 0
        self.laser = None

        if self.has_valid_geometry:
            self.player.x = PLAYER_X
            self.center_player()

        self.bullets.clear()
        self.enemies.clear()
        self.player.last_shot_time = None
        logger.debug("Game started")
