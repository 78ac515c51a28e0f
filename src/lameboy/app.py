"""
Main application for Lameboy using the pygame backend.
"""

from __future__ import annotations

import pygame

from lameboy.assets import AssetProvider
from lameboy.audio import AudioSink, Radio
from lameboy.backend import PygameBackend
from lameboy.constants import ASSETS_ROOT, FPS
from lameboy.controls import (
    InputState,
    KeyboardAdapter,
    PointerAdapter,
    default_touch_layout,
)
from lameboy.loop import LoopDriver
from lameboy.scenes.spaceship import SpaceshipScene
from lameboy.settings import GameSettings
from lameboy.utils import configure_logging, logger, set_screen
from lameboy.world import GameState


class Lameboy:
    """
    Game class: owns the window and pumps events into the scene.
    """

    def __init__(self, settings: GameSettings):
        """
        :param settings: Effective settings
        :type settings: GameSettings
        """
        logger.debug(f"Initializing {settings.window.title}")
        self.settings = settings
        self._carry_on = True
        self._clock = pygame.time.Clock()

        pygame.init()
        if settings.audio.enable and not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as e:
                logger.warning(f"No audio device, sounds disabled: {e}")

        window = settings.window
        self._screen = set_screen(
            window.title, window.width, window.height, window.resizable
        )

        self.assets = AssetProvider(ASSETS_ROOT)
        self.audio = AudioSink(
            self.assets,
            enabled=settings.audio.enable and bool(pygame.mixer.get_init()),
        )
        self.radio = Radio(self.assets, self.audio)

        self.input_state = InputState()
        self.keyboard = KeyboardAdapter(
            self.input_state, on_radio=self.radio.play
        )
        self.pointer = PointerAdapter(
            self.input_state, on_radio=self.radio.play
        )
        self._layout_pointer(*self._screen.get_size())

        self.scene = SpaceshipScene(
            viewport=self._screen.get_size(),
            input_state=self.input_state,
            audio=self.audio,
            spawn_rate=settings.spawn_rate,
        )
        self.backend = PygameBackend(self._screen, self.assets)
        self.driver = LoopDriver(
            simulate=self.scene.tick,
            render=self.draw_stuff,
            is_playing=lambda: self.scene.state is GameState.PLAYING,
            has_geometry=lambda: self.scene.world.has_valid_geometry,
            target_fps=settings.target_fps,
            throttle=settings.is_mobile,
        )

    def _resize(self, width: int, height: int):
        if not self.scene.resize(width, height):
            return
        self._screen = pygame.display.get_surface()
        self.backend.set_surface(self._screen)
        self._layout_pointer(width, height)

    def _layout_pointer(self, width: int, height: int):
        # mouse and touch share the on-screen buttons on every profile
        self.pointer.window_size = (width, height)
        self.pointer.regions = default_touch_layout(width, height)

    def handle_events(self):
        """
        Handle the events
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                self._carry_on = False
            elif event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)
            elif event.type == pygame.WINDOWFOCUSLOST:
                # key-up events are lost while unfocused
                self.input_state.release_all()
            else:
                if event.type in (
                    pygame.KEYDOWN,
                    pygame.MOUSEBUTTONDOWN,
                    pygame.FINGERDOWN,
                ):
                    self.audio.unlock()
                if not self.keyboard.handle_event(event):
                    self.pointer.handle_event(event)

    def draw_stuff(self):
        """
        Draw the stuff
        """
        ops = self.scene.draw_ops(
            self.assets,
            radio_playing=self.radio.is_playing,
            background=self.settings.renderer.background_color,
        )
        self.backend.present(ops)
        if self.pointer.regions:
            self.backend.draw_touch_controls(self.pointer.regions)
        pygame.display.flip()

    def run(self):
        """
        Run the game
        """
        logger.debug("Running the game")

        while self._carry_on:
            self.handle_events()
            self.assets.poll()
            self.driver.frame(pygame.time.get_ticks())
            self._clock.tick(FPS)

        pygame.quit()


def run():
    """
    Main entry point for Lameboy.

    - Builds the settings from a plain dictionary.
    - Opens a resizable window sized like the handheld screen.
    - Runs the loop until the window is closed.
    """
    # NOTE: settings live in a dictionary so they can later come from a
    # file or the command line.
    settings_data = {
        "window": {
            "title": "Lameboy",
            "resizable": True,
        },
        "renderer": {"background_color": (0x8B, 0x9A, 0x46)},
        "audio": {
            "enable": True,
        },
    }
    settings = GameSettings.from_dict(settings_data)
    configure_logging(settings.log_level)

    logger.info("Starting Lameboy...")
    logger.info(settings.to_dict())
    if settings.is_mobile:
        logger.info("Mobile optimizations enabled")

    game = Lameboy(settings)
    game.run()


if __name__ == "__main__":
    run()
