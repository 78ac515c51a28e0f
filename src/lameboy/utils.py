"""
Lameboy utils
"""

from __future__ import annotations

import logging
from pathlib import Path

import pygame
from mini_arcade_core.utils import logger
from mini_arcade_core.utils.logging import (
    configure_logging as configure_console_logging,
)

from lameboy.exceptions import AssetLoadError


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Install the mini-arcade-core console handler at the given level.

    :param level: Logging level name or number
    :type level: str | int
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    configure_console_logging(level)
    logger.setLevel(level)


def load_image(filename: str | Path, transparent: bool = True):
    """
    Load an image

    :param filename: Name of the file
    :type filename: str | Path

    :param transparent: Keep per-pixel alpha
    :type transparent: bool

    :return: pygame.Surface

    :raise AssetLoadError: If pygame cannot read the file
    """
    try:
        image = pygame.image.load(str(filename))
    except (pygame.error, FileNotFoundError) as e:
        raise AssetLoadError(str(filename), str(e)) from e

    # convert() needs a display mode; keep the raw surface otherwise
    if pygame.display.get_surface() is None:
        return image
    return image.convert_alpha() if transparent else image.convert()


def load_sound(filename: str | Path):
    """
    Load a sound effect

    :param filename: Name of the file
    :type filename: str | Path

    :return: pygame.mixer.Sound

    :raise AssetLoadError: If the mixer is not available or the file is bad
    """
    if not pygame.mixer.get_init():
        raise AssetLoadError(str(filename), "mixer not initialized")
    try:
        return pygame.mixer.Sound(str(filename))
    except (pygame.error, FileNotFoundError) as e:
        raise AssetLoadError(str(filename), str(e)) from e


def set_screen(caption: str, width: int, height: int, resizable: bool = True):
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :param resizable: Let the host resize the window
    :type resizable: bool

    :return: pygame.Surface
    """
    flags = pygame.RESIZABLE if resizable else 0
    screen = pygame.display.set_mode((width, height), flags)
    pygame.display.set_caption(caption)

    return screen
