"""
Lameboy audio: fire-and-forget effects and the ambient radio.
"""

from __future__ import annotations

import pygame

from lameboy.constants import RADIO_VOLUME
from lameboy.utils import logger


class AudioSink:
    """
    Plays sound effects looked up by name from the asset provider.

    Nothing plays until :meth:`unlock` is called on the first user
    interaction. Missing sounds and playback errors are ignored.
    """

    def __init__(self, assets, enabled: bool = True):
        """
        :param assets: Provider exposing ``sound(name)``
        :type assets: lameboy.assets.AssetProvider

        :param enabled: Master switch from the settings
        :type enabled: bool
        """
        self._assets = assets
        self.enabled = enabled
        self.unlocked = False

    def unlock(self):
        if not self.unlocked:
            self.unlocked = True
            logger.debug("Audio unlocked")

    def play(self, name: str, volume: float = 1.0) -> bool:
        """
        Play an effect on a free channel so effects can overlap.

        :param name: Sound name
        :type name: str

        :param volume: 0.0 - 1.0
        :type volume: float

        :return: True if playback started
        :rtype: bool
        """
        if not (self.enabled and self.unlocked):
            return False
        sound = self._assets.sound(name)
        if sound is None:
            return False
        try:
            channel = sound.play()
            if channel is None:
                return False
            channel.set_volume(volume)
        except pygame.error as e:
            logger.debug(f"Playback of {name} rejected: {e}")
            return False
        return True


class Radio:
    """
    Ambient track on the side channel, independent of the game state.
    """

    sound_name = "radio"

    def __init__(self, assets, audio: AudioSink):
        self._assets = assets
        self._audio = audio
        self._channel = None
        self._sound = None

    @property
    def is_playing(self) -> bool:
        if self._channel is None:
            return False
        try:
            # a finished track frees its channel for other effects
            return (
                bool(self._channel.get_busy())
                and self._channel.get_sound() is self._sound
            )
        except pygame.error:
            return False

    def play(self) -> bool:
        """
        Start the track from the beginning, restarting it if needed.

        :return: True if playback started
        :rtype: bool
        """
        sound = self._assets.sound(self.sound_name)
        if sound is None or not self._audio.enabled:
            return False

        # using the radio counts as an interaction
        self._audio.unlock()

        try:
            if self.is_playing:
                self._channel.stop()
            self._channel = sound.play()
            self._sound = sound
            if self._channel is not None:
                self._channel.set_volume(RADIO_VOLUME)
        except pygame.error as e:
            logger.debug(f"Radio play failed: {e}")
            self._channel = None
            self._sound = None
            return False
        return self._channel is not None
