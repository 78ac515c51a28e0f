"""
Asset provider, sound effect and radio tests.
"""

from pathlib import Path

import pygame
import pytest

from lameboy.assets import IMAGES, SOUNDS, AssetProvider
from lameboy.audio import AudioSink, Radio
from lameboy.constants import ASSETS_ROOT
from lameboy.exceptions import AssetLoadError


class FakeChannel:
    def __init__(self, sound=None, busy=True):
        self.sound = sound
        self.busy = busy
        self.volume = None
        self.stopped = 0

    def set_volume(self, volume):
        self.volume = volume

    def get_busy(self):
        return self.busy

    def get_sound(self):
        return self.sound

    def stop(self):
        self.stopped += 1
        self.busy = False


class FakeSound:
    def __init__(self, fail=False):
        self.fail = fail
        self.channels = []

    def play(self):
        if self.fail:
            raise pygame.error("autoplay rejected")
        channel = FakeChannel(sound=self)
        self.channels.append(channel)
        return channel


class FakeAssets:
    def __init__(self, **sounds):
        self.sounds = sounds

    def sound(self, name):
        return self.sounds.get(name)


def test_no_assets_directory():
    assets = AssetProvider(None)
    assert assets.all_attempted
    assert not assets.poll()
    assert assets.image("player") is None
    assert assets.sound("hit") is None


def test_poll_loads_one_asset_at_a_time():
    loaded = []

    def loader(path):
        loaded.append(path)
        return f"handle:{path.name}"

    assets = AssetProvider(Path("/game"), loader, loader)
    assert not assets.all_attempted
    assert assets.poll()
    assert len(loaded) == 1

    assets.load_all()
    assert assets.all_attempted
    assert len(loaded) == len(IMAGES) + len(SOUNDS)
    assert assets.has_image("player")
    assert assets.sound("radio") == "handle:radio.ogg"


def test_failed_asset_stays_missing(caplog):
    def image_loader(path):
        if "enemy" in path.name:
            raise AssetLoadError(str(path), "bad file")
        return "image"

    def sound_loader(path):
        raise AssetLoadError(str(path), "no mixer")

    assets = AssetProvider(Path("/game"), image_loader, sound_loader)
    assets.load_all()

    assert assets.has_image("player")
    assert not assets.has_image("enemy")
    assert assets.sound("hit") is None
    assert "enemy image disabled" in caplog.text


def test_sink_is_silent_until_unlocked():
    hit = FakeSound()
    sink = AudioSink(FakeAssets(hit=hit))
    assert not sink.play("hit", 0.5)
    assert hit.channels == []

    sink.unlock()
    assert sink.play("hit", 0.5)
    assert hit.channels[0].volume == 0.5


def test_sink_ignores_missing_and_rejected_sounds():
    sink = AudioSink(FakeAssets(hit=FakeSound(fail=True)))
    sink.unlock()
    assert not sink.play("hit")
    assert not sink.play("ultimate")


def test_disabled_sink_never_plays():
    hit = FakeSound()
    sink = AudioSink(FakeAssets(hit=hit), enabled=False)
    sink.unlock()
    assert not sink.play("hit")


def test_radio_restarts_from_the_beginning():
    track = FakeSound()
    sink = AudioSink(FakeAssets(radio=track))
    radio = Radio(FakeAssets(radio=track), sink)

    assert not radio.is_playing
    assert radio.play()
    assert sink.unlocked
    assert radio.is_playing

    first = track.channels[0]
    assert radio.play()
    assert first.stopped == 1
    assert len(track.channels) == 2
    assert track.channels[1].volume == pytest.approx(0.7)


def test_radio_without_track():
    sink = AudioSink(FakeAssets())
    radio = Radio(FakeAssets(), sink)
    assert not radio.play()
    assert not radio.is_playing


def test_radio_play_failure_reports_not_playing():
    track = FakeSound(fail=True)
    sink = AudioSink(FakeAssets(radio=track))
    radio = Radio(FakeAssets(radio=track), sink)
    assert not radio.play()
    assert not radio.is_playing


def test_radio_ignores_effects_reusing_its_channel():
    track = FakeSound()
    hit = FakeSound()
    sink = AudioSink(FakeAssets(radio=track))
    radio = Radio(FakeAssets(radio=track), sink)
    radio.play()

    # the track ended and the mixer handed its channel to an effect
    channel = track.channels[0]
    channel.sound = hit

    assert not radio.is_playing
    radio.play()
    assert channel.stopped == 0
    assert len(track.channels) == 2


def test_assets_root_is_found_from_the_package():
    assert ASSETS_ROOT == Path(__file__).resolve().parents[1] / "assets"
