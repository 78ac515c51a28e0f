"""
Lameboy settings
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field
from typing import Any

from lameboy.constants import (
    BACKGROUND_COLOR,
    FPS,
    MOBILE_FPS,
    SPAWN_RATE,
    WINDOW_SIZE,
)

PROFILE_ENV_VAR = "LAMEBOY_PROFILE"
PROFILES = ("desktop", "mobile")


@dataclass
class WindowSettings:
    width: int = WINDOW_SIZE[0]
    height: int = WINDOW_SIZE[1]
    title: str = "Lameboy"
    resizable: bool = True


@dataclass
class RendererSettings:
    background_color: tuple[int, int, int] = BACKGROUND_COLOR


@dataclass
class AudioSettings:
    enable: bool = True


@dataclass
class GameSettings:
    """
    Everything configurable about a run.
    """

    window: WindowSettings = field(default_factory=WindowSettings)
    renderer: RendererSettings = field(default_factory=RendererSettings)
    audio: AudioSettings = field(default_factory=AudioSettings)
    profile: str = "desktop"
    log_level: str = "INFO"

    def __post_init__(self):
        if self.profile not in PROFILES:
            raise ValueError(
                f"Unknown profile {self.profile!r}, expected one of {PROFILES}"
            )

    @property
    def is_mobile(self) -> bool:
        return self.profile == "mobile"

    @property
    def target_fps(self) -> int:
        return MOBILE_FPS if self.is_mobile else FPS

    @property
    def spawn_rate(self) -> tuple[float, float]:
        """(base, per difficulty level)"""
        return SPAWN_RATE[self.profile]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameSettings:
        """
        Build settings from a plain dictionary; unknown keys are ignored.

        The profile falls back to ``$LAMEBOY_PROFILE`` and then to
        ``desktop``.

        :param data: Settings dictionary
        :type data: dict[str, Any]

        :return: GameSettings
        :rtype: GameSettings
        """

        def pick(section_cls, values):
            values = values or {}
            known = section_cls.__dataclass_fields__
            return section_cls(
                **{k: v for k, v in values.items() if k in known}
            )

        renderer = pick(RendererSettings, data.get("renderer"))
        renderer.background_color = tuple(renderer.background_color)

        profile = data.get("profile") or os.environ.get(
            PROFILE_ENV_VAR, "desktop"
        )

        return cls(
            window=pick(WindowSettings, data.get("window")),
            renderer=renderer,
            audio=pick(AudioSettings, data.get("audio")),
            profile=profile.lower(),
            log_level=data.get("log_level", "INFO"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
