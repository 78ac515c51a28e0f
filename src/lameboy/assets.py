"""
Lameboy assets
"""

from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Any, Callable

from lameboy.exceptions import AssetLoadError
from lameboy.utils import load_image, load_sound, logger

IMAGES = {
    "player": "sprites/spaceship.png",
    "enemy": "sprites/enemy.png",
}

SOUNDS = {
    "hit": "sounds/splat.ogg",
    "ultimate": "sounds/ultimate.ogg",
    "radio": "sounds/radio.ogg",
}


class AssetProvider:
    """
    Optional handles for every image and sound.

    Loading is incremental: each :meth:`poll` tries a single asset so the
    game loop never stalls. A handle stays ``None`` if its file is
    missing or broken.
    """

    def __init__(
        self,
        root: Path | None,
        image_loader: Callable[[Path], Any] = load_image,
        sound_loader: Callable[[Path], Any] = load_sound,
    ):
        self._root = root
        self._images: dict[str, Any] = {}
        self._sounds: dict[str, Any] = {}
        self._pending: deque[tuple[str, str, Callable[[Path], Any]]]
        self._pending = deque()

        if root is None:
            logger.warning("No assets directory, using placeholders")
            return

        for name in IMAGES:
            self._pending.append(("image", name, image_loader))
        for name in SOUNDS:
            self._pending.append(("sound", name, sound_loader))

    @property
    def all_attempted(self) -> bool:
        return not self._pending

    def poll(self) -> bool:
        """
        Try to load the next pending asset.

        :return: True if something was attempted
        :rtype: bool
        """
        if not self._pending:
            return False

        kind, name, loader = self._pending.popleft()
        table = IMAGES if kind == "image" else SOUNDS
        path = self._root / table[name]
        try:
            handle = loader(path)
        except AssetLoadError as e:
            logger.warning(f"{e}, {name} {kind} disabled")
        else:
            target = self._images if kind == "image" else self._sounds
            target[name] = handle
            logger.debug(f"Loaded {kind} {name} from {path}")

        if not self._pending:
            logger.info("All assets attempted")
        return True

    def load_all(self):
        while self.poll():
            pass

    def image(self, name: str):
        return self._images.get(name)

    def sound(self, name: str):
        return self._sounds.get(name)

    def has_image(self, name: str) -> bool:
        return name in self._images
