"""
Pygame backend: replays draw operations on a surface.
"""

from __future__ import annotations

import pygame

from lameboy.entities import Box
from lameboy.render import (
    Clear,
    DrawImage,
    DrawText,
    FillPolygon,
    FillRect,
    StrokeRect,
)
from lameboy.utils import logger


class PygameBackend:
    """
    Pygame backend
    """

    font_name = "monospace"
    overlay_color = (44, 62, 80, 90)

    def __init__(self, surface: pygame.Surface, assets=None):
        """
        :param surface: Target surface, usually the display
        :type surface: pygame.Surface

        :param assets: Provider answering ``image(name)``
        :type assets: lameboy.assets.AssetProvider | None
        """
        self.surface = surface
        self._assets = assets
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}
        self._images: dict[tuple, pygame.Surface] = {}

    def set_surface(self, surface: pygame.Surface):
        self.surface = surface

    def _font(self, size: int, bold: bool) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.SysFont(
                self.font_name, size, bold=bold
            )
        return self._fonts[key]

    def _scaled_image(self, op: DrawImage) -> pygame.Surface | None:
        if self._assets is None:
            return None
        source = self._assets.image(op.name)
        if source is None:
            return None

        size = (max(1, int(op.width)), max(1, int(op.height)))
        key = (op.name, size, op.angle)
        cached = self._images.get(key)
        if cached is None:
            cached = pygame.transform.smoothscale(source, size)
            if op.angle:
                # pygame rotates counter-clockwise
                cached = pygame.transform.rotate(cached, -op.angle)
            self._images[key] = cached
        return cached

    def draw(self, op):
        """
        Replay a single draw operation.

        :param op: Operation from :func:`lameboy.render.render_world`
        :type op: lameboy.render.DrawOp
        """
        if isinstance(op, Clear):
            self.surface.fill(op.color)
        elif isinstance(op, FillRect):
            rect = pygame.Rect(
                int(op.x), int(op.y), int(op.width), int(op.height)
            )
            pygame.draw.rect(self.surface, op.color, rect)
        elif isinstance(op, StrokeRect):
            rect = pygame.Rect(
                int(op.x), int(op.y), int(op.width), int(op.height)
            )
            pygame.draw.rect(self.surface, op.color, rect, op.line_width)
        elif isinstance(op, FillPolygon):
            self._draw_polygon(op)
        elif isinstance(op, DrawImage):
            self._draw_image(op)
        elif isinstance(op, DrawText):
            self._draw_text(op)
        else:
            raise TypeError(f"Unknown draw operation {op!r}")

    def _draw_polygon(self, op: FillPolygon):
        if len(op.color) == 4 and op.color[3] < 255:
            layer = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
            pygame.draw.polygon(layer, op.color, op.points)
            self.surface.blit(layer, (0, 0))
        else:
            pygame.draw.polygon(self.surface, op.color[:3], op.points)

    def _draw_image(self, op: DrawImage):
        image = self._scaled_image(op)
        if image is None:
            logger.debug(f"Image {op.name} vanished, skipping")
            return
        center = (op.x + op.width / 2, op.y + op.height / 2)
        self.surface.blit(image, image.get_rect(center=center))

    def _draw_text(self, op: DrawText):
        font = self._font(op.size, op.bold)
        text = font.render(op.text, True, op.color[:3])
        x = op.x
        if op.align == "center":
            x -= text.get_width() / 2
        elif op.align == "right":
            x -= text.get_width()
        self.surface.blit(text, (int(x), int(op.y - font.get_ascent())))

    def present(self, ops):
        for op in ops:
            self.draw(op)

    def draw_touch_controls(self, regions: dict[str, Box]):
        """
        Outline the on-screen buttons used on touch screens.
        """
        layer = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        for name, box in regions.items():
            rect = pygame.Rect(
                int(box.x), int(box.y), int(box.width), int(box.height)
            )
            pygame.draw.rect(layer, self.overlay_color, rect, border_radius=4)
            label = self._font(9, False).render(
                name.upper(), True, (236, 240, 241)
            )
            layer.blit(label, label.get_rect(center=rect.center))
        self.surface.blit(layer, (0, 0))
