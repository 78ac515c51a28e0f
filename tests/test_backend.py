"""
Pygame backend tests, run against an off-screen surface.
"""

import pygame
import pytest

from lameboy.backend import PygameBackend
from lameboy.render import (
    Clear,
    DrawImage,
    DrawText,
    FillPolygon,
    FillRect,
    StrokeRect,
)


class SurfaceAssets:
    def __init__(self, **images):
        self.images = images

    def image(self, name):
        return self.images.get(name)


@pytest.fixture
def surface():
    return pygame.Surface((40, 40))


def test_clear_and_rect(surface):
    backend = PygameBackend(surface)
    backend.present(
        [Clear((10, 20, 30)), FillRect(5, 5, 10, 10, (255, 0, 0))]
    )
    assert surface.get_at((0, 0))[:3] == (10, 20, 30)
    assert surface.get_at((7, 7))[:3] == (255, 0, 0)


def test_stroke_rect_leaves_inside_untouched(surface):
    backend = PygameBackend(surface)
    backend.present(
        [Clear((0, 0, 0)), StrokeRect(0, 0, 20, 20, (255, 255, 255))]
    )
    assert surface.get_at((0, 0))[:3] == (255, 255, 255)
    assert surface.get_at((10, 10))[:3] == (0, 0, 0)


def test_translucent_polygon_blends(surface):
    backend = PygameBackend(surface)
    backend.present(
        [
            Clear((0, 0, 0)),
            FillPolygon(
                ((0, 0), (40, 0), (40, 40), (0, 40)), (255, 0, 0, 102)
            ),
        ]
    )
    red = surface.get_at((20, 20))[0]
    assert 0 < red < 255


def test_rotated_image_fills_player_box(surface):
    sprite = pygame.Surface((4, 8), pygame.SRCALPHA)
    sprite.fill((0, 255, 0, 255))
    backend = PygameBackend(surface, SurfaceAssets(player=sprite))
    # a 30x20 box rotated 90 degrees lands on a 20x30 box
    backend.present(
        [Clear((0, 0, 0)), DrawImage("player", 0, 5, 30, 20, angle=90.0)]
    )
    assert surface.get_at((10, 2))[:3] == (0, 255, 0)
    assert surface.get_at((10, 28))[:3] == (0, 255, 0)
    assert surface.get_at((25, 15))[:3] == (0, 0, 0)


def test_missing_image_is_skipped(surface):
    backend = PygameBackend(surface, SurfaceAssets())
    backend.present([Clear((0, 0, 0)), DrawImage("enemy", 0, 0, 10, 10)])
    assert surface.get_at((5, 5))[:3] == (0, 0, 0)


def test_text_renders(surface):
    backend = PygameBackend(surface)
    backend.present(
        [
            Clear((0, 0, 0)),
            DrawText("X", 20, 30, 20, color=(255, 255, 255), align="center"),
        ]
    )
    pixels = [surface.get_at((x, y))[:3] for x in range(40) for y in range(40)]
    assert (0, 0, 0) in pixels
    assert any(p != (0, 0, 0) for p in pixels)


def test_unknown_operation(surface):
    with pytest.raises(TypeError):
        PygameBackend(surface).draw(object())
