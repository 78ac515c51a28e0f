"""
Lameboy render: turns the world into a list of draw operations.

Nothing in here touches pygame or mutates the world; the backend replays
the operations on a real surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Union

from mini_arcade_core.scenes.sim_scene import DrawCall, Drawable

from lameboy.constants import (
    BACKGROUND_COLOR,
    BAR_BORDER_COLOR,
    BULLET_COLOR,
    CHARGE_COLOR,
    CHARGE_MAX,
    CHARGE_READY_COLOR,
    ENEMY_COLOR,
    LASER_BODY_COLOR,
    LASER_CORE_COLOR,
    LASER_GLOW_COLOR,
    PLAYER_COLOR,
    TEXT_COLOR,
)
from lameboy.world import GameState, SpaceshipWorld

Color = tuple  # RGB or RGBA
Point = tuple[float, float]
Align = Literal["left", "center", "right"]


@dataclass(frozen=True)
class Clear:
    color: Color


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    width: float
    height: float
    color: Color


@dataclass(frozen=True)
class StrokeRect:
    x: float
    y: float
    width: float
    height: float
    color: Color
    line_width: int = 1


@dataclass(frozen=True)
class FillPolygon:
    points: tuple[Point, ...]
    color: Color


@dataclass(frozen=True)
class DrawImage:
    """
    Image scaled to the box; ``angle`` rotates clockwise about its center.
    """

    name: str
    x: float
    y: float
    width: float
    height: float
    angle: float = 0.0


@dataclass(frozen=True)
class DrawText:
    """
    ``y`` is the text baseline, ``x`` is interpreted through ``align``.
    """

    text: str
    x: float
    y: float
    size: int
    color: Color = TEXT_COLOR
    bold: bool = False
    align: Align = "left"


DrawOp = Union[Clear, FillRect, StrokeRect, FillPolygon, DrawImage, DrawText]


def _has_image(assets, name: str) -> bool:
    return assets is not None and assets.has_image(name)


@dataclass
class FrameContext:
    """
    What the drawables of one frame may look at.
    """

    world: SpaceshipWorld
    assets: Any = None


class SpaceshipDrawable(Drawable[FrameContext]):
    """
    One piece of the frame.

    The backend handed to :meth:`draw` is the list of operations being
    built; subclasses describe their part in :meth:`ops`.
    """

    def ops(self, world, assets) -> list[DrawOp]:
        raise NotImplementedError("Subclasses must implement this method")

    def draw(self, backend: list[DrawOp], ctx: FrameContext):
        backend.extend(self.ops(ctx.world, ctx.assets))


class DrawMenu(SpaceshipDrawable):
    def ops(self, world, assets) -> list[DrawOp]:
        vw, vh = world.viewport
        return [
            DrawText(
                "SPACESHIP", vw / 2, vh / 2 - 20, 20, bold=True, align="center"
            ),
            DrawText("Press START", vw / 2, vh / 2 + 10, 12, align="center"),
        ]


class DrawGameOver(SpaceshipDrawable):
    def ops(self, world, assets) -> list[DrawOp]:
        vw, vh = world.viewport
        return [
            DrawText(
                "GAME OVER", vw / 2, vh / 2 - 20, 18, bold=True, align="center"
            ),
            DrawText(
                f"Score: {world.score}", vw / 2, vh / 2 + 5, 12, align="center"
            ),
            DrawText("Press START", vw / 2, vh / 2 + 25, 12, align="center"),
        ]


class DrawPlayer(SpaceshipDrawable):
    """
    The sprite points up, so it is drawn 90 degrees clockwise to face
    right. Before rotation its box is the player's box with the sides
    swapped, which lands it back on the player's box afterwards.
    """

    def ops(self, world, assets) -> list[DrawOp]:
        p = world.player
        if _has_image(assets, "player"):
            cx = p.x + p.width / 2
            cy = p.y + p.height / 2
            return [
                DrawImage(
                    "player",
                    cx - p.height / 2,
                    cy - p.width / 2,
                    p.height,
                    p.width,
                    angle=90.0,
                )
            ]
        return [FillRect(p.x, p.y, p.width, p.height, PLAYER_COLOR)]


class DrawBullets(SpaceshipDrawable):
    def ops(self, world, assets) -> list[DrawOp]:
        return [
            FillRect(b.x, b.y, b.width, b.height, BULLET_COLOR)
            for b in world.bullets
        ]


class DrawEnemies(SpaceshipDrawable):
    def ops(self, world, assets) -> list[DrawOp]:
        if _has_image(assets, "enemy"):
            return [
                DrawImage("enemy", e.x, e.y, e.width, e.height)
                for e in world.enemies
            ]
        return [
            FillRect(e.x, e.y, e.width, e.height, ENEMY_COLOR)
            for e in world.enemies
        ]


def _trapezoid(x0, top0, bottom0, x1, top1, bottom1) -> tuple[Point, ...]:
    return ((x0, top0), (x1, top1), (x1, bottom1), (x0, bottom0))


class DrawUltimate(SpaceshipDrawable):
    """
    Glow, body and core, from the outside in.
    """

    glow_back: float = 3.0
    glow_forward: float = 2.0
    glow_grow: float = 2.0
    core_inset: float = 0.25

    def ops(self, world, assets) -> list[DrawOp]:
        laser = world.laser
        if laser is None:
            return []

        sx, ex = laser.start_x, laser.end_x
        s_top, s_h = laser.start_y, laser.start_height
        e_top, e_h = laser.end_y, laser.end_height
        s_bottom, e_bottom = s_top + s_h, e_top + e_h
        g = self.glow_grow
        k = self.core_inset

        return [
            FillPolygon(
                _trapezoid(
                    sx - self.glow_back,
                    s_top - g,
                    s_bottom + g,
                    ex + self.glow_forward,
                    e_top - g,
                    e_bottom + g,
                ),
                LASER_GLOW_COLOR,
            ),
            FillPolygon(
                _trapezoid(sx, s_top, s_bottom, ex, e_top, e_bottom),
                LASER_BODY_COLOR,
            ),
            FillPolygon(
                _trapezoid(
                    sx,
                    s_top + s_h * k,
                    s_bottom - s_h * k,
                    ex,
                    e_top + e_h * k,
                    e_bottom - e_h * k,
                ),
                LASER_CORE_COLOR,
            ),
        ]


class DrawHud(SpaceshipDrawable):
    """
    Charge bar top right, score top left, ready hint bottom right.
    """

    bar_width = 80
    bar_height = 8
    margin = 5

    def ops(self, world, assets) -> list[DrawOp]:
        vw, vh = world.viewport
        bar_x = vw - self.bar_width - self.margin
        bar_y = self.margin
        ready = world.ultimate_charge >= CHARGE_MAX
        fill = self.bar_width * world.ultimate_charge / CHARGE_MAX

        ops: list[DrawOp] = [
            FillRect(
                bar_x, bar_y, self.bar_width, self.bar_height, TEXT_COLOR
            ),
            FillRect(
                bar_x,
                bar_y,
                fill,
                self.bar_height,
                CHARGE_READY_COLOR if ready else CHARGE_COLOR,
            ),
            StrokeRect(
                bar_x,
                bar_y,
                self.bar_width,
                self.bar_height,
                BAR_BORDER_COLOR,
            ),
            DrawText(f"Score: {world.score}", self.margin, 15, 12),
        ]
        if ready:
            ops.append(
                DrawText(
                    "ULTIMATE READY (B)",
                    vw - self.margin,
                    vh - self.margin,
                    10,
                    color=CHARGE_READY_COLOR,
                    align="right",
                )
            )
        return ops


class DrawRadioIndicator(SpaceshipDrawable):
    def ops(self, world, assets) -> list[DrawOp]:
        _, vh = world.viewport
        return [DrawText("RADIO", 5, vh - 5, 10, color=CHARGE_READY_COLOR)]


def render_world(
    world,
    assets=None,
    radio_playing: bool = False,
    background: Color = BACKGROUND_COLOR,
):
    """
    Describe one frame.

    :param world: World to draw
    :type world: lameboy.world.SpaceshipWorld

    :param assets: Provider answering ``has_image(name)``, or None
    :type assets: lameboy.assets.AssetProvider | None

    :param radio_playing: Show the radio indicator
    :type radio_playing: bool

    :param background: Fill color behind everything
    :type background: tuple

    :return: Draw operations, back to front
    :rtype: list[DrawOp]
    """
    if world.state is GameState.MENU:
        drawables: list[SpaceshipDrawable] = [DrawMenu()]
    elif world.state is GameState.GAME_OVER:
        drawables = [DrawGameOver()]
    else:
        drawables = [
            DrawPlayer(),
            DrawBullets(),
            DrawEnemies(),
            DrawUltimate(),
            DrawHud(),
        ]
    if radio_playing:
        drawables.append(DrawRadioIndicator())

    ctx = FrameContext(world=world, assets=assets)
    ops: list[DrawOp] = [Clear(background)]
    for drawable in drawables:
        DrawCall(drawable, ctx)(ops)
    return ops
