"""
Spaceship Scene
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol

from mini_arcade_core.engine.commands import CommandQueue
from mini_arcade_core.runtime.input_frame import ButtonState, InputFrame
from mini_arcade_core.scenes.sim_scene import BaseIntent, BaseTickContext
from mini_arcade_core.scenes.systems.phases import SystemPhase
from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline

from lameboy.constants import (
    CHARGE_MAX,
    CHARGE_PER_KILL,
    ENEMY_BASE_SPEED,
    ENEMY_SIZE,
    ENEMY_SPEED_PER_LEVEL,
    HIT_VOLUME,
    SCORE_ENEMY_ESCAPED,
    SCORE_ENEMY_KILLED,
    SCORE_PER_LEVEL,
    SHOT_COOLDOWN_MS,
    SPAWN_RATE,
    ULTIMATE_DURATION_MS,
    ULTIMATE_END_RATIO,
    ULTIMATE_START_RATIO,
    ULTIMATE_VOLUME,
)
from lameboy.controls import Button, InputState
from lameboy.entities import Bullet, Enemy, UltimateLaser
from lameboy.render import DrawOp, render_world
from lameboy.utils import logger
from lameboy.world import GameState, SpaceshipWorld


class SoundPlayer(Protocol):
    def play(self, name: str, volume: float = 1.0) -> bool: ...


@dataclass
class SpaceshipIntent(BaseIntent):
    """
    What the player asked for this tick.
    """

    move_up: bool = False
    move_down: bool = False
    move_left: bool = False
    move_right: bool = False
    fire_bullet: bool = False
    fire_ultimate: bool = False


@dataclass
class SpaceshipTickContext(BaseTickContext[SpaceshipWorld, SpaceshipIntent]):
    """
    Spaceship Tick Context
    """

    now: float = 0.0  # milliseconds
    audio: SoundPlayer | None = None
    rng: random.Random = field(default_factory=random.Random)
    spawn_rate: tuple[float, float] = SPAWN_RATE["desktop"]

    def play(self, name: str, volume: float):
        if self.audio is not None:
            self.audio.play(name, volume)


class PlayingSystem:
    """
    Mixin for systems that only run while a game is in progress.

    The pipeline asks every system before stepping it, so once a
    collision ends the game the rest of that tick is skipped.
    """

    def enabled(self, ctx: SpaceshipTickContext) -> bool:
        return ctx.world.state is GameState.PLAYING


@dataclass
class SpaceshipInputSystem(PlayingSystem):
    """
    Turn the button states of the input frame into an intent.
    """

    name: str = "spaceship_input"
    phase: int = SystemPhase.INPUT
    order: int = 10

    def step(self, ctx: SpaceshipTickContext):
        """Process input and update intent."""
        buttons = ctx.input_frame.buttons

        def down(button: Button) -> bool:
            state = buttons.get(button.value)
            return state is not None and state.down

        ctx.intent = SpaceshipIntent(
            move_up=down(Button.UP),
            move_down=down(Button.DOWN),
            move_left=down(Button.LEFT),
            move_right=down(Button.RIGHT),
            fire_bullet=down(Button.J),
            fire_ultimate=down(Button.B),
        )


def activate_ultimate(ctx: SpaceshipTickContext):
    """
    Fire the beam: narrow at the ship, half the screen tall at the edge.
    """
    w = ctx.world
    vw, vh = w.viewport
    player = w.player

    start_height = player.height * ULTIMATE_START_RATIO
    end_height = vh * ULTIMATE_END_RATIO
    center_y = player.y + player.height / 2

    w.laser = UltimateLaser(
        start_x=player.x + player.width,
        end_x=vw,
        start_y=center_y - start_height / 2,
        start_height=start_height,
        end_y=center_y - end_height / 2,
        end_height=end_height,
        center_y=center_y,
        start_time=ctx.now,
        duration=ULTIMATE_DURATION_MS,
    )
    w.ultimate_charge = 0
    logger.debug(f"Ultimate activated at {ctx.now}")
    ctx.play("ultimate", ULTIMATE_VOLUME)


@dataclass
class PlayerSystem(PlayingSystem):
    """
    Move the ship, shoot, and trigger the ultimate.

    A step that would leave the play area is skipped entirely, so the
    ship stops short of the edge instead of snapping onto it.
    """

    name: str = "spaceship_player"
    order: int = 20

    def step(self, ctx: SpaceshipTickContext):
        it = ctx.intent
        if it is None:
            return

        w = ctx.world
        vw, vh = w.viewport
        p = w.player

        if it.move_up and p.y - p.speed >= 0:
            p.y -= p.speed
        if it.move_down and p.y + p.speed + p.height <= vh:
            p.y += p.speed
        if it.move_left and p.x - p.speed >= 0:
            p.x -= p.speed
        if it.move_right and p.x + p.speed + p.width <= vw:
            p.x += p.speed

        if it.fire_bullet and (
            p.last_shot_time is None
            or ctx.now - p.last_shot_time > SHOT_COOLDOWN_MS
        ):
            w.bullets.append(Bullet(x=p.x + p.width, y=p.y + p.height / 2))
            p.last_shot_time = ctx.now

        if (
            it.fire_ultimate
            and w.ultimate_charge >= CHARGE_MAX
            and not w.ultimate_active
        ):
            activate_ultimate(ctx)


@dataclass
class UltimateSystem(PlayingSystem):
    """
    Expire the beam, or destroy every enemy inside it.
    """

    name: str = "spaceship_ultimate"
    order: int = 30

    def step(self, ctx: SpaceshipTickContext):
        w = ctx.world
        laser = w.laser
        if laser is None:
            return

        if laser.expired(ctx.now):
            w.laser = None
            logger.debug("Ultimate expired")
            return

        survivors: list[Enemy] = []
        for e in w.enemies:
            if laser.hits(e.collider):
                # beam kills never refill the charge
                w.score += SCORE_ENEMY_KILLED
            else:
                survivors.append(e)
        w.enemies = survivors


@dataclass
class BulletMoveSystem(PlayingSystem):
    """Move bullets right and drop the ones past the right edge."""

    name: str = "spaceship_bullet_move"
    order: int = 40

    def step(self, ctx: SpaceshipTickContext):
        vw, _ = ctx.world.viewport

        alive: list[Bullet] = []
        for b in ctx.world.bullets:
            b.x += b.speed
            if b.x > vw:
                continue
            alive.append(b)
        ctx.world.bullets = alive


@dataclass
class EnemySystem(PlayingSystem):
    """
    Spawn enemies at the right edge and move them left.

    Enemies that make it past the left edge are worth a few points.
    """

    name: str = "spaceship_enemies"
    order: int = 50

    def spawn_probability(self, ctx: SpaceshipTickContext) -> float:
        base, per_level = ctx.spawn_rate
        return base + ctx.world.game_speed * per_level

    def step(self, ctx: SpaceshipTickContext):
        w = ctx.world
        vw, vh = w.viewport

        if ctx.rng.random() < self.spawn_probability(ctx):
            w.enemies.append(
                Enemy(
                    x=vw,
                    y=ctx.rng.random() * (vh - ENEMY_SIZE[1]),
                    speed=ENEMY_BASE_SPEED
                    + w.game_speed * ENEMY_SPEED_PER_LEVEL,
                )
            )
            logger.debug(f"Enemy spawned at y={w.enemies[-1].y:.0f}")

        alive: list[Enemy] = []
        for e in w.enemies:
            e.x -= e.speed
            if e.x + e.width < 0:
                w.score += SCORE_ENEMY_ESCAPED
                continue
            alive.append(e)
        w.enemies = alive


@dataclass
class BulletEnemyCollisionSystem(PlayingSystem):
    """Each bullet kills at most one enemy and fills the charge."""

    name: str = "spaceship_bullet_enemy_collision"
    order: int = 60

    def step(self, ctx: SpaceshipTickContext):
        w = ctx.world
        if not w.bullets or not w.enemies:
            return

        spent: list[Bullet] = []
        for b in reversed(w.bullets):
            for e in reversed(w.enemies):
                if b.collider.intersects(e.collider):
                    spent.append(b)
                    w.enemies.remove(e)
                    w.score += SCORE_ENEMY_KILLED
                    w.ultimate_charge = min(
                        CHARGE_MAX, w.ultimate_charge + CHARGE_PER_KILL
                    )
                    logger.debug(f"Hit! Score: {w.score}")
                    ctx.play("hit", HIT_VOLUME)
                    break

        if spent:
            w.bullets = [b for b in w.bullets if b not in spent]


@dataclass
class PlayerEnemyCollisionSystem(PlayingSystem):
    """Touching any enemy ends the game."""

    name: str = "spaceship_player_enemy_collision"
    order: int = 70

    def step(self, ctx: SpaceshipTickContext):
        w = ctx.world
        player = w.player.collider
        if any(player.intersects(e.collider) for e in w.enemies):
            w.state = GameState.GAME_OVER
            logger.debug(f"Game over, final score {w.score}")


@dataclass
class DifficultySystem(PlayingSystem):
    """Speed goes up by one level every 500 points."""

    name: str = "spaceship_difficulty"
    order: int = 80

    def step(self, ctx: SpaceshipTickContext):
        ctx.world.game_speed = 1 + ctx.world.score // SCORE_PER_LEVEL


def default_systems() -> list:
    return [
        SpaceshipInputSystem(),
        PlayerSystem(),
        UltimateSystem(),
        BulletMoveSystem(),
        EnemySystem(),
        BulletEnemyCollisionSystem(),
        PlayerEnemyCollisionSystem(),
        DifficultySystem(),
    ]


class SpaceshipScene:
    """
    Owns the world and wires input, simulation and rendering together.
    """

    def __init__(
        self,
        viewport: tuple[float, float],
        input_state: InputState,
        audio: SoundPlayer | None = None,
        rng: random.Random | None = None,
        spawn_rate: tuple[float, float] = SPAWN_RATE["desktop"],
    ):
        self.world = SpaceshipWorld(viewport=viewport)
        self._centered = False
        self._center_once()
        self.input_state = input_state
        self.audio = audio
        self.rng = rng or random.Random()
        self.spawn_rate = spawn_rate

        self.systems: SystemPipeline[SpaceshipTickContext] = SystemPipeline()
        self.systems.extend(default_systems())

        self._frame_index = 0
        self._last_now: float | None = None
        self._last_held = input_state.snapshot()

        input_state.on_press(self._on_button_press)

    @property
    def state(self) -> GameState:
        return self.world.state

    def _on_button_press(self, button: Button):
        if button is not Button.START:
            return
        if self.world.state in (GameState.MENU, GameState.GAME_OVER):
            self.world.init_game()

    def _center_once(self):
        if not self._centered and self.world.has_valid_geometry:
            self.world.center_player()
            self._centered = True

    def resize(self, width: float, height: float) -> bool:
        """
        Follow the host window; the player is centered on the first
        usable size only.
        """
        changed = self.world.resize(width, height)
        if changed:
            self._center_once()
        return changed

    def input_frame(self, now: float) -> InputFrame:
        """
        Snapshot the held buttons, with edges relative to the last frame.

        :param now: Current time in milliseconds
        :type now: float

        :return: InputFrame keyed by button name
        :rtype: InputFrame
        """
        held = self.input_state.snapshot()
        buttons = {
            button.value: ButtonState(
                down=down,
                pressed=down and not self._last_held[button],
                released=not down and self._last_held[button],
            )
            for button, down in held.items()
        }
        self._last_held = held

        dt = 0.0
        if self._last_now is not None:
            dt = max(0.0, (now - self._last_now) / 1000)
        self._last_now = now
        self._frame_index += 1
        return InputFrame(
            frame_index=self._frame_index, dt=dt, buttons=buttons
        )

    def tick_context(self, now: float) -> SpaceshipTickContext:
        frame = self.input_frame(now)
        return SpaceshipTickContext(
            input_frame=frame,
            dt=frame.dt,
            world=self.world,
            commands=CommandQueue(),
            now=now,
            audio=self.audio,
            rng=self.rng,
            spawn_rate=self.spawn_rate,
        )

    def tick(self, now: float):
        """
        Advance the simulation one step if a game is running.

        :param now: Current time in milliseconds
        :type now: float
        """
        if self.world.state is not GameState.PLAYING:
            return
        if not self.world.has_valid_geometry:
            return

        self.systems.step(self.tick_context(now))

    def draw_ops(self, assets=None, radio_playing: bool = False, **kwargs):
        """
        :return: The current frame as draw operations
        :rtype: list[DrawOp]
        """
        ops: list[DrawOp] = render_world(
            self.world, assets, radio_playing=radio_playing, **kwargs
        )
        return ops
