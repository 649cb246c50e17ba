"""The game world: its objects, their updates and collisions."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from enum import Enum, IntEnum
from typing import Any

import numpy as np

from .boomer import BoomerEnemy
from .boss import Mothership
from .celestial import CelestialBody
from .collectibles import (
    CollectibleGameObject,
    FuelCollectible,
    HealthCollectible,
    ShieldCollectible,
)
from .game_object import GameObject, ObjectType
from .geometry import Particles, Sprite
from .hierarchy import HierarchicalTransformation
from .particle_system import BOOSTER, EXPLOSION, ParticleSystem
from .player import MAX_FUEL, PlayerGameObject
from .timer import DEFAULT_CLOCK, Clock, Timer
from .ui import DrawingGameObject, TextGameObject

BACKGROUND_TEXTURE_SCALE = 100.0


class Textures(IntEnum):
    """Indices of the textures the world uses."""

    PLAYER = 0
    INVINCIBLE = 1
    MOTHERSHIP = 2
    BARRIER = 3
    BOOMER = 4
    DREADNOUGHT = 5
    FIGHTER = 6
    EXPLOSION = 7
    PROJECTILE_PLAYER = 8
    PROJECTILE_ENEMY = 9
    PULSE = 10
    SHIELD_COLLECTIBLE = 11
    HEALTH_COLLECTIBLE = 12
    FUEL_COLLECTIBLE = 13
    STARS = 14
    ORB = 15
    EMPTY = 16
    BAR = 17
    FONT = 18

    @property
    def path(self) -> str:
        """Image file of the texture, relative to the resources directory."""
        return _TEXTURE_FILES[self]


_TEXTURE_FILES = {
    Textures.PLAYER: "textures/player.png",
    Textures.INVINCIBLE: "textures/invincible.png",
    Textures.MOTHERSHIP: "textures/mothership.png",
    Textures.BARRIER: "textures/barrier.png",
    Textures.BOOMER: "textures/boomer.png",
    Textures.DREADNOUGHT: "textures/dreadnought.png",
    Textures.FIGHTER: "textures/fighter.png",
    Textures.EXPLOSION: "textures/explosion.png",
    Textures.PROJECTILE_PLAYER: "textures/projectile_player.png",
    Textures.PROJECTILE_ENEMY: "textures/projectile_enemy.png",
    Textures.PULSE: "textures/pulse.png",
    Textures.SHIELD_COLLECTIBLE: "textures/Powerups/shield_collectible.png",
    Textures.HEALTH_COLLECTIBLE: "textures/Powerups/health_collectible.png",
    Textures.FUEL_COLLECTIBLE: "textures/Powerups/fuel_collectible.png",
    Textures.STARS: "textures/stars.png",
    Textures.ORB: "textures/orb.png",
    Textures.EMPTY: "textures/empty.png",
    Textures.BAR: "textures/bar.png",
    Textures.FONT: "textures/font.png",
}


class Outcome(str, Enum):
    """How a game ended."""

    DEFEAT = "Game Over!"
    VICTORY = "Victory!! Well done."


class GameOver(Exception):
    """Raised when the player or the mothership is removed from the world."""

    def __init__(self, outcome: Outcome) -> None:
        super().__init__(outcome.value)
        self.outcome = outcome


def ray_circle_collision(
    proj_pos: Any,
    proj_dir: Any,
    other_pos: Any,
    other_radius: float,
    proj_speed: float,
    delta_time: float,
) -> bool:
    """Whether a projectile's path this frame enters the given circle."""
    direction = np.asarray(proj_dir, dtype=float)
    circ_to_ray = np.asarray(proj_pos, dtype=float) - np.asarray(other_pos, dtype=float)

    a = float(np.dot(direction, direction))
    if a == 0.0:
        return False
    b = 2.0 * float(np.dot(circ_to_ray, direction))
    c = float(np.dot(circ_to_ray, circ_to_ray)) - other_radius * other_radius

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0:
        return False

    root = math.sqrt(discriminant)
    t1 = (-b - root) / (2.0 * a)
    t2 = (-b + root) / (2.0 * a)
    max_distance = proj_speed * delta_time
    return (0 < t1 <= max_distance) or (0 < t2 <= max_distance)


class World:
    """All objects of one game and the rules that tie them together.

    The player is always the first object and the mothership the second;
    the next four are the time label, health bar, boss bar and fuel tank.
    """

    def __init__(
        self,
        textures: Sequence[Any] | None = None,
        *,
        clock: Clock = DEFAULT_CLOCK,
        rng: random.Random | None = None,
    ) -> None:
        self.textures = list(textures) if textures is not None else list(Textures)
        if len(self.textures) < len(Textures):
            raise ValueError(f"expected {len(Textures)} textures, got {len(self.textures)}")
        self.clock = clock
        self.rng = rng if rng is not None else random.Random()
        self.game_objects: list[GameObject] = []
        self.celestial_objects: list[CelestialBody] = []
        self.current_time = 0.0
        self.sprite = Sprite()
        self.sprite.create_geometry()
        self.particles = Particles()
        self.explosion_particles = Particles()
        self.collectible_spawn_timer = Timer(clock)
        self.collectible_spawn_timer.start(6.0)

    def _tex(self, index: Textures) -> Any:
        return self.textures[index]

    def setup(self) -> None:
        """Populate the world with the player, boss, interface and scenery."""
        self.particles.create_geometry(800, rng=self.rng)
        self.explosion_particles.create_geometry(2500, 2.0 * math.pi, rng=self.rng)
        quarter = math.pi / 2.0
        clock = self.clock
        objects = self.game_objects

        player = PlayerGameObject((0.0, 0.0, 0.0), self.sprite, self._tex(Textures.PLAYER), clock=clock)
        player.rotation = quarter
        objects.append(player)

        boss = Mothership(
            (0.0, 0.0, 0.0), player, self.textures, self.sprite, clock=clock, rng=self.rng
        )
        boss.game_objects = objects
        boss.rotation = quarter
        objects.append(boss)

        label = TextGameObject((9.0, 9.0, -1.0), self.sprite, self._tex(Textures.FONT), clock=clock)
        label.set_scale((7.0, 1.0))
        label.text = f"{self.current_time:f}"
        objects.append(label)

        health_bar = DrawingGameObject((-6.0, -9.0, -1.0), self.sprite, self._tex(Textures.BAR), clock=clock)
        health_bar.set_scale((14.0, 1.0))
        health_bar.fill_value = player.hitpoints / player.max_hitpoints
        health_bar.fill_color = np.array([0.1, 1.0, 0.1, 1.0])
        objects.append(health_bar)

        boss_bar = DrawingGameObject((-2.0, 9.0, -1.0), self.sprite, self._tex(Textures.BAR), clock=clock)
        boss_bar.set_scale((15.0, 1.2))
        boss_bar.fill_value = boss.hitpoints / boss.max_hitpoints
        boss_bar.fill_color = np.array([1.0, 0.1, 0.1, 1.0])
        objects.append(boss_bar)

        fuel_tank = DrawingGameObject((12.5, -5.0, -1.0), self.sprite, self._tex(Textures.BAR), clock=clock)
        fuel_tank.set_scale((10.0, 1.0))
        fuel_tank.rotation = quarter
        fuel_tank.fill_value = player.fuel / MAX_FUEL
        fuel_tank.fill_color = np.array([1.0, 0.5, 0.0, 1.0])
        objects.append(fuel_tank)

        boss.load_barriers()

        links = []
        for _ in range(4):
            link = GameObject((0.0, 0.0, 0.0), self.sprite, self._tex(Textures.PULSE), clock=clock)
            link.set_scale((2.0, 2.0))
            links.append(link)
        chain = HierarchicalTransformation(
            links, boss, (6.0, 6.0, 0.0), self.sprite, self._tex(Textures.EMPTY), clock=clock
        )
        objects.append(chain)
        objects.extend(links)

        planet = CelestialBody(
            (-7.0, -7.0, 0.0), self.sprite, self._tex(Textures.ORB), boss, 2.0, clock=clock
        )
        planet.set_scale(4.0)
        self.celestial_objects.append(planet)

        background_sprite = Sprite(BACKGROUND_TEXTURE_SCALE)
        background_sprite.create_geometry()
        background = GameObject((0.0, 0.0, 1.0), background_sprite, self._tex(Textures.STARS), clock=clock)
        background.set_scale(12.0 * BACKGROUND_TEXTURE_SCALE)
        background.is_invincible = True
        objects.append(background)

        booster = ParticleSystem(
            (-0.5, 0.0, 0.0), player, self.particles, self._tex(Textures.ORB), BOOSTER, clock=clock
        )
        booster.set_scale(0.2)
        booster.rotation = -quarter
        objects.append(booster)

        explosion = ParticleSystem(
            (-0.5, 0.0, 0.0), boss, self.explosion_particles, self._tex(Textures.ORB), EXPLOSION,
            clock=clock,
        )
        explosion.set_scale(0.2)
        objects.append(explosion)

    def add_before_background(self, obj: GameObject) -> None:
        """Insert ``obj`` just before the final object of the world."""
        self.game_objects.insert(len(self.game_objects) - 1, obj)

    def spawn_collectible(self) -> CollectibleGameObject | None:
        """Drop a random pickup inside the boss area when it is time to."""
        if not self.collectible_spawn_timer.finished:
            return None
        boss = self.game_objects[1]
        x = (float(boss.position[0]) + 3 - boss.width // 2) + self.rng.randrange(boss.width - 4)
        y = float(boss.position[1]) - 3 - self.rng.randrange(boss.height - 5)
        kinds = (
            (ShieldCollectible, Textures.SHIELD_COLLECTIBLE),
            (HealthCollectible, Textures.HEALTH_COLLECTIBLE),
            (FuelCollectible, Textures.FUEL_COLLECTIBLE),
        )
        kind, texture = kinds[self.rng.randrange(3)]
        pickup = kind((x, y, 0.0), self.sprite, self._tex(texture), clock=self.clock)
        self.add_before_background(pickup)
        self.collectible_spawn_timer.start(self.rng.random() * 3 + 5)
        return pickup

    def _refresh_interface(self) -> None:
        objects = self.game_objects
        player, boss = objects[0], objects[1]
        objects[2].text = f"{self.current_time:f}"
        objects[3].fill_value = player.hitpoints / player.max_hitpoints
        objects[4].fill_value = boss.hitpoints / boss.max_hitpoints
        objects[5].fill_value = player.fuel / MAX_FUEL

    def _refresh_player_texture(self) -> None:
        player = self.game_objects[0]
        if player.object_type is not ObjectType.PLAYER:
            return
        if player.is_invincible:
            player.texture = self._tex(Textures.INVINCIBLE)
        elif not player.is_destroyed:
            player.texture = self._tex(Textures.PLAYER)

    def _mark_wreck(self, obj: GameObject) -> None:
        """Show an explosion for a destroyed object and count dead enemies."""
        if obj.is_destroyed and obj.object_type is not ObjectType.COLLECTIBLE:
            obj.texture = self._tex(Textures.EXPLOSION)
            if obj.object_type is ObjectType.ENEMY:
                self.game_objects[1].enemy_died()

    @staticmethod
    def _collide_pair(current: GameObject, other: GameObject, delta_time: float) -> None:
        def hit() -> None:
            current.collide(other)
            other.collide(current)

        if current.object_type is ObjectType.PROJECTILE and ray_circle_collision(
            current.position, current.bearing, other.position, other.radius,
            current.speed, delta_time,
        ):
            hit()
        if other.object_type is ObjectType.PROJECTILE:
            if ray_circle_collision(
                other.position, other.bearing, current.position, current.radius,
                other.speed, delta_time,
            ):
                hit()
        elif float(np.linalg.norm(current.position - other.position)) < current.radius + other.radius:
            hit()

    def _update_objects(self, delta_time: float) -> None:
        objects = self.game_objects
        # Objects may add new ones while updating, so the length is re-read each step.
        index = 0
        while index < len(objects):
            current = objects[index]
            current.update(delta_time)
            for other in objects[index + 1 : len(objects) - 1]:
                if current.is_destroyed or other.is_destroyed:
                    continue
                self._collide_pair(current, other, delta_time)
                self._mark_wreck(current)
                self._mark_wreck(other)
            index += 1

    def _update_celestial(self, delta_time: float) -> None:
        objects = self.game_objects
        for body in self.celestial_objects:
            body.update(delta_time)
            for obj in objects[:-1]:
                if not obj.is_destroyed:
                    distance = float(np.linalg.norm(body.position - obj.position))
                    if distance < body.radius + obj.radius:
                        body.collide(obj)
                        obj.collide(body)
                    if obj.is_destroyed and obj.object_type is not ObjectType.COLLECTIBLE:
                        obj.texture = self._tex(Textures.EXPLOSION)
                if isinstance(obj, BoomerEnemy):
                    body.boomer_chase_player(obj, obj.target, delta_time)
            body.gravitational_acceleration(objects[0], delta_time)

    def _remove_wrecks(self) -> None:
        def expired(obj: GameObject) -> bool:
            return obj.is_destroyed and obj.timer.finished

        objects = self.game_objects
        if expired(objects[0]):
            raise GameOver(Outcome.DEFEAT)
        if expired(objects[1]):
            raise GameOver(Outcome.VICTORY)
        objects[:] = [obj for obj in objects if not expired(obj)]

    def update(self, delta_time: float) -> None:
        """Advance the world by one frame.

        Raises GameOver once the player or the mothership is removed.
        """
        self._refresh_interface()
        self.spawn_collectible()
        self._refresh_player_texture()
        self._update_objects(delta_time)
        self._update_celestial(delta_time)
        self._remove_wrecks()