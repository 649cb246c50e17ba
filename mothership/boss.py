"""The mothership boss that walls in the player and spawns enemies."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from typing import Any

import numpy as np

from .barrier import BossBarrier
from .boomer import BoomerEnemy
from .dreadnought import DreadnoughtEnemy
from .enemy import EnemyGameObject
from .fighter import FighterEnemy
from .game_object import GameObject, ObjectType
from .timer import Clock, Timer

TEX_MOTHERSHIP = 2
TEX_BARRIER = 3
TEX_BOOMER = 4
TEX_DREADNOUGHT = 5
TEX_FIGHTER = 6
TEX_PROJECTILE_ENEMY = 9
TEX_PULSE = 10
TEX_EMPTY = 16

MAX_ENEMIES = 6
BOSS_HITPOINTS = 15


class Mothership(EnemyGameObject):
    """A boss that encloses the player in an arena and keeps spawning enemies."""

    def __init__(
        self,
        position: Any,
        player: GameObject,
        textures: Sequence[Any] | None = None,
        geometry: Any = None,
        *,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ) -> None:
        texture = None if textures is None else textures[TEX_MOTHERSHIP]
        super().__init__(
            position,
            geometry,
            texture,
            clock=clock if clock is not None else player.clock,
        )
        self.textures = textures
        self.rng = rng if rng is not None else random.Random()
        self.object_type = ObjectType.MOTHERSHIP
        self.max_hitpoints = BOSS_HITPOINTS
        self._hitpoints = BOSS_HITPOINTS

        self.width = 30
        self.height = 30
        self.player = player
        self.position = (
            player.position[0],
            player.position[1] + self.height / 2,
            self.position[2],
        )

        self.direction = np.array([0.0, 0.8, 0.0])
        self.speed = 0.1

        self.shift_cooldown = Timer(self.clock)
        self.shift_cooldown.start(10.0)
        self.enemy_spawn_timer = Timer(self.clock)
        self.enemy_spawn_timer.start(6.0)
        self.total_enemy_count = 0

        self.set_scale(5.0)
        self.radius = 0.4 + 0.4 * float(self.scale[0])

    def _texture(self, index: int) -> Any:
        return None if self.textures is None else self.textures[index]

    def _barrier_layout(self) -> list[tuple[tuple[int, int], float]]:
        """Grid positions and rotations of every wall segment around the arena."""
        x, y = float(self.position[0]), float(self.position[1])
        half = self.width // 2
        min_x = math.trunc(x - half)
        min_y = math.trunc(y)
        quarter = math.pi / 2.0

        layout = [((i, min_y), 0.0) for i in range(math.trunc(x - half - 1), math.ceil(x - 1))]
        layout += [((i, min_y), 0.0) for i in range(math.trunc(x + 2), math.ceil(x + 2 + half))]
        sides = range(min_y - 1, math.floor(y - self.height), -1)
        layout += [((min_x - 1, i), quarter) for i in sides]
        layout += [((min_x + 1 + self.width, i), -quarter) for i in sides]
        layout += [
            ((i, min_y - self.height), 0.0)
            for i in range(math.trunc(min_x - 1.5), min_x + 2 + self.width)
        ]
        return layout

    def load_barriers(self) -> list[BossBarrier]:
        """Append the arena walls to the world and return them."""
        if self.game_objects is None:
            raise RuntimeError("mothership has no game object list to add to")
        barriers = []
        for (bx, by), angle in self._barrier_layout():
            barrier = BossBarrier(
                (bx, by, 0.0),
                self.geometry,
                self._texture(TEX_BARRIER),
                self,
                clock=self.clock,
            )
            barrier.rotation = angle
            barriers.append(barrier)
        self.game_objects.extend(barriers)
        return barriers

    def enemy_died(self) -> None:
        """Record the death of one spawned enemy."""
        self.total_enemy_count -= 1

    def spawn_enemy(self) -> EnemyGameObject:
        """Place a random enemy somewhere inside the arena."""
        spawn = (
            float(self.position[0]) + 3 - self.width // 2 + self.rng.randrange(self.width - 4),
            float(self.position[1]) - 3 - self.rng.randrange(self.height - 5),
            0.0,
        )
        choice = self.rng.randrange(3)
        if choice == 0:
            enemy: EnemyGameObject = BoomerEnemy(
                spawn, self.player, self.geometry, self._texture(TEX_BOOMER), self,
                clock=self.clock,
            )
        elif choice == 1:
            enemy = DreadnoughtEnemy(
                spawn, self.geometry, self._texture(TEX_DREADNOUGHT),
                self._texture(TEX_PULSE), self, clock=self.clock,
            )
        else:
            enemy = FighterEnemy(
                spawn, self.player, self.geometry, self._texture(TEX_FIGHTER),
                self._texture(TEX_PROJECTILE_ENEMY), self, clock=self.clock, rng=self.rng,
            )
        enemy.rotation = math.pi / 2.0
        enemy.game_objects = self.game_objects
        self._spawn(enemy)
        self.total_enemy_count += 1
        return enemy

    def collide(self, other: GameObject) -> None:
        """Take ramming damage on a cooldown and push the rammer away."""
        if other.object_type not in (ObjectType.PLAYER, ObjectType.ENEMY) or other.is_destroyed:
            return
        if self.dmg_cooldown.finished:
            self._hitpoints -= 1
            self._destroy_if_dead(2.0)
            self.dmg_cooldown.start(0.8)
        away = other.position - self.position
        length = float(np.linalg.norm(away))
        if length > 0.0:
            other.set_velocity(away / length * 4.0)

    def update(self, delta_time: float) -> None:
        """Spawn enemies when due, wander while alive, blank out once destroyed."""
        if self.enemy_spawn_timer.finished and self.total_enemy_count < MAX_ENEMIES:
            self.spawn_enemy()
            self.enemy_spawn_timer.start(6.0 * self.rng.random() + 2.0)

        if not self.is_destroyed:
            if self.shift_cooldown.finished:
                self.direction[0] = 2.0 * self.rng.random() - 1.0
                self.shift_cooldown.start(8.0 * self.rng.random())
            heading = self.direction * self.speed
            length = float(np.linalg.norm(heading))
            if length > 0.0:
                self.position = self.position + heading / length * delta_time
        else:
            self.texture = self._texture(TEX_EMPTY)