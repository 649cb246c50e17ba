import math
import random

import numpy as np
import pytest

from mothership.barrier import BossBarrier
from mothership.boomer import BoomerEnemy
from mothership.boss import TEX_EMPTY, Mothership
from mothership.dreadnought import DreadnoughtEnemy
from mothership.fighter import FighterEnemy
from mothership.game_object import GameObject, ObjectType
from mothership.player import PlayerGameObject
from mothership.projectile import Projectile
from mothership.timer import ManualClock

TEXTURES = [f"tex{i}" for i in range(19)]


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def world(clock):
    player = PlayerGameObject((0, 0, 0), clock=clock)
    boss = Mothership((0, 0, 0), player, TEXTURES, rng=random.Random(3))
    background = GameObject((0, 0, 1), clock=clock)
    boss.game_objects = [player, boss, background]
    return player, boss, background


def test_initial_values(world):
    player, boss, _ = world
    assert boss.object_type is ObjectType.MOTHERSHIP
    assert boss.hitpoints == 15
    assert boss.max_hitpoints == 15
    assert boss.position[0] == pytest.approx(player.position[0])
    assert boss.position[1] == pytest.approx(player.position[1] + boss.height / 2)
    assert boss.texture == TEXTURES[2]


def test_load_barriers_encloses_arena(world):
    _, boss, background = world
    barriers = boss.load_barriers()
    assert boss.game_objects[3:] == barriers
    assert all(isinstance(b, BossBarrier) and b.mothership is boss for b in barriers)
    top_y = boss.position[1]
    top = [b for b in barriers if b.position[1] == pytest.approx(top_y)]
    assert top
    assert all(abs(b.position[0] - boss.position[0]) > 1 for b in top)
    left = [b for b in barriers if b.rotation == pytest.approx(math.pi / 2)]
    right = [b for b in barriers if b.rotation == pytest.approx(3 * math.pi / 2)]
    assert len(left) == len(right) > 0
    assert all(b.position[0] < boss.position[0] for b in left)
    assert all(b.position[0] > boss.position[0] for b in right)
    bottom = [b for b in barriers if b.position[1] == pytest.approx(top_y - boss.height)]
    assert len(bottom) > len(top)


def test_load_barriers_needs_world(clock):
    player = PlayerGameObject((0, 0, 0), clock=clock)
    boss = Mothership((0, 0, 0), player)
    with pytest.raises(RuntimeError):
        boss.load_barriers()


def test_spawn_enemy_inside_arena(world):
    _, boss, background = world
    enemy = boss.spawn_enemy()
    assert boss.game_objects[-2] is enemy
    assert boss.game_objects[-1] is background
    assert enemy.object_type is ObjectType.ENEMY
    assert enemy.rotation == pytest.approx(math.pi / 2)
    assert enemy.game_objects is boss.game_objects
    assert enemy.mothership is boss
    assert boss.total_enemy_count == 1
    assert abs(enemy.position[0] - boss.position[0]) <= boss.width / 2
    assert boss.position[1] - boss.height <= enemy.position[1] <= boss.position[1]


def test_spawn_enemy_makes_every_kind(world):
    _, boss, _ = world
    kinds = {type(boss.spawn_enemy()) for _ in range(40)}
    assert kinds == {BoomerEnemy, DreadnoughtEnemy, FighterEnemy}


def test_enemy_died(world):
    _, boss, _ = world
    boss.spawn_enemy()
    boss.spawn_enemy()
    boss.enemy_died()
    assert boss.total_enemy_count == 1


def test_collide_hurts_and_pushes(world, clock):
    player, boss, _ = world
    boss.collide(player)
    assert boss.hitpoints == 14
    assert np.allclose(player.velocity, [0.0, -4.0, 0.0])
    boss.collide(player)
    assert boss.hitpoints == 14
    clock.advance(0.8)
    boss.collide(player)
    assert boss.hitpoints == 13


def test_collide_destroys_after_enough_hits(world, clock):
    player, boss, _ = world
    for _ in range(15):
        boss.collide(player)
        clock.advance(0.8)
    assert boss.is_destroyed
    assert boss.hitpoints == 0


def test_collide_ignores_projectiles(world, clock):
    player, boss, _ = world
    shot = Projectile((0, 10, 0), (0, 1, 0), player, clock=clock)
    boss.collide(shot)
    assert boss.hitpoints == 15


def test_update_moves_along_direction(world):
    _, boss, _ = world
    start = boss.position.copy()
    boss.update(0.5)
    assert np.allclose(boss.position - start, [0.0, 0.5, 0.0])


def test_update_spawns_when_due(world, clock):
    _, boss, _ = world
    boss.update(0.01)
    assert boss.total_enemy_count == 0
    clock.advance(6.0)
    boss.update(0.01)
    assert boss.total_enemy_count == 1
    assert len(boss.game_objects) == 4
    assert 2.0 <= boss.enemy_spawn_timer.time_left <= 8.0


def test_update_respects_enemy_cap(world, clock):
    _, boss, _ = world
    boss.total_enemy_count = 6
    clock.advance(6.0)
    boss.update(0.01)
    assert len(boss.game_objects) == 3


def test_direction_shift(world, clock):
    _, boss, _ = world
    clock.advance(10.0)
    boss.total_enemy_count = 6
    boss.update(0.01)
    assert -1.0 <= boss.direction[0] <= 1.0
    assert boss.direction[1] == pytest.approx(0.8)
    assert 0.0 <= boss.shift_cooldown.time_left <= 8.0


def test_destroyed_boss_blanks_and_stops(world):
    _, boss, _ = world
    boss.is_destroyed = True
    start = boss.position.copy()
    boss.update(0.5)
    assert boss.texture == TEXTURES[TEX_EMPTY]
    assert np.allclose(boss.position, start)