import numpy as np
import pytest

from mothership.enemy import EnemyGameObject
from mothership.game_object import GameObject, ObjectType
from mothership.timer import ManualClock


class _Boss:
    def __init__(self, direction=(0.0, 0.8, 0.0), speed=0.1):
        self.direction = np.array(direction)
        self.speed = speed
        self.is_destroyed = False
        self.object_type = ObjectType.MOTHERSHIP


@pytest.fixture
def clock():
    return ManualClock()


def test_enemy_defaults(clock):
    enemy = EnemyGameObject((1, 2, 0), clock=clock)
    assert enemy.object_type is ObjectType.ENEMY
    assert enemy.mothership is None
    assert enemy.game_objects is None


def test_follow_mothership_moves_along_unit_direction(clock):
    boss = _Boss()
    enemy = EnemyGameObject((1, 2, 0), mothership=boss, clock=clock)
    enemy.follow_mothership(0.5)
    assert np.allclose(enemy.position, [1.0, 2.5, 0.0])


def test_follow_destroyed_mothership_does_nothing(clock):
    boss = _Boss()
    boss.is_destroyed = True
    enemy = EnemyGameObject((1, 2, 0), mothership=boss, clock=clock)
    enemy.follow_mothership(0.5)
    assert np.allclose(enemy.position, [1, 2, 0])


def test_follow_without_mothership_does_nothing(clock):
    enemy = EnemyGameObject((1, 2, 0), clock=clock)
    enemy.follow_mothership(0.5)
    assert np.allclose(enemy.position, [1, 2, 0])


def test_drift_length_equals_delta_time(clock):
    boss = _Boss(direction=(3.0, -4.0, 0.0), speed=0.1)
    enemy = EnemyGameObject((0, 0, 0), mothership=boss, clock=clock)
    enemy.follow_mothership(0.25)
    assert np.linalg.norm(enemy.position) == pytest.approx(0.25)


def test_enemy_plain_collision_costs_hitpoint(clock):
    enemy = EnemyGameObject((0, 0, 0), clock=clock)
    other = GameObject((0, 0, 0), clock=clock)
    enemy.collide(other)
    assert enemy.hitpoints == 0
    assert enemy.is_destroyed is True