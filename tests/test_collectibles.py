import pytest

from mothership.collectibles import (
    CollectibleGameObject,
    FuelCollectible,
    HealthCollectible,
    ShieldCollectible,
)
from mothership.game_object import GameObject, ObjectType
from mothership.player import PlayerGameObject
from mothership.timer import ManualClock

SPOT = (0.0, 0.0, 0.0)


@pytest.fixture
def collector():
    return PlayerGameObject(SPOT, clock=ManualClock())


@pytest.mark.parametrize(
    "cls, expected",
    [
        (CollectibleGameObject, "Empty"),
        (FuelCollectible, "Fuel"),
        (HealthCollectible, "Health"),
        (ShieldCollectible, "Shield"),
    ],
)
def test_sub_types(collector, cls, expected):
    item = cls(SPOT, clock=collector.clock)
    assert item.sub_type == expected
    assert item.object_type is ObjectType.COLLECTIBLE


def test_pickup_by_player(collector):
    item = FuelCollectible(SPOT, clock=collector.clock)
    item.collide(collector)
    assert (item.is_destroyed, item.ghost, item.hitpoints) == (True, True, 0)
    assert item.timer.time_left == pytest.approx(2.0)


def test_second_pickup_keeps_removal_timer(collector):
    item = HealthCollectible(SPOT, clock=collector.clock)
    item.collide(collector)
    collector.clock.advance(1.0)
    item.collide(collector)
    assert item.timer.time_left == pytest.approx(1.0)


def test_other_objects_cannot_collect(collector):
    item = ShieldCollectible(SPOT, clock=collector.clock)
    enemy = GameObject(SPOT, clock=collector.clock)
    enemy.object_type = ObjectType.ENEMY
    item.collide(enemy)
    assert not item.is_destroyed
    assert item.hitpoints == 1


@pytest.mark.parametrize("elapsed, gone", [(9.9, False), (10.0, True), (15.0, True)])
def test_expires_after_lifespan(collector, elapsed, gone):
    item = CollectibleGameObject(SPOT, clock=collector.clock)
    collector.clock.advance(elapsed)
    item.update(0.1)
    assert item.is_destroyed == gone
    assert item.ghost == gone
    assert item.hitpoints == (0 if gone else 1)