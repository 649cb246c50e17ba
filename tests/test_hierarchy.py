import math

import numpy as np
import pytest

from mothership.game_object import GameObject, ObjectType
from mothership.hierarchy import HierarchicalTransformation
from mothership.player import PlayerGameObject
from mothership.timer import ManualClock


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def chain(clock):
    links = [GameObject((0, 0, 0), clock=clock) for _ in range(4)]
    boss = GameObject((2, 3, 0), clock=clock)
    hier = HierarchicalTransformation(links, boss, (6, 6, 0), clock=clock)
    return hier, links, boss


def test_links_configured(chain):
    hier, links, _ = chain
    assert hier.object_type is ObjectType.HIERARCHY
    assert np.allclose(links[0].position, [6, 6, 0])
    for link in links:
        assert link.object_type is ObjectType.HIERARCHY
        assert link.radius == 1.0
        assert link.is_invincible


def test_update_hangs_root_below_boss(chain):
    hier, links, boss = chain
    hier.update(0.1)
    assert np.allclose(links[0].position, boss.position - np.array([0.0, 2.0, 0.0]))
    assert links[0].rotation == pytest.approx(math.radians(50.0) * 0.1)


def test_links_are_spaced_by_offset(chain):
    hier, links, _ = chain
    for _ in range(5):
        hier.update(0.2)
    for previous, link in zip(links, links[1:]):
        assert np.linalg.norm(link.position - previous.position) == pytest.approx(hier.offset)
        assert np.allclose(link.position, previous.position + previous.bearing * hier.offset)


def test_root_follows_moving_boss(chain):
    hier, links, boss = chain
    boss.position = (-4, 1, 0)
    hier.update(0.1)
    assert np.allclose(links[0].position, [-4, -1, 0])


def test_set_transform(chain, clock):
    hier, links, _ = chain
    hier.set_transform((1, 2, 0), 1.0)
    assert np.allclose(links[0].position, [1, 2, 0])
    assert links[0].rotation == pytest.approx(1.0)


def test_collide_does_nothing(chain, clock):
    hier, _, _ = chain
    player = PlayerGameObject((6, 6, 0), clock=clock)
    hier.collide(player)
    assert hier.hitpoints == 1
    assert not hier.is_destroyed


def test_empty_chain_rejected(clock):
    boss = GameObject((0, 0, 0), clock=clock)
    with pytest.raises(ValueError):
        HierarchicalTransformation([], boss, (0, 0, 0), clock=clock)