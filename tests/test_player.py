import numpy as np
import pytest

from mothership.collectibles import FuelCollectible, HealthCollectible, ShieldCollectible
from mothership.game_object import GameObject, ObjectType
from mothership.player import PlayerGameObject
from mothership.projectile import Projectile
from mothership.pulse import Pulse
from mothership.timer import ManualClock

HOME = (0.0, 0.0, 0.0)


@pytest.fixture
def player():
    return PlayerGameObject(HOME, clock=ManualClock())


def rammer(player, kind=ObjectType.ENEMY):
    body = GameObject(HOME, clock=player.clock)
    body.object_type = kind
    return body


def test_initial_state(player):
    assert player.object_type is ObjectType.PLAYER
    assert (player.hitpoints, player.max_hitpoints) == (14, 14)
    assert player.fuel == 100
    assert player.max_velocity == 8.0
    assert player.projectile_count == 0


def test_fire_projectile_along_bearing(player):
    player.rotation = np.pi / 2
    shot = player.fire_projectile(texture="bullet")
    assert isinstance(shot, Projectile)
    np.testing.assert_allclose(shot.direction, player.bearing)
    assert shot.rotation == pytest.approx(player.rotation)
    assert shot.owner is player
    assert shot.texture == "bullet"
    assert player.projectile_count == 1


def test_projectile_cooldown_and_limit(player):
    assert player.fire_projectile(None) is not None
    assert player.fire_projectile(None) is None
    for _ in range(2):
        player.clock.advance(0.15)
        assert player.fire_projectile(None) is not None
    player.clock.advance(0.15)
    assert player.fire_projectile(None) is None
    assert player.projectile_count == 3
    player.projectile_destroyed()
    assert player.fire_projectile(None) is not None


def test_fire_pulse_cooldown(player):
    pulse = player.fire_pulse(None)
    assert isinstance(pulse, Pulse)
    assert pulse.owner is player
    player.clock.advance(2.0)
    assert player.fire_pulse(None) is None
    player.clock.advance(0.1)
    assert player.fire_pulse(None) is not None


def test_health_pickup_is_capped(player):
    player.collide(rammer(player))
    player.collide(HealthCollectible(HOME, clock=player.clock))
    assert player.hitpoints == 14


@pytest.mark.parametrize("start, after", [(50.0, 75.0), (90.0, 100.0)])
def test_fuel_pickup_is_capped(player, start, after):
    player.fuel = start
    player.collide(FuelCollectible(HOME, clock=player.clock))
    assert player.fuel == after


def test_five_shields_grant_invincibility(player):
    for _ in range(5):
        player.collide(ShieldCollectible(HOME, clock=player.clock))
    assert player.shield_collectible_count == 5
    player.update(0.0)
    assert player.is_invincible
    assert player.shield_collectible_count == 0
    player.clock.advance(10.0)
    player.update(0.0)
    assert not player.is_invincible


def test_enemy_collision_respects_cooldown(player):
    enemy = rammer(player)
    player.collide(enemy)
    player.collide(enemy)
    assert player.hitpoints == 13
    player.clock.advance(0.8)
    player.collide(rammer(player, ObjectType.MOTHERSHIP))
    assert player.hitpoints == 12


def test_invincible_player_takes_no_ram_damage(player):
    player.is_invincible = True
    player.collide(rammer(player))
    assert player.hitpoints == 14


def test_player_destroyed_when_out_of_hitpoints(player):
    for _ in range(14):
        player.collide(rammer(player))
        player.clock.advance(0.8)
    assert player.hitpoints == 0
    assert player.is_destroyed
    player.set_velocity((1.0, 1.0, 0.0))
    before = player.position.copy()
    player.update(1.0)
    np.testing.assert_allclose(player.velocity, 0.0)
    assert player.acceleration == 0.0
    np.testing.assert_allclose(player.position, before)


def test_velocity_is_capped(player):
    player.set_velocity((30.0, 40.0, 0.0))
    player.update(0.0)
    assert np.linalg.norm(player.velocity) == pytest.approx(player.max_velocity)
    assert player.velocity[0] / player.velocity[1] == pytest.approx(0.75)


def test_update_moves_by_velocity(player):
    player.set_velocity((2.0, -1.0, 0.0))
    player.update(0.5)
    np.testing.assert_allclose(player.position, [1.0, -0.5, 0.0])


def test_boost_consumes_fuel(player):
    player.use_boost = True
    player.update(0.0)
    assert player.acceleration == 0.012
    assert player.fuel == 99.0
    player.update(0.0)
    assert player.fuel == 99.0
    player.clock.advance(0.2)
    player.update(0.0)
    assert player.fuel == 98.0


def test_boost_without_fuel_uses_normal_acceleration(player):
    player.use_boost = True
    player.fuel = 0.0
    player.update(0.0)
    assert player.acceleration == 0.003
    assert player.fuel == 0.0