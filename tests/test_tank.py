import numpy as np
import pytest

from tankwars.projectile import Projectile
from tankwars.tank import Tank
from tankwars.transform2d import rotate, translate


def make_tank(x=50.0, chunk=0, step=60.0, health=100):
    return Tank((x, 0.0, 0.0), chunk, 100.0, step, health, 0.5)


def test_initial_state():
    tank = make_tank()
    assert tank.cannon_angle == 90.0
    assert tank.current_health == tank.max_health == 100
    assert tank.is_dead is False
    assert np.allclose(tank.cannon_offset, [0.0, 3 * Tank.HEIGHT / 5, 0.0])


def test_build_on_flat_ground():
    tank = make_tank()
    body, cannon = tank.build([(0.0, 10.0), (100.0, 10.0)])
    assert tank.position[1] == pytest.approx(10.0)
    assert tank.angle == pytest.approx(0.0)
    assert np.allclose(body, translate(50.0, 10.0))
    assert np.allclose(tank.cannon_offset[:2], [0.0, 3 * Tank.HEIGHT / 5 + 2 * Tank.HEIGHT / 15])
    assert cannon.shape == (3, 3)


def test_build_on_slope():
    tank = make_tank()
    body, _ = tank.build([(0.0, 0.0), (100.0, 100.0)])
    assert tank.position[1] == pytest.approx(50.0)
    assert tank.angle == pytest.approx(45.0)
    assert np.allclose(body, translate(50.0, 50.0) @ rotate(np.pi / 4))


def test_build_clamps_below_zero():
    tank = make_tank()
    body, _ = tank.build([(0.0, -40.0), (100.0, -20.0)])
    assert tank.position[1] == 0.0
    assert tank.angle == 0.0
    assert np.allclose(body, translate(50.0, 0.0))


def test_muzzle_straight_up():
    tank = make_tank()
    tank.build([(0.0, 10.0), (100.0, 10.0)])
    tip, direction = tank.muzzle()
    expected_y = 10.0 + tank.cannon_offset[1] + Tank.CANNON_LENGTH
    assert np.allclose(tip, [50.0, expected_y, 0.0])
    assert np.allclose(direction, [0.0, 1.0, 0.0])


def test_fire_creates_projectile_when_pool_empty():
    tank = make_tank()
    tank.build([(0.0, 10.0), (100.0, 10.0)])
    projectiles, pool = [], []
    shell = tank.fire_projectile(Projectile.SPEED, projectiles, pool)
    assert projectiles == [shell]
    tip, direction = tank.muzzle()
    assert np.allclose(shell.position, tip)
    assert np.allclose(shell.velocity, direction * Projectile.SPEED)


def test_fire_reuses_pooled_projectile():
    tank = make_tank()
    tank.build([(0.0, 10.0), (100.0, 10.0)])
    old = Projectile((1.0, 1.0, 0.0), (0.0, 0.0, 0.0))
    projectiles, pool = [], [old]
    shell = tank.fire_projectile(Projectile.SPEED, projectiles, pool)
    assert shell is old
    assert pool == []
    assert projectiles == [old]
    assert np.allclose(old.position, tank.muzzle()[0])


def test_cannon_turns_left_until_ground_angle():
    tank = make_tank(step=60.0)
    assert tank.update_cannon_angle(True, 1.0) is True
    assert tank.cannon_angle == pytest.approx(30.0)
    assert tank.update_cannon_angle(True, 1.0) is False
    assert tank.cannon_angle == pytest.approx(30.0)


def test_cannon_turns_right_until_arc_end():
    tank = make_tank(step=60.0)
    assert tank.update_cannon_angle(False, 1.0) is True
    assert tank.cannon_angle == pytest.approx(150.0)
    assert tank.update_cannon_angle(False, 1.0) is False
    assert tank.cannon_angle == pytest.approx(150.0)


def test_take_damage_and_death():
    tank = make_tank(health=20)
    tank.take_damage(Projectile.DAMAGE)
    assert tank.current_health == 20 - Projectile.DAMAGE
    assert tank.is_dead is False
    tank.take_damage(Projectile.DAMAGE)
    assert tank.current_health == 0
    assert tank.is_dead is True