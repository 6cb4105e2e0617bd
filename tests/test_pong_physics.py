import pytest

from pongphysics.objects import GameObject, ObjectPool, ObjectType
from pongphysics.pong_physics import (
    Paddle,
    check_collision,
    collision_response,
    is_equal,
    make_half_thin_wall,
    make_thick_wall,
    make_thin_wall,
)
from pongphysics.vector import Vector3

GRAVITY = Vector3(0.0, -85.0, 0.0)


def ball(x, y, vx=0.0, vy=0.0, radius=1.0, mass=1.0):
    return GameObject(
        ObjectType.BALL,
        pos=Vector3(x, y, 0.0),
        vel=Vector3(vx, vy, 0.0),
        scale=Vector3(radius, radius, 1.0),
        mass=mass,
        active=True,
    )


def wall(x, y, normal, thickness=1.0, length=10.0, **kwargs):
    return GameObject(
        ObjectType.WALL,
        pos=Vector3(x, y, 0.0),
        normal=normal,
        scale=Vector3(thickness, length, 1.0),
        active=True,
        **kwargs,
    )


def test_is_equal_tolerance():
    assert is_equal(1.0, 1.0 + 1e-6)
    assert not is_equal(1.0, 1.1)


def test_non_ball_never_collides():
    w = wall(0, 0, Vector3(1, 0, 0))
    b = ball(0.5, 0, vx=-1)
    assert check_collision(w, b) is False


def test_ball_ball_approaching_and_separating():
    a = ball(0, 0, vx=1)
    b = ball(1.5, 0, vx=-1)
    assert check_collision(a, b) is True
    a.vel = Vector3(-1, 0, 0)
    b.vel = Vector3(1, 0, 0)
    assert check_collision(a, b) is False


def test_ball_wall_requires_approach_and_length():
    w = wall(0, 0, Vector3(0, 1, 0), thickness=1.0, length=10.0)
    b = ball(0, 1.2, vy=-1)
    assert check_collision(b, w) is True
    b.vel = Vector3(0, 1, 0)
    assert check_collision(b, w) is False
    far = ball(6, 1.2, vy=-1)
    assert check_collision(far, w) is False


def test_thick_wall_face_selection():
    pool = ObjectPool()
    wall1, wall2 = make_thick_wall(pool, 2.0, 10.0, Vector3(1, 0, 0), Vector3(0, 0, 0))
    # Approaching the short face: the long-axis wall must defer to its partner.
    b = ball(0, 5.5, vy=-1)
    assert check_collision(b, wall1) is False
    assert check_collision(b, wall2) is True


def test_ball_ball_equal_masses_exchange_velocities():
    a = ball(0, 0, vx=1)
    b = ball(1.5, 0, vx=-1)
    collision_response(a, b, 0.01, GRAVITY)
    assert tuple(a.vel) == pytest.approx((-1.0, 0.0, 0.0))
    assert tuple(b.vel) == pytest.approx((1.0, 0.0, 0.0))
    assert a.pos.distance(b.pos) == pytest.approx(a.scale.x + b.scale.x)


def test_ball_ball_momentum_conserved():
    a = ball(0, 0, vx=3, vy=1, mass=2.0)
    b = ball(1.5, 0.5, vx=-1, mass=5.0)
    a.cor = 0.5
    b.cor = 0.5
    before = a.vel * a.mass + b.vel * b.mass
    collision_response(a, b, 0.01, GRAVITY)
    after = a.vel * a.mass + b.vel * b.mass
    assert tuple(after) == pytest.approx(tuple(before))


def test_vertical_wall_elastic_reflection():
    b = ball(2, 0, vx=-5)
    w = wall(0, 0, Vector3(1, 0, 0))
    collision_response(b, w, 0.01, GRAVITY)
    assert tuple(b.vel) == pytest.approx((5.0, 0.0, 0.0))
    assert tuple(b.pos) == pytest.approx((2.0, 0.0, 0.0))


def test_wall_transfers_possession_and_color():
    b = ball(2, 0, vx=-5)
    b.possession = 1
    w = wall(0, 0, Vector3(1, 0, 0), possession=2, color=Vector3(0, 1, 1))
    collision_response(b, w, 0.01, GRAVITY)
    assert b.possession == 2
    assert b.color == w.color
    b.color.x = 0.5
    assert w.color.x == 0


def test_floor_contact_bounces_upwards():
    b = ball(0, 2, vy=-1)
    floor = wall(0, 0, Vector3(0, 1, 0))
    collision_response(b, floor, 0.01, GRAVITY)
    assert b.vel.y > 0
    assert b.vel.x == pytest.approx(0.0)


def test_floor_friction_slows_and_spins():
    b = ball(0, 2, vx=10, vy=-1)
    floor = wall(0, 0, Vector3(0, 1, 0), cof_k=0.5)
    collision_response(b, floor, 0.01, GRAVITY)
    assert abs(b.vel.x) < 10
    assert b.angular_velocity < 0


def test_floor_contact_without_gravity_raises():
    b = ball(0, 2, vy=-1)
    floor = wall(0, 0, Vector3(0, 1, 0))
    with pytest.raises(ZeroDivisionError):
        collision_response(b, floor, 0.01, Vector3())


def test_pillar_reflects_and_separates():
    b = ball(0, 0, vx=1)
    pillar = GameObject(
        ObjectType.PILLAR,
        pos=Vector3(1.5, 0, 0),
        scale=Vector3(1, 1, 1),
        active=True,
        possession=1,
    )
    collision_response(b, pillar, 0.01, GRAVITY)
    assert tuple(b.vel) == pytest.approx((-1.0, 0.0, 0.0))
    assert b.pos.distance(pillar.pos) == pytest.approx(2.0)
    assert b.possession == 1


def test_make_thin_wall_builds_paddle():
    pool = ObjectPool()
    paddle = make_thin_wall(
        pool, 4.0, 20.0, 2, Vector3(0, 1, 0), Vector3(30, 2, 0), Vector3(0, 1, 1), 0.1, 0.9
    )
    assert isinstance(paddle, Paddle)
    assert [p.type for p in paddle] == [ObjectType.WALL, ObjectType.PILLAR, ObjectType.PILLAR]
    assert all(p.possession == 2 and p.cof_k == 0.9 and p.cor == 0.1 for p in paddle)
    assert paddle.pillar1.pos.distance(paddle.pillar2.pos) == pytest.approx(20.0)
    assert paddle.pillar1.scale.x == pytest.approx(2.0)
    assert pool.active_count == 3


def test_make_half_thin_wall_is_neutral():
    pool = ObjectPool()
    w, pillar = make_half_thin_wall(
        pool, 6.0, 20.0, Vector3(1, 0, 0), Vector3(50, 10, 0), Vector3(0, 1, 0), 0.7, 0.3
    )
    assert w.possession == 0 and pillar.possession == 0
    assert pillar.pos.distance(w.pos) == pytest.approx(10.0)
    assert pool.active_count == 2


def test_make_thick_wall_links_and_hides():
    pool = ObjectPool()
    wall1, wall2 = make_thick_wall(pool, 4.0, 8.0, Vector3(0, 1, 0), Vector3(0, 0, 0))
    assert wall1.other_wall is wall2 and wall2.other_wall is wall1
    assert wall1.visible and not wall2.visible
    pillars = [go for go in pool.active_objects() if go.type is ObjectType.PILLAR]
    assert len(pillars) == 4
    assert not any(p.visible for p in pillars)
    assert len({(p.pos.x, p.pos.y) for p in pillars}) == 4