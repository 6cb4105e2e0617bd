"""Contact tests and contact responses for the pong arena, and builders for its walls."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from pongphysics.objects import GameObject, ObjectPool, ObjectType
from pongphysics.vector import EPSILON, Vector3

_WHITE = Vector3(1.0, 1.0, 1.0)
THICK_PILLAR_SIZE = 0.1


@dataclass
class Paddle:
    """A thin wall with a round pillar at each end, moved together as one paddle."""

    wall: GameObject
    pillar1: GameObject
    pillar2: GameObject

    @property
    def parts(self) -> Tuple[GameObject, GameObject, GameObject]:
        return (self.wall, self.pillar1, self.pillar2)

    def __iter__(self) -> Iterator[GameObject]:
        return iter(self.parts)


def is_equal(a: float, b: float) -> bool:
    """Whether ``a`` and ``b`` differ by no more than EPSILON."""
    return a - b <= EPSILON and b - a <= EPSILON


def _tangent(normal: Vector3) -> Vector3:
    return Vector3(-normal.y, normal.x, 0.0)


def check_collision(go1: GameObject, go2: GameObject) -> bool:
    """Whether ball ``go1`` is touching ``go2`` and moving into it."""
    if go1.type is not ObjectType.BALL:
        return False

    if go2.type in (ObjectType.PILLAR, ObjectType.BALL):
        relative_vel = go1.vel - go2.vel
        dist_diff = go2.pos - go1.pos
        if relative_vel.dot(dist_diff) <= 0:
            return False
        reach = go1.scale.x + go2.scale.x
        return dist_diff.length_squared() <= reach * reach

    if go2.type is ObjectType.WALL:
        diff = go1.pos - go2.pos
        axis_x = go2.normal
        axis_y = _tangent(go2.normal)
        projected = diff.dot(axis_x)

        if go2.other_wall is not None:
            if abs(projected) / go2.scale.x < abs(diff.dot(axis_y)) / go2.other_wall.scale.x:
                return False

        if projected > 0:
            axis_x = -axis_x

        return (
            (go1.vel - go2.vel).dot(axis_x) >= 0
            and go2.scale.x * 0.5 + go1.scale.x > -diff.dot(axis_x)
            and go2.scale.y * 0.5 > abs(diff.dot(axis_y))
        )

    return False


def _transfer_possession(ball: GameObject, other: GameObject) -> None:
    if other.possession in (1, 2):
        ball.possession = other.possession
        ball.color = other.color.copy()


def _normal_force(ball: GameObject, tangent: Vector3, gravity: Vector3) -> float:
    along = abs(tangent.dot(gravity.normalized()))
    return ball.mass * gravity.length() * math.sin(math.acos(min(1.0, along)))


def _ball_response(go1: GameObject, go2: GameObject) -> None:
    u1 = go1.vel.copy()
    u2 = go2.vel.copy()
    m1, m2 = go1.mass, go2.mass

    diff = go2.pos - go1.pos
    overlap = go1.scale.x + go2.scale.x - diff.length()
    if overlap > 0 and not diff.is_zero():
        direction = diff.normalized()
        speed1 = go1.vel.length_squared()
        speed2 = go2.vel.length_squared()
        if speed1 >= speed2:
            go1.pos = go1.pos + direction * -overlap
        elif speed2 > speed1:
            go2.pos = go2.pos + direction * overlap

    n = go1.pos - go2.pos
    vec = n * ((u1 - u2).dot(n) / n.length_squared())
    restitution = 1 + (go1.cor + go2.cor) / 2
    go1.vel = u1 - vec * (restitution * m2 / (m1 + m2))
    go2.vel = u2 - (-vec) * (restitution * m1 / (m1 + m2))


def _wall_response(
    go1: GameObject, go2: GameObject, dt: float, gravity: Vector3, speed: float
) -> None:
    u2 = go2.vel.copy()
    step = dt * speed
    _transfer_possession(go1, go2)

    diff = go2.pos - go1.pos
    axis_x = go2.normal.copy()
    if diff.dot(axis_x) > 0:
        axis_x = -axis_x

    penetration = go1.scale.x + go2.scale.x * 0.5 - (-diff.dot(axis_x))
    if penetration > 0:
        go1.pos = go1.pos + axis_x * penetration

    tangent = _tangent(go2.normal)
    normal_force = 0.0
    if axis_x.y > 0:
        normal_force = _normal_force(go1, tangent, gravity)
        go1.vel = go1.vel + axis_x * (normal_force / go1.mass * step)
    u1 = go1.vel.copy()

    restitution = 1 + (go1.cor + go2.cor) / 2
    go1.vel = u1 - go2.normal * (restitution * (u1 - u2).dot(go2.normal))
    u1 = go1.vel.copy()

    # Kinetic friction along the wall surface.
    relative_vel = u1 - u2
    if not is_equal(go1.angular_velocity, 0):
        relative_vel = -u2
    tangential = relative_vel.dot(tangent)
    lever = axis_x * (go1.scale.x * -1)
    if not is_equal(tangential, 0) and not is_equal(normal_force, 0):
        friction_dir = -(tangent * tangential).normalized()
        friction_force = friction_dir * (go2.cof_k * normal_force)
        stopping = abs(go2.cof_k * normal_force / go1.mass * step) > abs(tangential)
        if stopping:
            go1.vel = go1.vel + friction_dir * abs(tangential)
            torque = lever.cross(friction_dir * (abs(tangential) / step * go1.mass))
        else:
            go1.vel = go1.vel + friction_force * (1 / go1.mass * step)
            torque = lever.cross(friction_force)
        go1.angular_velocity += torque.z / go1.moment_of_inertia * step
        u1 = go1.vel.copy()

    # Rolling across the surface, slowed by rolling resistance.
    tangential = (u1 - u2).dot(tangent)
    tan_rel_vel = tangent * tangential
    radius_arm = axis_x * go1.scale.x
    tan_vel = radius_arm.cross(Vector3(0.0, 0.0, go1.angular_velocity))
    if tan_vel.length() > EPSILON and not is_equal(normal_force, 0):
        friction_force = -tan_vel.normalized() * (go1.cof_r * normal_force)
        torque = lever.cross(friction_force)
        angular_acceleration = torque.z / go1.moment_of_inertia
        change = angular_acceleration * step
        omega = go1.angular_velocity
        if omega < 0:
            if angular_acceleration > 0 and abs(change) >= abs(omega):
                go1.angular_velocity = 0.0
            else:
                go1.angular_velocity += change
        elif omega > 0:
            if angular_acceleration < 0 and abs(change) >= abs(omega):
                go1.angular_velocity = 0.0
            else:
                go1.angular_velocity += change
        tan_vel = radius_arm.cross(Vector3(0.0, 0.0, go1.angular_velocity))
        go1.vel = go1.vel - tan_rel_vel - tan_vel


def _pillar_response(
    go1: GameObject, go2: GameObject, dt: float, gravity: Vector3, speed: float
) -> None:
    u2 = go2.vel.copy()
    _transfer_possession(go1, go2)

    diff = go2.pos - go1.pos
    overlap = go1.scale.x + go2.scale.x - diff.length()
    if overlap > 0 and not diff.is_zero():
        go1.pos = go1.pos + diff.normalized() * -overlap

    n = go1.pos - go2.pos
    if not n.is_zero():
        n = n.normalized()

    tangent = _tangent(n)
    if n.y > 0:
        normal_force = _normal_force(go1, tangent, gravity)
        go1.vel = go1.vel + n * (normal_force / go1.mass * dt * speed)
    u1 = go1.vel.copy()

    restitution = 1 + (go1.cor + go2.cor) / 2
    go1.vel = u1 - n * (restitution * (u1 - u2).dot(n))


def collision_response(
    go1: GameObject,
    go2: GameObject,
    dt: float,
    gravity: Vector3,
    speed: float = 1.0,
) -> None:
    """Separate ball ``go1`` from ``go2`` and update their velocities and spin.

    Walls and pillars that belong to a paddle hand the ball to that player.
    """
    if go2.type is ObjectType.BALL:
        _ball_response(go1, go2)
    elif go2.type is ObjectType.WALL:
        _wall_response(go1, go2, dt, gravity, speed)
    elif go2.type is ObjectType.PILLAR:
        _pillar_response(go1, go2, dt, gravity, speed)


def _place(
    pool: ObjectPool,
    kind: ObjectType,
    scale: Vector3,
    pos: Vector3,
    color: Vector3,
    normal: Vector3 | None = None,
) -> GameObject:
    go = pool.fetch()
    go.type = kind
    go.scale = scale
    go.pos = pos.copy()
    if normal is not None:
        go.normal = normal.copy()
    go.vel = Vector3()
    go.color = color.copy()
    return go


def _surface(go: GameObject, cor: float, cof_k: float, possession: int) -> GameObject:
    go.cor = cor
    go.cof_k = cof_k
    go.possession = possession
    return go


def make_thin_wall(
    pool: ObjectPool,
    width: float,
    height: float,
    possession: int,
    normal: Vector3,
    pos: Vector3,
    color: Vector3 = _WHITE,
    cor: float = 1.0,
    cof_k: float = 0.0,
) -> Paddle:
    """Build a paddle: a wall with a pillar at each end, all owned by ``possession``."""
    wall = _place(pool, ObjectType.WALL, Vector3(width, height, 1.0), pos, color, normal)
    _surface(wall, cor, cof_k, possession)
    tangent = _tangent(normal)
    half = tangent * (height * 0.5)
    radius = width * 0.5
    pillar1 = _place(pool, ObjectType.PILLAR, Vector3(radius, radius, 1.0), pos + half, color)
    _surface(pillar1, cor, cof_k, possession)
    pillar2 = _place(pool, ObjectType.PILLAR, Vector3(radius, radius, 1.0), pos - half, color)
    _surface(pillar2, cor, cof_k, possession)
    return Paddle(wall, pillar1, pillar2)


def make_half_thin_wall(
    pool: ObjectPool,
    width: float,
    height: float,
    normal: Vector3,
    pos: Vector3,
    color: Vector3 = _WHITE,
    cor: float = 1.0,
    cof_k: float = 0.0,
) -> Tuple[GameObject, GameObject]:
    """Build a neutral wall capped by a pillar on its tangent end only."""
    wall = _place(pool, ObjectType.WALL, Vector3(width, height, 1.0), pos, color, normal)
    _surface(wall, cor, cof_k, 0)
    half = _tangent(normal) * (height * 0.5)
    radius = width * 0.5
    pillar = _place(pool, ObjectType.PILLAR, Vector3(radius, radius, 1.0), pos + half, color)
    _surface(pillar, cor, cof_k, 0)
    return wall, pillar


def make_thick_wall(
    pool: ObjectPool,
    width: float,
    height: float,
    normal: Vector3,
    pos: Vector3,
    color: Vector3 = _WHITE,
) -> Tuple[GameObject, GameObject]:
    """Build a solid block from two crossed walls and hidden corner pillars.

    Returns the visible wall and its hidden crossing partner.
    """
    tangent = _tangent(normal)
    along = tangent * (height * 0.5)
    across = normal * (width * 0.5)
    corners = (
        pos + along + across,
        pos + along - across,
        pos - along - across,
        pos - along + across,
    )
    for corner in corners:
        pillar = _place(
            pool,
            ObjectType.PILLAR,
            Vector3(THICK_PILLAR_SIZE, THICK_PILLAR_SIZE, 1.0),
            corner,
            color,
        )
        pillar.visible = False

    wall1 = _place(pool, ObjectType.WALL, Vector3(width, height, 1.0), pos, color, normal)
    wall2 = _place(pool, ObjectType.WALL, Vector3(height, width, 1.0), pos, color, tangent)
    wall2.visible = False
    wall1.other_wall = wall2
    wall2.other_wall = wall1
    return wall1, wall2