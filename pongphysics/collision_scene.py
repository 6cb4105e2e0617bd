"""Sandbox of balls bouncing inside an octagon of walls around a thick block."""

from __future__ import annotations

import math
import random
from typing import Optional, Tuple

from pongphysics.objects import GameObject, ObjectPool, ObjectType
from pongphysics.vector import Vector3

LEFT_BUTTON = 0
RIGHT_BUTTON = 1

GHOST_MASS = 8.0
OCTAGON_SIDES = 8
OCTAGON_WALL_LENGTH = 30.0
THICK_PILLAR_SIZE = 0.1

_WHITE = Vector3(1.0, 1.0, 1.0)


class CollisionScene:
    """Balls launched with the mouse that collide with each other, walls and pillars."""

    def __init__(
        self,
        world_width: float = 100.0 * 4 / 3,
        world_height: float = 100.0,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.world_width = world_width
        self.world_height = world_height
        self.rng = rng if rng is not None else random.Random()
        self.speed = 1.0
        self.pool = ObjectPool(ObjectType.BALL, batch_size=10)
        self.ghost = GameObject(ObjectType.BALL)
        self._pressed = {LEFT_BUTTON: False, RIGHT_BUTTON: False}

        angle = math.pi / 4
        radius = OCTAGON_WALL_LENGTH * 0.5 / math.tan(angle * 0.5)
        centre_x = world_width / 2
        centre_y = world_height / 2
        for i in range(OCTAGON_SIDES):
            go = self.pool.fetch()
            go.type = ObjectType.WALL
            go.scale = Vector3(2.0, OCTAGON_WALL_LENGTH + 0.9, 1.0)
            go.pos = Vector3(
                radius * math.cos(i * angle) + centre_x,
                radius * math.sin(i * angle) + centre_y,
                0.0,
            )
            go.normal = Vector3(math.cos(i * angle), math.sin(i * angle), 0.0)
            go.vel = Vector3()
            go.color = Vector3(1.0, 1.0, 0.0)

        self.make_thick_wall(
            20.0,
            40.0,
            Vector3(math.cos(math.pi / 4), math.sin(math.pi / 4), 0.0),
            Vector3(centre_x, centre_y, 0.0),
        )

    def _random_color(self) -> Vector3:
        return Vector3(self.rng.uniform(0, 1), self.rng.uniform(0, 1), self.rng.uniform(0, 1))

    def check_collision(self, go1: GameObject, go2: GameObject) -> bool:
        """Whether ball ``go1`` is touching and moving into ``go2``."""
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
            axis_y = Vector3(-go2.normal.y, go2.normal.x, 0.0)
            projected = diff.dot(axis_x)

            if go2.other_wall is not None:
                if abs(projected) / go2.scale.x < abs(diff.dot(axis_y)) / go2.other_wall.scale.x:
                    return False

            if projected > 0:
                axis_x = -axis_x

            return (
                go1.vel.dot(axis_x) >= 0
                and go2.scale.x * 0.5 + go1.scale.x > -diff.dot(axis_x)
                and go2.scale.y * 0.5 > abs(diff.dot(axis_y))
            )

        return False

    def collision_response(self, go1: GameObject, go2: GameObject) -> None:
        """Change the velocities of ``go1`` (and ``go2`` for balls) after contact."""
        u1 = go1.vel.copy()
        u2 = go2.vel.copy()

        if go2.type is ObjectType.BALL:
            m1, m2 = go1.mass, go2.mass
            n = go1.pos - go2.pos
            vec = n * ((u1 - u2).dot(n) / n.length_squared())
            restitution = 1 + (go1.cor + go2.cor) / 2
            go1.vel = u1 - vec * (restitution * m2 / (m1 + m2))
            go2.vel = u2 - (-vec) * (restitution * m1 / (m1 + m2))
        elif go2.type is ObjectType.WALL:
            go1.vel = u1 - go2.normal * (2.0 * (u1 - u2).dot(go2.normal))
        elif go2.type is ObjectType.PILLAR:
            n = (go2.pos - go1.pos).normalized()
            go1.vel = u1 - n * (2.0 * u1.dot(n))

    def _place(
        self,
        kind: ObjectType,
        scale: Vector3,
        pos: Vector3,
        color: Vector3,
        normal: Optional[Vector3] = None,
    ) -> GameObject:
        go = self.pool.fetch()
        go.type = kind
        go.scale = scale
        go.pos = pos.copy()
        if normal is not None:
            go.normal = normal.copy()
        go.vel = Vector3()
        go.color = color.copy()
        return go

    def make_thin_wall(
        self,
        width: float,
        height: float,
        normal: Vector3,
        pos: Vector3,
        color: Vector3 = _WHITE,
    ) -> Tuple[GameObject, GameObject, GameObject]:
        """A wall capped at both ends by round pillars; returns (wall, pillar1, pillar2)."""
        wall = self._place(ObjectType.WALL, Vector3(width, height, 1.0), pos, color, normal)
        tangent = Vector3(-normal.y, normal.x, 0.0)
        pillar_scale = width * 0.5
        pillar1 = self._place(
            ObjectType.PILLAR,
            Vector3(pillar_scale, pillar_scale, 1.0),
            pos + tangent * (height * 0.5),
            color,
        )
        pillar2 = self._place(
            ObjectType.PILLAR,
            Vector3(pillar_scale, pillar_scale, 1.0),
            pos - tangent * (height * 0.5),
            color,
        )
        return wall, pillar1, pillar2

    def make_thick_wall(
        self,
        width: float,
        height: float,
        normal: Vector3,
        pos: Vector3,
        color: Vector3 = _WHITE,
    ) -> Tuple[GameObject, GameObject]:
        """A solid block made of two crossed walls and small corner pillars.

        Returns the visible wall and its invisible crossing partner.
        """
        tangent = Vector3(-normal.y, normal.x, 0.0)
        along = tangent * (height * 0.5)
        across = normal * (width * 0.5)
        corners = (
            pos - along + across,
            pos - along - across,
            pos - along - across,
            pos - along + across,
        )
        for corner in corners:
            self._place(
                ObjectType.PILLAR,
                Vector3(THICK_PILLAR_SIZE, THICK_PILLAR_SIZE, 1.0),
                corner,
                color,
            )

        wall1 = self._place(ObjectType.WALL, Vector3(width, height, 1.0), pos, color, normal)
        wall2 = self._place(ObjectType.WALL, Vector3(height, width, 1.0), pos, color, tangent)
        wall2.visible = False
        wall1.other_wall = wall2
        wall2.other_wall = wall1
        return wall1, wall2

    @staticmethod
    def _check_button(button: int) -> None:
        if button not in (LEFT_BUTTON, RIGHT_BUTTON):
            raise ValueError(f"unknown mouse button {button!r}")

    def press(self, button: int, pos: Tuple[float, float]) -> None:
        """Start aiming a ball from world position ``pos``."""
        self._check_button(button)
        if self._pressed[button]:
            return
        self._pressed[button] = True
        ghost = self.ghost
        ghost.active = True
        ghost.mass = GHOST_MASS
        ghost.pos = Vector3(pos[0], pos[1], 0.0)
        ghost.color = self._random_color()
        if button == LEFT_BUTTON:
            ghost.scale = Vector3(2.0, 2.0, 1.0)
        else:
            ghost.scale = Vector3(1.0, 1.0, 1.0)

    def release(self, button: int, pos: Tuple[float, float]) -> Optional[GameObject]:
        """Launch the aimed ball; returns it, or None if the button was not pressed.

        The ball flies from the press point away from the release point. A
        right-button ball is scaled by the drag distance clamped to [2, 10].
        """
        self._check_button(button)
        if not self._pressed[button]:
            return None
        self._pressed[button] = False
        ghost = self.ghost
        mouse = Vector3(pos[0], pos[1], 0.0)

        go = self.pool.fetch()
        go.pos = ghost.pos.copy()
        go.vel = ghost.pos - mouse
        if button == LEFT_BUTTON:
            go.mass = ghost.mass
            go.scale = ghost.scale.copy()
        else:
            distance = int(math.sqrt((ghost.pos.x - mouse.x) ** 2 + (ghost.pos.y - mouse.y) ** 2))
            scaled = float(min(10, max(2, distance)))
            go.mass = ghost.mass * scaled
            go.scale = ghost.scale * scaled
        go.color = self._random_color()
        ghost.active = False
        return go

    def update(self, dt: float) -> None:
        """Move every active object, bounce it off the screen edges and resolve collisions."""
        step = dt * self.speed
        objects = self.pool.objects
        for i, go in enumerate(objects):
            if not go.active:
                continue
            go.pos = go.pos + go.vel * step

            if (go.pos.x - go.scale.x < 0 and go.vel.x < 0) or (
                go.pos.x + go.scale.x > self.world_width and go.vel.x > 0
            ):
                go.vel.x = -go.vel.x
            if go.pos.x < -go.scale.x or go.pos.x > self.world_width + go.scale.x:
                self.pool.release(go)
                continue

            if (go.pos.y - go.scale.y < 0 and go.vel.y < 0) or (
                go.pos.y + go.scale.y > self.world_height and go.vel.y > 0
            ):
                go.vel.y = -go.vel.y
            if go.pos.y < -go.scale.y or go.pos.y > self.world_height + go.scale.y:
                self.pool.release(go)
                continue

            for go2 in objects[i + 1:]:
                if not go2.active:
                    continue
                actor, actee = (go, go2) if go.type is ObjectType.BALL else (go2, go)
                if self.check_collision(actor, actee):
                    self.collision_response(actor, actee)