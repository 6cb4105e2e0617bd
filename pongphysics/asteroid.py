"""Asteroid field with a thrust-and-torque ship, bullets and black holes."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from pongphysics.objects import GameObject, ObjectPool, ObjectType
from pongphysics.vector import Vector3, rotate_vector

MAX_SPEED = 50.0
BULLET_SPEED = 50.0
ROTATION_SPEED = 10.0
MAX_ROTATION_SPEED = 10000.0
GRAVITY_CONSTANT = 3.0
THRUST = 100.0
INITIAL_LIVES = 3
INITIAL_POOL = 100
ASTEROID_BATCH = 25
BLACKHOLE_RANGE_SQUARED = 3600.0
BLACKHOLE_ABSORB_SQUARED = 4.0


def wrap(value: float, bound: float) -> float:
    """Bring ``value`` back into ``[0, bound]`` by one period when it leaves it."""
    if value < 0:
        return value + bound
    if value > bound:
        return value - bound
    return value


@dataclass
class AsteroidControls:
    """Input for one frame of the asteroid game.

    ``click`` holds the world position of a fresh left-button press, if any.
    """

    thrust: bool = False
    rotate_left: bool = False
    reverse: bool = False
    rotate_right: bool = False
    mass_up: bool = False
    mass_down: bool = False
    spawn: bool = False
    fire: bool = False
    slower: bool = False
    faster: bool = False
    click: Optional[Tuple[float, float]] = None


class AsteroidGame:
    """The ship, the pool of asteroids, bullets and black holes, and their rules."""

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
        self.pool = ObjectPool(ObjectType.ASTEROID, batch_size=10, initial=INITIAL_POOL)
        self.lives = INITIAL_LIVES
        self.score = 0

        ship = GameObject(ObjectType.SHIP)
        ship.active = True
        ship.scale = Vector3(4.0, 4.0, 4.0)
        ship.pos = Vector3(world_width / 2, world_height / 2, 0.0)
        ship.vel = Vector3()
        ship.direction = Vector3(0.0, 1.0, 0.0)
        ship.moment_of_inertia = ship.mass * ship.scale.x * ship.scale.x
        ship.angular_velocity = 0.0
        self.ship = ship

        self.force = Vector3()
        self.torque = Vector3()
        self.elapsed_time = 0.0
        self.prev_elapsed = 0.0

    def fetch(self) -> GameObject:
        """Activate and return a pooled object."""
        return self.pool.fetch()

    def additional_force(self, go: GameObject, go2: GameObject) -> float:
        """Gravitational pull between two bodies; coincident bodies raise ZeroDivisionError."""
        radius_squared = go.pos.distance_squared(go2.pos)
        return GRAVITY_CONSTANT * go.mass * go2.mass / radius_squared

    def spawn_asteroids(self, count: int = ASTEROID_BATCH) -> list:
        """Place ``count`` asteroids at random positions with random velocities."""
        spawned = []
        for _ in range(count):
            go = self.fetch()
            go.type = ObjectType.ASTEROID
            go.pos = Vector3(
                self.rng.uniform(0, self.world_width),
                self.rng.uniform(0, self.world_height),
                0.0,
            )
            go.vel = Vector3(self.rng.uniform(-20, 20), self.rng.uniform(-20, 20), 0.0)
            go.scale = Vector3(2.0, 2.0, 2.0)
            spawned.append(go)
        return spawned

    def fire(self) -> Optional[GameObject]:
        """Shoot a bullet along the ship's heading, at most once per instant of game time."""
        if self.elapsed_time - self.prev_elapsed <= 0.0:
            return None
        go = self.fetch()
        go.type = ObjectType.BULLET
        go.pos = self.ship.pos.copy()
        go.vel = self.ship.direction * BULLET_SPEED
        go.scale = Vector3(0.2, 0.2, 1.0)
        self.prev_elapsed = self.elapsed_time
        return go

    def spawn_blackhole(self, x: float, y: float) -> GameObject:
        """Place a stationary black hole at world position (x, y)."""
        hole = self.fetch()
        hole.type = ObjectType.BLACKHOLE
        hole.scale = Vector3(10.0, 10.0, 1.0)
        hole.mass = 1000.0
        hole.pos = Vector3(x, y, 0.0)
        hole.vel = Vector3()
        return hole

    def _apply_controls(self, dt: float, controls: AsteroidControls) -> None:
        ship = self.ship
        if controls.slower:
            self.speed = max(0.0, self.speed - 0.1)
        if controls.faster:
            self.speed += 0.1

        self.force = Vector3()
        self.torque = Vector3()
        if controls.thrust:
            self.force = self.force + ship.direction * THRUST
        if controls.rotate_left:
            self.force = self.force + ship.direction * ROTATION_SPEED
            self.torque = self.torque + Vector3(-ship.scale.x, -ship.scale.y, 0.0).cross(
                Vector3(ROTATION_SPEED, 0.0, 0.0)
            )
        if controls.reverse:
            self.force = self.force - ship.direction * THRUST
        if controls.rotate_right:
            self.force = self.force + ship.direction * ROTATION_SPEED
            self.torque = Vector3(-ship.scale.x, ship.scale.y, 0.0).cross(
                Vector3(ROTATION_SPEED, 0.0, 0.0)
            )
        if controls.mass_up:
            ship.mass += dt
            ship.moment_of_inertia = ship.mass * ship.scale.x * ship.scale.x
        if controls.mass_down:
            ship.mass -= dt
            if ship.mass <= 0:
                ship.mass = 0.1
            ship.moment_of_inertia = ship.mass * ship.scale.x * ship.scale.x

        if controls.spawn:
            self.spawn_asteroids(ASTEROID_BATCH)
        if controls.fire:
            self.fire()
        if controls.click is not None:
            self.spawn_blackhole(*controls.click)

    def _move_ship(self, dt: float) -> None:
        ship = self.ship
        step = dt * self.speed
        ship.vel = ship.vel + self.force * (1.0 / ship.mass) * step
        if ship.vel.length_squared() > MAX_SPEED * MAX_SPEED:
            ship.vel = ship.vel.normalized() * MAX_SPEED
        ship.pos = ship.pos + ship.vel * step

        angular_acceleration = self.torque.z / ship.moment_of_inertia
        ship.angular_velocity += angular_acceleration * step
        ship.angular_velocity = max(
            -MAX_ROTATION_SPEED, min(MAX_ROTATION_SPEED, ship.angular_velocity)
        )
        ship.direction = rotate_vector(ship.direction, ship.angular_velocity * step)
        ship.angle = math.degrees(math.atan2(ship.direction.y, ship.direction.x))

        ship.pos.x = wrap(ship.pos.x, self.world_width)
        ship.pos.y = wrap(ship.pos.y, self.world_height)

    def _update_asteroid(self, go: GameObject) -> None:
        reach = self.ship.scale.x + go.scale.x
        if go.pos.distance_squared(self.ship.pos) < reach * reach:
            self.pool.release(go)
            self.lives -= 1
        go.pos.x = wrap(go.pos.x, self.world_width)
        go.pos.y = wrap(go.pos.y, self.world_height)

    def _update_bullet(self, go: GameObject) -> None:
        if (
            go.pos.x > self.world_width
            or go.pos.x < 0
            or go.pos.y > self.world_height
            or go.pos.y < 0
        ):
            self.pool.release(go)
            return
        for other in self.pool:
            if other.type is ObjectType.ASTEROID and other.active:
                reach = go.scale.x + other.scale.x
                if go.pos.distance_squared(other.pos) < reach * reach:
                    self.pool.release(go)
                    self.pool.release(other)
                    self.score += 2

    def _update_blackhole(self, hole: GameObject, dt: float) -> None:
        for other in self.pool:
            if not other.active or other.type is ObjectType.BLACKHOLE:
                continue
            dist_sq = other.pos.distance_squared(hole.pos)
            if dist_sq >= BLACKHOLE_RANGE_SQUARED:
                continue
            if dist_sq < BLACKHOLE_ABSORB_SQUARED:
                hole.mass += other.mass
                self.pool.release(other)
            else:
                direction = (hole.pos - other.pos).normalized()
                force = self.additional_force(other, hole)
                other.vel = other.vel + direction * (force / other.mass * dt * self.speed)

    def update(self, dt: float, controls: Optional[AsteroidControls] = None) -> None:
        """Advance the game by ``dt`` seconds under the given input."""
        controls = controls if controls is not None else AsteroidControls()
        self.elapsed_time += dt
        self._apply_controls(dt, controls)
        self._move_ship(dt)

        for go in self.pool:
            if not go.active:
                continue
            go.pos = go.pos + go.vel * (dt * self.speed)
            if go.type is ObjectType.ASTEROID:
                self._update_asteroid(go)
            elif go.type is ObjectType.BULLET:
                self._update_bullet(go)
            elif go.type is ObjectType.BLACKHOLE:
                self._update_blackhole(go, dt)