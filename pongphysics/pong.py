"""Two-player physics pong: paddles that slide and jump, balls that score on the floor."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple

from pongphysics.objects import GameObject, ObjectPool, ObjectType
from pongphysics.pong_physics import (
    Paddle,
    check_collision,
    collision_response,
    make_half_thin_wall,
    make_thin_wall,
)
from pongphysics.vector import Vector3

logger = logging.getLogger(__name__)

PADDLE_THICKNESS = 4.0
PADDLE_LENGTH = 20.0
TOP_BORDER_THICKNESS = 10.0
MIDDLE_WALL_THICKNESS = 6.0
MIDDLE_WALL_LENGTH = 20.0

PADDLE_SPEED = 40.0
JUMP_SPEED = 60.0
MAX_BALL_SPEED = 100.0
GRAVITY = -85.0
SUDDEN_DEATH_GRAVITY = -40.0
SPAWN_DELAY = 3.0
SUDDEN_DEATH_SCORE = 9
WINNING_SCORE = 10
SUDDEN_DEATH_BALLS = 10

BALL_RADIUS = 3.0
BALL_COR = 0.5
BALL_COF_K = 0.2
BALL_COF_R = 0.03

BUTTON_OFFSET_Y = -20.0
BUTTON_HALF_SIZE = 10.0
END_BUTTON_OFFSET_X = 15.0

PLAYER1_COLOR = Vector3(1.0, 0.0, 0.0)
PLAYER2_COLOR = Vector3(0.0, 1.0, 1.0)
ARENA_COLOR = Vector3(0.0, 1.0, 0.0)


class GameState(IntEnum):
    MAIN_MENU = 0
    PLAYING = 1
    PLAYER1_WIN = 2
    PLAYER2_WIN = 3
    TIE = 4


@dataclass
class PongControls:
    """Keys held during one frame."""

    p1_left: bool = False
    p1_right: bool = False
    p1_jump: bool = False
    p2_left: bool = False
    p2_right: bool = False
    p2_jump: bool = False


class PongGame:
    """Menus, rounds, scoring and the physics of a two-player pong match."""

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
        self.state = GameState.MAIN_MENU
        self.gravity = Vector3(0.0, GRAVITY, 0.0)

        self.player1_score = 0
        self.player2_score = 0
        self.elapsed_time = 0.0
        self.round_end_time = 0.0
        self.p1_turn = True
        self.balls_left = 0
        self.sudden_death = False

        self.top_wall: Optional[GameObject] = None
        self.paddle1: Optional[Paddle] = None
        self.paddle2: Optional[Paddle] = None
        self.p1_jumping = False
        self.p2_jumping = False

        self._menu_pressed = False
        self._play_armed = False
        self._end_pressed = False
        self._restart_armed = False
        self._home_armed = False

    @property
    def active_count(self) -> int:
        return self.pool.active_count

    @property
    def countdown(self) -> int:
        """Whole seconds left before the next round's balls drop."""
        return int(SPAWN_DELAY) - int(self.elapsed_time - self.round_end_time)

    def reset(self) -> None:
        """Clear the arena and start a fresh match."""
        self.pool.release_all()
        self.init_objects()
        self.elapsed_time = 0.0
        self.round_end_time = 0.0
        self.player1_score = 0
        self.player2_score = 0
        self.gravity = Vector3(0.0, GRAVITY, 0.0)
        self.p1_turn = self.rng.randint(0, 1) == 0
        self.balls_left = 0
        self.sudden_death = False
        self.p1_jumping = False
        self.p2_jumping = False

    def init_objects(self) -> None:
        """Build the top border, the middle wall and both paddles."""
        w, h = self.world_width, self.world_height
        wall = self.pool.fetch()
        wall.type = ObjectType.WALL
        wall.scale = Vector3(TOP_BORDER_THICKNESS, w, 1.0)
        wall.pos = Vector3(w / 2, h - TOP_BORDER_THICKNESS / 2, 0.0)
        wall.normal = Vector3(0.0, -1.0, 0.0)
        wall.vel = Vector3()
        wall.color = ARENA_COLOR.copy()
        wall.cor = 0.7
        wall.cof_k = 0.3
        wall.possession = 0
        self.top_wall = wall

        make_half_thin_wall(
            self.pool,
            MIDDLE_WALL_THICKNESS,
            MIDDLE_WALL_LENGTH,
            Vector3(1.0, 0.0, 0.0),
            Vector3(w / 2, MIDDLE_WALL_LENGTH / 2, 0.0),
            ARENA_COLOR,
            0.7,
            0.3,
        )
        self.paddle1 = make_thin_wall(
            self.pool,
            PADDLE_THICKNESS,
            PADDLE_LENGTH,
            1,
            Vector3(0.0, 1.0, 0.0),
            Vector3(w / 4, PADDLE_THICKNESS / 2, 0.0),
            PLAYER1_COLOR,
            0.1,
            0.9,
        )
        self.paddle2 = make_thin_wall(
            self.pool,
            PADDLE_THICKNESS,
            PADDLE_LENGTH,
            2,
            Vector3(0.0, 1.0, 0.0),
            Vector3(w / 4 * 3, PADDLE_THICKNESS / 2, 0.0),
            PLAYER2_COLOR,
            0.1,
            0.9,
        )

    # Menus

    def _in_button(self, pos: Tuple[float, float], offset_x: float) -> bool:
        cx = self.world_width / 2 + offset_x
        cy = self.world_height / 2 + BUTTON_OFFSET_Y
        x, y = pos
        return (
            cy - BUTTON_HALF_SIZE < y < cy + BUTTON_HALF_SIZE
            and cx - BUTTON_HALF_SIZE < x < cx + BUTTON_HALF_SIZE
        )

    def press(self, pos: Tuple[float, float]) -> None:
        """Left mouse button pressed at world position ``pos``."""
        if self.state is GameState.MAIN_MENU:
            if not self._menu_pressed:
                self._menu_pressed = True
                if self._in_button(pos, 0.0):
                    self._play_armed = True
        elif self.state >= GameState.PLAYER1_WIN:
            if not self._end_pressed:
                self._end_pressed = True
                if self._in_button(pos, -END_BUTTON_OFFSET_X):
                    self._restart_armed = True
                elif self._in_button(pos, END_BUTTON_OFFSET_X):
                    self._home_armed = True

    def release(self, pos: Tuple[float, float]) -> None:
        """Left mouse button released; a button fires if pressed and released on it."""
        if self.state is GameState.MAIN_MENU:
            if self._menu_pressed:
                self._menu_pressed = False
                if self._play_armed and self._in_button(pos, 0.0):
                    self.reset()
                    self.state = GameState.PLAYING
                self._play_armed = False
        elif self.state >= GameState.PLAYER1_WIN:
            if self._end_pressed:
                self._end_pressed = False
                if self._restart_armed:
                    if self._in_button(pos, -END_BUTTON_OFFSET_X):
                        self.state = GameState.PLAYING
                        self.reset()
                elif self._home_armed:
                    if self._in_button(pos, END_BUTTON_OFFSET_X):
                        self.state = GameState.MAIN_MENU
                self._restart_armed = False
                self._home_armed = False

    # Play

    def _spawn_ball(self, x: float, y: float, possession: int, color: Vector3) -> GameObject:
        go = self.pool.fetch()
        go.type = ObjectType.BALL
        go.pos = Vector3(x, y, 0.0)
        go.possession = possession
        go.color = color.copy()
        go.vel = Vector3()
        go.scale = Vector3(BALL_RADIUS, BALL_RADIUS, 1.0)
        go.angle = 0.0
        go.mass = 1.0
        go.moment_of_inertia = go.mass * go.scale.x * go.scale.x
        go.angular_velocity = 0.0
        go.cor = BALL_COR
        go.cof_k = BALL_COF_K
        go.cof_r = BALL_COF_R
        self.balls_left += 1
        return go

    def _spawn_round(self) -> List[GameObject]:
        w, h = self.world_width, self.world_height
        if not self.sudden_death:
            if self.p1_turn:
                ball = self._spawn_ball(w / 4, h / 4 * 3, 1, PLAYER1_COLOR)
            else:
                ball = self._spawn_ball(w / 4 * 3, h / 4 * 3, 2, PLAYER2_COLOR)
            self.p1_turn = not self.p1_turn
            return [ball]

        diameter = BALL_RADIUS * 2
        spacing = w * 0.05
        total_width = diameter * SUDDEN_DEATH_BALLS + spacing * (SUDDEN_DEATH_BALLS - 1)
        balls = []
        for i in range(SUDDEN_DEATH_BALLS):
            x = (w - total_width) / 2 + BALL_RADIUS + (diameter + spacing) * i
            if x < w / 2:
                balls.append(self._spawn_ball(x, h / 4 * 3, 1, PLAYER1_COLOR))
            else:
                balls.append(self._spawn_ball(x, h / 4 * 3, 2, PLAYER2_COLOR))
        return balls

    def _drive_paddle(
        self,
        paddle: Paddle,
        sign: int,
        left: bool,
        right: bool,
        prefer_left: bool,
        min_x: float,
        max_x: float,
        jump: bool,
        jumping: bool,
        dt: float,
    ) -> bool:
        """Move one paddle and keep it in its half; returns whether it is still airborne.

        ``sign`` +1 steers the paddle by its second pillar, -1 by its first.
        """
        if sign > 0:
            anchor, other = paddle.pillar2, paddle.pillar1
        else:
            anchor, other = paddle.pillar1, paddle.pillar2
        step = dt * self.speed

        can_left = left and not anchor.pos.x <= min_x
        can_right = right and not anchor.pos.x >= max_x
        if prefer_left:
            direction = -1 if can_left else (1 if can_right else 0)
        else:
            direction = 1 if can_right else (-1 if can_left else 0)
        for part in paddle:
            part.vel.x = PADDLE_SPEED * direction

        if jump and not jumping:
            for part in paddle:
                part.vel.y = JUMP_SPEED
            jumping = True
        if jumping:
            for part in paddle:
                part.vel = part.vel + self.gravity * step

        for part in paddle:
            part.pos = part.pos + part.vel * step

        tangent = Vector3(-paddle.wall.normal.y, paddle.wall.normal.x, 0.0)
        offsets = (
            (paddle.wall, sign * PADDLE_LENGTH / 2),
            (other, sign * PADDLE_LENGTH),
            (anchor, 0.0),
        )
        if anchor.pos.x < min_x:
            for part, offset in offsets:
                part.pos.x = min_x + offset * tangent.x
        elif anchor.pos.x > max_x:
            for part, offset in offsets:
                part.pos.x = max_x + offset * tangent.x
        floor = PADDLE_THICKNESS / 2
        if anchor.pos.y < floor:
            for part, offset in offsets:
                part.pos.y = floor + offset * tangent.y
                part.vel.y = 0.0
            jumping = False
        return jumping

    def _ball_lost(self) -> None:
        self.balls_left -= 1
        if self.balls_left <= 0:
            self.round_end_time = self.elapsed_time

    def _handle_bounds(self, go: GameObject) -> bool:
        """Score and remove a ball that has left the arena; True if it was removed."""
        w, h = self.world_width, self.world_height
        if go.pos.y < -go.scale.y:
            if go.pos.x < w / 2:
                self.player2_score += 1
                self._ball_lost()
            elif go.pos.x > w / 2:
                self.player1_score += 1
                self._ball_lost()
            self.pool.release(go)
            return True
        if go.pos.x < -go.scale.x or go.pos.x > w + go.scale.x:
            if go.possession == 1:
                self.player2_score += 1
            elif go.possession == 2:
                self.player1_score += 1
            else:
                logger.warning("ball left the arena with no possession")
            self._ball_lost()
            self.pool.release(go)
            return True
        if go.pos.y > h + go.scale.y:
            logger.warning("ball went out past the top border")
            self._ball_lost()
            self.pool.release(go)
            return True
        return False

    def _step_physics(self, dt: float) -> None:
        step = dt * self.speed
        objects = self.pool.objects
        for i, go in enumerate(objects):
            if not go.active:
                continue
            if go.type is ObjectType.BALL:
                go.vel = go.vel + self.gravity * step
                go.angle += math.degrees(go.angular_velocity * step)
                if go.vel.length_squared() > MAX_BALL_SPEED * MAX_BALL_SPEED:
                    go.vel = go.vel.normalized() * MAX_BALL_SPEED
                go.pos = go.pos + go.vel * step
                if self._handle_bounds(go):
                    continue

            for go2 in objects[i + 1:]:
                if not go2.active:
                    continue
                actor, actee = (go, go2) if go.type is ObjectType.BALL else (go2, go)
                if check_collision(actor, actee):
                    collision_response(actor, actee, dt, self.gravity, self.speed)

    def _check_match_end(self) -> None:
        if self.player1_score == SUDDEN_DEATH_SCORE and self.player2_score == SUDDEN_DEATH_SCORE:
            self.sudden_death = True
            self.gravity = Vector3(0.0, SUDDEN_DEATH_GRAVITY, 0.0)
        if self.player1_score >= WINNING_SCORE or self.player2_score >= WINNING_SCORE:
            if self.player1_score > self.player2_score:
                self.state = GameState.PLAYER1_WIN
            elif self.player1_score < self.player2_score:
                self.state = GameState.PLAYER2_WIN
            else:
                self.state = GameState.TIE

    def update(self, dt: float, controls: Optional[PongControls] = None) -> None:
        """Advance a match in progress by ``dt`` seconds; menus do nothing here."""
        if self.state is not GameState.PLAYING:
            return
        if self.paddle1 is None or self.paddle2 is None:
            raise RuntimeError("the arena has not been built; call reset() first")
        controls = controls if controls is not None else PongControls()
        self.elapsed_time += dt

        if self.elapsed_time - self.round_end_time >= SPAWN_DELAY and self.balls_left == 0:
            self._spawn_round()

        half = self.world_width / 2
        edge = PADDLE_THICKNESS / 2
        gap = MIDDLE_WALL_THICKNESS / 2
        self.p1_jumping = self._drive_paddle(
            self.paddle1,
            1,
            controls.p1_left,
            controls.p1_right,
            True,
            edge,
            half - gap - edge,
            controls.p1_jump,
            self.p1_jumping,
            dt,
        )
        self.p2_jumping = self._drive_paddle(
            self.paddle2,
            -1,
            controls.p2_left,
            controls.p2_right,
            False,
            half + gap + edge,
            self.world_width - edge,
            controls.p2_jump,
            self.p2_jumping,
            dt,
        )

        self._step_physics(dt)
        self._check_match_end()