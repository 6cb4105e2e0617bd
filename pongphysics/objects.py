"""Game objects and the pool that recycles them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, List, Optional

from pongphysics.vector import Vector3


class ObjectType(Enum):
    BALL = auto()
    WALL = auto()
    PILLAR = auto()
    ASTEROID = auto()
    SHIP = auto()
    BULLET = auto()
    BLACKHOLE = auto()


@dataclass(eq=False)
class GameObject:
    """A simulated body; compared by identity."""

    type: ObjectType = ObjectType.BALL
    pos: Vector3 = field(default_factory=Vector3)
    vel: Vector3 = field(default_factory=Vector3)
    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    normal: Vector3 = field(default_factory=lambda: Vector3(1.0, 0.0, 0.0))
    direction: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    color: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    active: bool = False
    visible: bool = True
    other_wall: Optional[GameObject] = None
    possession: int = 0
    mass: float = 1.0
    cor: float = 1.0
    cof_k: float = 0.0
    cof_r: float = 0.0
    angle: float = 0.0
    angular_velocity: float = 0.0
    moment_of_inertia: float = 1.0


class ObjectPool:
    """Hands out inactive objects, growing in fixed-size batches when empty."""

    def __init__(
        self,
        default_type: ObjectType = ObjectType.BALL,
        batch_size: int = 10,
        initial: int = 0,
    ) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.default_type = default_type
        self.batch_size = batch_size
        self.objects: List[GameObject] = [GameObject(default_type) for _ in range(initial)]
        self.active_count = 0

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[GameObject]:
        return iter(self.objects)

    def _activate(self, go: GameObject) -> GameObject:
        go.active = True
        go.visible = True
        go.other_wall = None
        self.active_count += 1
        return go

    def fetch(self) -> GameObject:
        """Activate and return the first inactive object, growing the pool if needed."""
        for go in self.objects:
            if not go.active:
                return self._activate(go)
        first_new = len(self.objects)
        self.objects.extend(GameObject(self.default_type) for _ in range(self.batch_size))
        return self._activate(self.objects[first_new])

    def release(self, go: GameObject) -> None:
        """Deactivate ``go``; releasing an inactive object does nothing."""
        if go.active:
            go.active = False
            self.active_count -= 1

    def release_all(self) -> None:
        for go in self.objects:
            self.release(go)

    def active_objects(self) -> List[GameObject]:
        return [go for go in self.objects if go.active]