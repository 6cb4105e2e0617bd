"""Vertex attributes, lights, materials and matrix/position transforms."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Sequence

from pongphysics.vector import Vector3


@dataclass
class Position:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Color:
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0


@dataclass
class TexCoord:
    u: float = 0.0
    v: float = 0.0


@dataclass
class Vertex:
    pos: Position = field(default_factory=Position)
    color: Color = field(default_factory=Color)
    normal: Vector3 = field(default_factory=Vector3)
    tex_coord: TexCoord = field(default_factory=TexCoord)


class LightType(IntEnum):
    POINT = 0
    DIRECTIONAL = 1
    SPOT = 2


@dataclass
class Light:
    """A light source with attenuation and spot-cone parameters."""

    type: LightType = LightType.POINT
    position: Position = field(default_factory=Position)
    color: Color = field(default_factory=Color)
    power: float = 1.0
    k_c: float = 1.0
    k_l: float = 0.0
    k_q: float = 0.0
    spot_direction: Vector3 = field(default_factory=Vector3)
    cos_cutoff: float = 0.8
    cos_inner: float = 0.8
    exponent: float = 1.0


@dataclass
class Component:
    r: float = 0.1
    g: float = 0.1
    b: float = 0.1


@dataclass
class Material:
    """Surface reflectance coefficients."""

    k_ambient: Component = field(default_factory=lambda: Component(0.1, 0.1, 0.1))
    k_diffuse: Component = field(default_factory=lambda: Component(0.6, 0.6, 0.6))
    k_specular: Component = field(default_factory=lambda: Component(0.3, 0.3, 0.3))
    k_shininess: float = 5.0


def transform_position(matrix: Sequence[float], position: Position) -> Position:
    """Apply a 4x4 column-major matrix to a point (w = 1).

    ``matrix`` is a flat sequence of 16 numbers in column-major order.
    """
    if len(matrix) != 16:
        raise ValueError(f"expected 16 matrix entries, got {len(matrix)}")
    x, y, z = position.x, position.y, position.z
    result = [
        matrix[i] * x + matrix[4 + i] * y + matrix[8 + i] * z + matrix[12 + i]
        for i in range(3)
    ]
    return Position(*result)