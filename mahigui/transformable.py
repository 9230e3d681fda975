"""Objects with a position, rotation, scale and origin."""

from __future__ import annotations

import math
from typing import Optional, Union

from mahigui.transform import Transform
from mahigui.vec2 import Vec2

_DEG_TO_RAD = 3.141592654 / 180.0

VecLike = Union[Vec2, tuple]


def _as_vec(value: VecLike) -> Vec2:
    x, y = value
    return Vec2(float(x), float(y))


def _pair(first, second: Optional[float]) -> Vec2:
    if second is None:
        return _as_vec(first)
    return Vec2(float(first), float(second))


class Transformable:
    """Holds translation, rotation (degrees), scale and a local origin.

    The combined transform and its inverse are computed lazily and cached
    until one of the components changes.
    """

    def __init__(self) -> None:
        self._origin = Vec2(0.0, 0.0)
        self._position = Vec2(0.0, 0.0)
        self._rotation = 0.0
        self._scale = Vec2(1.0, 1.0)
        self._transform: Optional[Transform] = None
        self._inverse: Optional[Transform] = None

    def _invalidate(self) -> None:
        self._transform = None
        self._inverse = None

    @property
    def pos(self) -> Vec2:
        """Position of the object."""
        return self._position

    @pos.setter
    def pos(self, value: VecLike) -> None:
        self._position = _as_vec(value)
        self._invalidate()

    @property
    def rotation(self) -> float:
        """Orientation in degrees, always within [0, 360)."""
        return self._rotation

    @rotation.setter
    def rotation(self, angle: float) -> None:
        wrapped = math.fmod(angle, 360.0)
        if wrapped < 0:
            wrapped += 360.0
        self._rotation = wrapped
        self._invalidate()

    @property
    def scale(self) -> Vec2:
        """Scale factors of the object."""
        return self._scale

    @scale.setter
    def scale(self, value: VecLike) -> None:
        self._scale = _as_vec(value)
        self._invalidate()

    @property
    def origin(self) -> Vec2:
        """Local origin of translation, rotation and scaling."""
        return self._origin

    @origin.setter
    def origin(self, value: VecLike) -> None:
        self._origin = _as_vec(value)
        self._invalidate()

    def move(self, offset_x, offset_y: Optional[float] = None) -> None:
        """Move by an offset given as two numbers or one vector."""
        self.pos = self._position + _pair(offset_x, offset_y)

    def rotate(self, angle: float) -> None:
        """Rotate by ``angle`` degrees."""
        self.rotation = self._rotation + angle

    def scale_by(self, factor_x, factor_y: Optional[float] = None) -> None:
        """Multiply the current scale by factors given as two numbers or one vector."""
        factor = _pair(factor_x, factor_y)
        self.scale = Vec2(self._scale.x * factor.x, self._scale.y * factor.y)

    def transform(self) -> Transform:
        """Return the combined transform of the object."""
        if self._transform is None:
            rad = -self._rotation * _DEG_TO_RAD
            cosine = math.cos(rad)
            sine = math.sin(rad)
            sxc = self._scale.x * cosine
            syc = self._scale.y * cosine
            sxs = self._scale.x * sine
            sys_ = self._scale.y * sine
            tx = -self._origin.x * sxc - self._origin.y * sys_ + self._position.x
            ty = self._origin.x * sxs - self._origin.y * syc + self._position.y
            self._transform = Transform(sxc, sys_, tx, -sxs, syc, ty, 0.0, 0.0, 1.0)
        return self._transform.copy()

    def inverse_transform(self) -> Transform:
        """Return the inverse of the combined transform."""
        if self._inverse is None:
            self._inverse = self.transform().inverse()
        return self._inverse.copy()