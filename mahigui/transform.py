"""A 3x3 affine transformation matrix stored in 4x4 OpenGL layout."""

from __future__ import annotations

import math
from typing import Optional

from mahigui.vec2 import Rect, Vec2

_DEG_TO_RAD = 3.141592654 / 180.0

# positions of the 3x3 elements inside the 4x4 column-major matrix
_SIGNIFICANT = (0, 1, 3, 4, 5, 7, 12, 13, 15)


class Transform:
    """A 2D affine transformation."""

    def __init__(
        self,
        a00: float = 1.0,
        a01: float = 0.0,
        a02: float = 0.0,
        a10: float = 0.0,
        a11: float = 1.0,
        a12: float = 0.0,
        a20: float = 0.0,
        a21: float = 0.0,
        a22: float = 1.0,
    ) -> None:
        self._m = [
            a00, a10, 0.0, a20,
            a01, a11, 0.0, a21,
            0.0, 0.0, 1.0, 0.0,
            a02, a12, 0.0, a22,
        ]

    @classmethod
    def identity(cls) -> "Transform":
        """Return a new identity transform."""
        return cls()

    def matrix(self) -> tuple:
        """Return the transform as a 16-element column-major 4x4 matrix."""
        return tuple(self._m)

    def inverse(self) -> "Transform":
        """Return the inverse transform, or the identity if it is singular."""
        m = self._m
        det = (
            m[0] * (m[15] * m[5] - m[7] * m[13])
            - m[1] * (m[15] * m[4] - m[7] * m[12])
            + m[3] * (m[13] * m[4] - m[5] * m[12])
        )
        if det == 0.0:
            return Transform()
        return Transform(
            (m[15] * m[5] - m[7] * m[13]) / det,
            -(m[15] * m[4] - m[7] * m[12]) / det,
            (m[13] * m[4] - m[5] * m[12]) / det,
            -(m[15] * m[1] - m[3] * m[13]) / det,
            (m[15] * m[0] - m[3] * m[12]) / det,
            -(m[13] * m[0] - m[1] * m[12]) / det,
            (m[7] * m[1] - m[3] * m[5]) / det,
            -(m[7] * m[0] - m[3] * m[4]) / det,
            (m[5] * m[0] - m[1] * m[4]) / det,
        )

    def transform_point(self, point) -> Vec2:
        """Apply the transform to a point."""
        x, y = point
        m = self._m
        return Vec2(m[0] * x + m[4] * y + m[12], m[1] * x + m[5] * y + m[13])

    def transform_rect(self, rect: Rect) -> Rect:
        """Return the bounding rectangle of a transformed rectangle."""
        right = rect.left + rect.width
        bottom = rect.top + rect.height
        corners = [
            self.transform_point((rect.left, rect.top)),
            self.transform_point((rect.left, bottom)),
            self.transform_point((right, rect.top)),
            self.transform_point((right, bottom)),
        ]
        xs = [p.x for p in corners]
        ys = [p.y for p in corners]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def combine(self, other: "Transform") -> "Transform":
        """Combine this transform with another in place and return self."""
        a = self._m
        b = other._m
        combined = Transform(
            a[0] * b[0] + a[4] * b[1] + a[12] * b[3],
            a[0] * b[4] + a[4] * b[5] + a[12] * b[7],
            a[0] * b[12] + a[4] * b[13] + a[12] * b[15],
            a[1] * b[0] + a[5] * b[1] + a[13] * b[3],
            a[1] * b[4] + a[5] * b[5] + a[13] * b[7],
            a[1] * b[12] + a[5] * b[13] + a[13] * b[15],
            a[3] * b[0] + a[7] * b[1] + a[15] * b[3],
            a[3] * b[4] + a[7] * b[5] + a[15] * b[7],
            a[3] * b[12] + a[7] * b[13] + a[15] * b[15],
        )
        self._m = combined._m
        return self

    def translate(self, x: float, y: float) -> "Transform":
        """Combine with a translation in place and return self."""
        return self.combine(Transform(1, 0, x, 0, 1, y, 0, 0, 1))

    def rotate(self, angle: float, center: Optional[Vec2] = None) -> "Transform":
        """Combine with a rotation in degrees, optionally about a center."""
        rad = angle * _DEG_TO_RAD
        cos = math.cos(rad)
        sin = math.sin(rad)
        if center is None:
            return self.combine(Transform(cos, -sin, 0, sin, cos, 0, 0, 0, 1))
        cx, cy = center
        return self.combine(
            Transform(
                cos, -sin, cx * (1 - cos) + cy * sin,
                sin, cos, cy * (1 - cos) - cx * sin,
                0, 0, 1,
            )
        )

    def scale(
        self, scale_x: float, scale_y: float, center: Optional[Vec2] = None
    ) -> "Transform":
        """Combine with a scaling, optionally about a center."""
        if center is None:
            return self.combine(Transform(scale_x, 0, 0, 0, scale_y, 0, 0, 0, 1))
        cx, cy = center
        return self.combine(
            Transform(
                scale_x, 0, cx * (1 - scale_x),
                0, scale_y, cy * (1 - scale_y),
                0, 0, 1,
            )
        )

    def copy(self) -> "Transform":
        """Return an independent copy of this transform."""
        duplicate = Transform()
        duplicate._m = list(self._m)
        return duplicate

    def __mul__(self, other):
        if isinstance(other, Transform):
            return self.copy().combine(other)
        if isinstance(other, Vec2):
            return self.transform_point(other)
        return NotImplemented

    def __imul__(self, other):
        if not isinstance(other, Transform):
            return NotImplemented
        return self.combine(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return all(self._m[i] == other._m[i] for i in _SIGNIFICANT)

    __hash__ = None

    def __repr__(self) -> str:
        m = self._m
        return (
            f"Transform({m[0]}, {m[4]}, {m[12]}, "
            f"{m[1]}, {m[5]}, {m[13]}, {m[3]}, {m[7]}, {m[15]})"
        )