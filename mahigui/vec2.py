"""Two-dimensional vectors, rectangles and planar geometry helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

_EPS = 1e-9


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __mul__(self, factor: float) -> "Vec2":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)

    def __rmul__(self, factor: float) -> "Vec2":
        return self.__mul__(factor)

    def __truediv__(self, divisor: float) -> "Vec2":
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Vec2(self.x / divisor, self.y / divisor)

    def __getitem__(self, index: int) -> float:
        if index in (0, -2):
            return self.x
        if index in (1, -1):
            return self.y
        raise IndexError("Vec2 index out of range")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0


# ---------------------------------------------------------------------------
# Vector algebra
# ---------------------------------------------------------------------------


def abs_vec(v: Vec2) -> Vec2:
    """Return the component-wise absolute value of a vector."""
    return Vec2(abs(v.x), abs(v.y))


def sq_len(v: Vec2) -> float:
    """Return the squared length of a vector."""
    return v.x * v.x + v.y * v.y


def magnitude(v: Vec2) -> float:
    """Return the length of a vector."""
    return math.sqrt(sq_len(v))


def unit(v: Vec2) -> Vec2:
    """Return the unit vector pointing along ``v``."""
    return v / magnitude(v)


def normal(v: Vec2) -> Vec2:
    """Return a vector perpendicular to ``v`` of the same length."""
    return Vec2(-v.y, v.x)


def dot(lhs: Vec2, rhs: Vec2) -> float:
    """Return the dot product of two vectors."""
    return lhs.x * rhs.x + lhs.y * rhs.y


def cross(lhs: Vec2, rhs: Vec2) -> float:
    """Return the scalar cross product of two vectors."""
    return lhs.x * rhs.y - lhs.y * rhs.x


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


def _orient(p: Vec2, q: Vec2, r: Vec2) -> float:
    return cross(q - p, r - p)


def parallel(a1: Vec2, a2: Vec2, b1: Vec2, b2: Vec2) -> bool:
    """Return True if lines A and B are parallel."""
    return abs(cross(a2 - a1, b2 - b1)) < _EPS


def perpendicular(a1: Vec2, a2: Vec2, b1: Vec2, b2: Vec2) -> bool:
    """Return True if lines A and B are perpendicular."""
    return abs(dot(a2 - a1, b2 - b1)) < _EPS


def inside_line(l1: Vec2, l2: Vec2, p: Vec2) -> bool:
    """Return True if ``p`` lies on segment l1-l2, endpoints included."""
    if abs(_orient(l1, l2, p)) > _EPS:
        return False
    return (
        min(l1.x, l2.x) - _EPS <= p.x <= max(l1.x, l2.x) + _EPS
        and min(l1.y, l2.y) - _EPS <= p.y <= max(l1.y, l2.y) + _EPS
    )


def intersect(a1: Vec2, a2: Vec2, b1: Vec2, b2: Vec2) -> bool:
    """Return True if the finite segments A and B intersect."""
    d1 = _orient(b1, b2, a1)
    d2 = _orient(b1, b2, a2)
    d3 = _orient(a1, a2, b1)
    d4 = _orient(a1, a2, b2)
    straddles_b = (d1 > _EPS and d2 < -_EPS) or (d1 < -_EPS and d2 > _EPS)
    straddles_a = (d3 > _EPS and d4 < -_EPS) or (d3 < -_EPS and d4 > _EPS)
    if straddles_a and straddles_b:
        return True
    return (
        inside_line(b1, b2, a1)
        or inside_line(b1, b2, a2)
        or inside_line(a1, a2, b1)
        or inside_line(a1, a2, b2)
    )


def intersection(a1: Vec2, a2: Vec2, b1: Vec2, b2: Vec2) -> Vec2:
    """Return the intersection of infinite lines A and B.

    Parallel lines give ``Vec2(inf, inf)``.
    """
    da = a2 - a1
    db = b2 - b1
    denom = cross(da, db)
    if abs(denom) < _EPS:
        return Vec2(math.inf, math.inf)
    t = cross(b1 - a1, db) / denom
    return a1 + da * t


def inside_triangle(a: Vec2, b: Vec2, c: Vec2, p: Vec2) -> bool:
    """Return True if ``p`` lies inside or on triangle ABC."""
    d1 = _orient(a, b, p)
    d2 = _orient(b, c, p)
    d3 = _orient(c, a, p)
    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0
    return not (has_neg and has_pos)


def inside_polygon(polygon: Sequence[Vec2], p: Vec2) -> bool:
    """Return True if ``p`` lies inside the polygon (even-odd rule)."""
    if not polygon:
        return False
    inside = False
    prev = polygon[-1]
    for cur in polygon:
        if (cur.y > p.y) != (prev.y > p.y):
            x_cross = (prev.x - cur.x) * (p.y - cur.y) / (prev.y - cur.y) + cur.x
            if p.x < x_cross:
                inside = not inside
        prev = cur
    return inside


def _cyclic_pairs(polygon: Sequence[Vec2]):
    points = list(polygon)
    return zip(points, points[1:] + points[:1])


def polygon_area(polygon: Sequence[Vec2]) -> float:
    """Return the (unsigned) area enclosed by the polygon's vertices."""
    return abs(sum(cross(a, b) for a, b in _cyclic_pairs(polygon))) / 2.0


def is_convex(polygon: Sequence[Vec2]) -> bool:
    """Return True if the simple polygon is convex."""
    points = list(polygon)
    if len(points) < 3:
        return False
    has_pos = has_neg = False
    for a, b, c in zip(points, points[1:] + points[:1], points[2:] + points[:2]):
        turn = cross(b - a, c - b)
        if turn > _EPS:
            has_pos = True
        elif turn < -_EPS:
            has_neg = True
        if has_pos and has_neg:
            return False
    return True


def angle(v: Vec2, other: Optional[Vec2] = None) -> float:
    """Return the direction of ``v``, or the unsigned angle between ``v`` and ``other``."""
    if other is None:
        return math.atan2(v.y, v.x)
    return math.atan2(abs(cross(v, other)), dot(v, other))


def winding(a: Vec2, b: Vec2, c: Optional[Vec2] = None) -> int:
    """Return the winding of two vectors, or of three consecutive points.

    The result is 1 for clockwise order in y-down screen coordinates,
    -1 for counter-clockwise and 0 when colinear.
    """
    value = cross(a, b) if c is None else cross(b - a, c - b)
    return (value > 0) - (value < 0)