"""Polygonal shapes with rounded corners, holes, offsetting and clipping."""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from shapely.geometry import Polygon
from shapely.validation import make_valid

from mahigui.transform import Transform
from mahigui.vec2 import (
    Rect,
    Vec2,
    dot,
    inside_polygon,
    intersection,
    magnitude,
    normal,
    polygon_area,
    unit,
)
from mahigui.vec2 import is_convex as _is_convex_polygon

_PRECISION = 1000.0
_DEFAULT_SMOOTHNESS = 10


class QueryMode(Enum):
    """Whether a query uses the control points or the rounded vertices."""

    POINTS = "points"
    VERTICES = "vertices"


class OffsetType(Enum):
    """Corner treatment used when offsetting a shape."""

    MITER = "mitre"
    ROUND = "round"
    SQUARE = "bevel"


class ClipType(Enum):
    """Boolean operation applied by :func:`clip_shapes`."""

    INTERSECTION = "intersection"
    UNION = "union"
    DIFFERENCE = "difference"
    EXCLUSION = "exclusion"


def _as_vec(value) -> Vec2:
    x, y = value
    return Vec2(float(x), float(y))


def _pair(first, second: Optional[float]) -> Vec2:
    if second is None:
        return _as_vec(first)
    return Vec2(float(first), float(second))


def _linspace(start: float, stop: float, count: int) -> List[float]:
    if count == 1:
        return [start]
    step = (stop - start) / (count - 1)
    return [start + step * k for k in range(count)]


def _wrap_to_2pi(value: float) -> float:
    wrapped = math.fmod(value, 2.0 * math.pi)
    if wrapped < 0:
        wrapped += 2.0 * math.pi
    return wrapped


def _bounds_of(points: Sequence[Vec2]) -> Rect:
    if not points:
        return Rect()
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    left, top = min(xs), min(ys)
    return Rect(left, top, max(xs) - left, max(ys) - top)


class Shape:
    """A closed polygon whose corners may be rounded and which may hold holes."""

    def __init__(self, point_count: int = 0) -> None:
        self._points: List[Vec2] = []
        self._radii: List[float] = []
        self._smoothness: List[int] = []
        self._holes: List[Shape] = []
        self._vertices: Optional[List[Vec2]] = None
        self.set_point_count(point_count)

    # -- points --------------------------------------------------------------

    def _invalidate(self) -> None:
        self._vertices = None

    def set_point_count(self, count: int) -> None:
        """Resize the point list, padding with zero points and sharp corners."""
        if count < 0:
            raise ValueError("point count cannot be negative")
        extra = count - len(self._points)
        if extra >= 0:
            self._points.extend(Vec2() for _ in range(extra))
            self._radii.extend(0.0 for _ in range(extra))
            self._smoothness.extend(0 for _ in range(extra))
        else:
            del self._points[count:]
            del self._radii[count:]
            del self._smoothness[count:]
        self._invalidate()

    @property
    def point_count(self) -> int:
        """Number of control points."""
        return len(self._points)

    @property
    def points(self) -> Tuple[Vec2, ...]:
        """The control points of the shape."""
        return tuple(self._points)

    @points.setter
    def points(self, values: Iterable) -> None:
        new_points = [_as_vec(p) for p in values]
        self.set_point_count(len(new_points))
        self._points = new_points
        self._invalidate()

    def point(self, index: int) -> Vec2:
        """Return the control point at ``index``."""
        return self._points[index]

    def set_point(self, index: int, point) -> None:
        """Replace the control point at ``index``."""
        self._points[index] = _as_vec(point)
        self._invalidate()

    def append(self, point) -> None:
        """Add a control point with a sharp corner at the end."""
        self._points.append(_as_vec(point))
        self._radii.append(0.0)
        self._smoothness.append(0)
        self._invalidate()

    # -- transformations -----------------------------------------------------

    def move(self, offset_x, offset_y: Optional[float] = None) -> None:
        """Translate the shape by an offset given as two numbers or a vector."""
        offset = _pair(offset_x, offset_y)
        self.transform(Transform().translate(offset.x, offset.y))

    def scale(self, factor_x, factor_y: Optional[float] = None) -> None:
        """Scale the shape about the origin."""
        factor = _pair(factor_x, factor_y)
        self.transform(Transform().scale(factor.x, factor.y))

    def rotate(self, angle: float, center=None) -> None:
        """Rotate the shape by ``angle`` degrees, optionally about ``center``."""
        pivot = None if center is None else _as_vec(center)
        self.transform(Transform().rotate(angle, pivot))

    def transform(self, matrix: Transform) -> None:
        """Apply a transform to all points and holes."""
        self._points = [matrix.transform_point(p) for p in self._points]
        for hole in self._holes:
            hole.transform(matrix)
        self._invalidate()

    # -- corner radii --------------------------------------------------------

    def set_radius(self, index: int, radius: float,
                   smoothness: int = _DEFAULT_SMOOTHNESS) -> None:
        """Round the corner at ``index``; negative radii are ignored."""
        if radius >= 0.0:
            self._radii[index] = float(radius)
            self._smoothness[index] = int(smoothness)
            self._invalidate()

    def radius(self, index: int) -> float:
        """Return the corner radius at ``index``."""
        return self._radii[index]

    def set_radii(self, radius: float, smoothness: int = _DEFAULT_SMOOTHNESS) -> None:
        """Round every corner; negative radii are ignored."""
        if radius >= 0.0:
            count = len(self._points)
            self._radii = [float(radius)] * count
            self._smoothness = [int(smoothness)] * count
            self._invalidate()

    @property
    def radii(self) -> Tuple[float, ...]:
        """Corner radii, one per point."""
        return tuple(self._radii)

    @radii.setter
    def radii(self, values: Iterable[float]) -> None:
        new_radii = [float(r) for r in values]
        if len(new_radii) != len(self._radii):
            raise ValueError("number of radii must match number of points")
        self._radii = new_radii
        self._invalidate()

    def apply_radii(self) -> None:
        """Replace the points by the rounded vertices and clear all radii."""
        vertices = self._ensure_vertices()
        self.points = vertices
        self.set_radii(0.0)

    # -- vertices ------------------------------------------------------------

    def _ensure_vertices(self) -> List[Vec2]:
        if self._vertices is None:
            self._vertices = self._compute_vertices()
        return self._vertices

    def _compute_vertices(self) -> List[Vec2]:
        points = self._points
        count = len(points)
        vertices: List[Vec2] = []
        for i, b in enumerate(points):
            r = self._radii[i]
            smooth = self._smoothness[i]
            if not (r > 0.0 and smooth > 1):
                vertices.append(b)
                continue
            a = points[i - 1]
            c = points[(i + 1) % count]
            v1 = b - a
            v2 = b - c
            if r >= magnitude(v1) or r >= magnitude(v2):
                return []
            n1 = normal(unit(v1))
            n2 = normal(unit(v2))
            if dot(n1, -v2) < 0.0:
                n1 = -n1
            if dot(n2, -v1) < 0.0:
                n2 = -n2
            center = intersection(a + n1 * r, b + n1 * r, c + n2 * r, b + n2 * r)
            t1 = center - n1 * r
            t2 = center - n2 * r
            angle1 = math.atan2(t1.y - center.y, t1.x - center.x)
            angle2 = math.atan2(t2.y - center.y, t2.x - center.x)
            if abs(angle1 - angle2) < math.pi:
                angles = _linspace(angle1, angle2, smooth)
            else:
                angles = _linspace(_wrap_to_2pi(angle1), _wrap_to_2pi(angle2), smooth)
            vertices.extend(
                Vec2(r * math.cos(t) + center.x, r * math.sin(t) + center.y)
                for t in angles
            )
        return vertices

    @property
    def vertices(self) -> Tuple[Vec2, ...]:
        """The outline after rounding; empty if a radius does not fit."""
        return tuple(self._ensure_vertices())

    @property
    def vertex_count(self) -> int:
        """Number of vertices after rounding."""
        return len(self._ensure_vertices())

    # -- holes ---------------------------------------------------------------

    def _clone(self) -> "Shape":
        duplicate = Shape()
        duplicate._points = list(self._points)
        duplicate._radii = list(self._radii)
        duplicate._smoothness = list(self._smoothness)
        duplicate._holes = [h._clone() for h in self._holes]
        return duplicate

    def add_hole(self, hole: "Shape") -> None:
        """Add a copy of ``hole`` to the shape."""
        self._holes.append(hole._clone())
        self._invalidate()

    @property
    def holes(self) -> Tuple["Shape", ...]:
        """The holes of the shape."""
        return tuple(self._holes)

    # -- queries -------------------------------------------------------------

    def _outline(self, mode: QueryMode) -> Sequence[Vec2]:
        if mode is QueryMode.POINTS:
            return self._points
        return self._ensure_vertices()

    def bounds(self, mode: QueryMode = QueryMode.VERTICES) -> Rect:
        """Return the bounding rectangle of the points or vertices."""
        return _bounds_of(self._outline(mode))

    def contains(self, point, mode: QueryMode = QueryMode.VERTICES) -> bool:
        """Return True if ``point`` is inside the shape and outside its holes."""
        p = _as_vec(point)
        if any(hole.contains(p, mode) for hole in self._holes):
            return False
        return inside_polygon(self._outline(mode), p)

    def area(self, mode: QueryMode = QueryMode.VERTICES) -> float:
        """Return the enclosed area minus the area of the holes."""
        total = polygon_area(self._outline(mode))
        return total - sum(hole.area(mode) for hole in self._holes)

    def is_convex(self) -> bool:
        """Return True if the control points form a convex polygon."""
        return _is_convex_polygon(self._points)

    def __repr__(self) -> str:
        return f"Shape(points={self._points!r}, holes={len(self._holes)})"


# ---------------------------------------------------------------------------
# Offsetting and clipping
# ---------------------------------------------------------------------------


def _to_grid(points: Sequence[Vec2]) -> List[Tuple[int, int]]:
    return [(int(p.x * _PRECISION), int(p.y * _PRECISION)) for p in points]


def _from_grid(coords: Iterable) -> List[Vec2]:
    ring = [(round(x), round(y)) for x, y in coords]
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring.pop()
    return [Vec2(x / _PRECISION, y / _PRECISION) for x, y in ring]


def _polygon(points: Sequence[Vec2]):
    grid = _to_grid(points)
    if len(grid) < 3:
        return None
    poly = Polygon(grid)
    if not poly.is_valid:
        poly = make_valid(poly)
    if poly.is_empty:
        return None
    return poly


def _polygons(geometry) -> Iterator[Polygon]:
    if geometry is None or geometry.is_empty:
        return
    if isinstance(geometry, Polygon):
        yield geometry
    elif hasattr(geometry, "geoms"):
        for part in geometry.geoms:
            yield from _polygons(part)


def _offset_outline(points: Sequence[Vec2], distance: float,
                    kind: OffsetType) -> Optional[List[Vec2]]:
    poly = _polygon(points)
    if poly is None:
        return None
    grown = poly.buffer(distance * _PRECISION, join_style=kind.value, mitre_limit=2.0)
    for part in _polygons(grown):
        return _from_grid(part.exterior.coords)
    return None


def offset_shape(shape: Shape, offset: float,
                 kind: OffsetType = OffsetType.MITER) -> Shape:
    """Return ``shape`` grown by ``offset``; its holes shrink by the same amount."""
    result = Shape()
    outline = _offset_outline(shape.vertices, offset, kind)
    if outline:
        result.points = outline
    for hole in shape.holes:
        hole_outline = _offset_outline(hole.vertices, -offset, kind)
        if hole_outline:
            new_hole = Shape()
            new_hole.points = hole_outline
            result.add_hole(new_hole)
    return result


def _even_odd(shape: Shape):
    region = None
    for outline in [shape.vertices] + [h.vertices for h in shape.holes]:
        poly = _polygon(outline)
        if poly is None:
            continue
        region = poly if region is None else region.symmetric_difference(poly)
    return region if region is not None else Polygon()


def clip_shapes(subject: Shape, clip: Shape,
                kind: ClipType = ClipType.INTERSECTION) -> List[Shape]:
    """Apply a boolean operation to two shapes (even-odd fill) and return the pieces."""
    a = _even_odd(subject)
    b = _even_odd(clip)
    if kind is ClipType.INTERSECTION:
        combined = a.intersection(b)
    elif kind is ClipType.UNION:
        combined = a.union(b)
    elif kind is ClipType.DIFFERENCE:
        combined = a.difference(b)
    else:
        combined = a.symmetric_difference(b)
    shapes = []
    for part in _polygons(combined):
        piece = Shape()
        piece.points = _from_grid(part.exterior.coords)
        for interior in part.interiors:
            hole = Shape()
            hole.points = _from_grid(interior.coords)
            piece.add_hole(hole)
        shapes.append(piece)
    return shapes