# mahigui

Building blocks for 2D graphics programs: vectors and planar geometry,
affine transforms, polygon shapes with rounded corners and holes, colors,
keyframe sequences, and a few desktop helpers.

## Modules

- `mahigui.vec2`: the immutable `Vec2` vector (with `+`, `-`, unary `-`,
  `*` and `/` by a number, indexing and unpacking) and the `Rect`
  rectangle (`left`, `top`, `width`, `height`). Vector algebra: `abs_vec`,
  `sq_len`, `magnitude`, `unit`, `normal`, `dot`, `cross`. Geometry:
  `parallel`, `perpendicular`, `intersect` (finite segments),
  `intersection` (infinite lines, `Vec2(inf, inf)` when parallel),
  `inside_line`, `inside_triangle`, `inside_polygon` (even-odd rule),
  `polygon_area`, `is_convex`, `angle` and `winding`.
- `mahigui.transform`: `Transform`, a 3x3 affine matrix kept in a 4x4
  column-major layout (`matrix()` returns its 16 values). `translate`,
  `rotate` (degrees, optionally about a center) and `scale` (optionally
  about a center) combine in place and return the transform, so calls
  chain. `inverse()` returns the identity for a singular matrix.
  `transform_point`, `transform_rect` (bounding box of the mapped corners),
  `combine`, `copy`, `*` with another transform or a `Vec2`, `*=` and `==`.
- `mahigui.transformable`: `Transformable`, with `pos`, `rotation`
  (degrees, wrapped into `[0, 360)`), `scale` and `origin` properties,
  `move`, `rotate` and `scale_by`, and a lazily cached `transform()` and
  `inverse_transform()`.
- `mahigui.sequence`: `Sequence`, keyframes on `[0, 1]` set and read with
  `seq[t]`, interpolated with `seq(t)` through a tween function (`linear`
  by default). Interpolating needs keys at 0 and 1; times outside
  `[0, 1]` raise `ValueError`. `keys()` returns the stops and values in
  order.
- `mahigui.color`: `Color` (RGBA) and `Hsv`, with `to_rgb` (from `Hsv` or
  a `RRGGBB` / `RRGGBBAA` hex string, optionally with `#`; other lengths
  give opaque white), `to_hsv`, `with_alpha`, `luminance` and
  `random_color`.
- `mahigui.shape`: `Shape`, a closed polygon of control points whose
  corners can be rounded (`set_radius`, `set_radii`, `apply_radii`) and
  which can hold holes (`add_hole`). `vertices` is the rounded outline
  (empty if a radius does not fit its corner). Queries `bounds`,
  `contains` and `area` work on points or vertices (`QueryMode`).
  `offset_shape` grows a shape and shrinks its holes (`OffsetType`), and
  `clip_shapes` applies intersection, union, difference or exclusion
  (`ClipType`) with the even-odd fill rule; both are built on shapely and
  work on a grid of 0.001 units.
- `mahigui.native`: `save_dialog`, `open_dialog`, `open_dialog_multiple`
  and `pick_dialog`, which use zenity when it is installed and tkinter
  otherwise, return `None` when cancelled and raise `DialogError` on
  failure; `DialogFilter("Audio Files", "wav,mp3")` restricts file types.
  `sys_dir(SysDir.…)` returns a directory from its environment variable,
  or a sensible fallback. `open_folder` and `open_file` open an existing
  folder or file with the desktop's default application and return
  `False` when the path is not one; `open_url` and `open_email` go
  through the default browser or mail client.

## Example

```python
from mahigui.vec2 import Vec2
from mahigui.transform import Transform
from mahigui.shape import Shape, ClipType, clip_shapes

square = Shape(4)
for i, p in enumerate([Vec2(0, 0), Vec2(10, 0), Vec2(10, 10), Vec2(0, 10)]):
    square.set_point(i, p)
square.set_radii(2.0, 8)        # round every corner with 8 vertices

t = Transform.identity().translate(5, 5)
other = Shape()
other.points = [t.transform_point(p) for p in square.points]

pieces = clip_shapes(square, other, ClipType.INTERSECTION)
print(pieces[0].area())
```

## What it does not do

There is no window, render loop, immediate-mode widgets or drawing
backend here: the package computes geometry, colors and interpolated
values, and leaves putting them on screen to whatever graphics library
the program uses.

## Requirements and tests

Python 3.10 or later and shapely. The `test` extra adds pytest, which
runs the suite in `tests/`.