"""RGBA and HSV colors and conversions between them."""

from __future__ import annotations

import colorsys
import random
from dataclasses import dataclass, replace
from typing import Optional, Union


@dataclass(frozen=True)
class Color:
    """An RGBA color with channels in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def __str__(self) -> str:
        return f"(R:{self.r:g},G:{self.g:g},B:{self.b:g},A:{self.a:g})"


@dataclass(frozen=True)
class Hsv:
    """A color in hue, saturation, value form with alpha, all in [0, 1]."""

    h: float = 0.0
    s: float = 0.0
    v: float = 0.0
    a: float = 1.0

    def __str__(self) -> str:
        return f"(H:{self.h:g},S:{self.s:g},V:{self.v:g},A:{self.a:g})"


def _parse_hex(text: str) -> Color:
    if text.startswith("#"):
        text = text[1:]
    if len(text) not in (6, 8):
        return Color(1.0, 1.0, 1.0, 1.0)
    try:
        channels = [int(text[i:i + 2], 16) / 255.0 for i in range(0, len(text), 2)]
    except ValueError:
        raise ValueError(f"invalid hex color: {text!r}") from None
    return Color(*channels)


def to_rgb(value: Union[Hsv, str]) -> Color:
    """Convert an HSV color or a hex string (RRGGBB or RRGGBBAA) to RGB.

    Hex strings of any other length give opaque white.
    """
    if isinstance(value, Hsv):
        r, g, b = colorsys.hsv_to_rgb(value.h, value.s, value.v)
        return Color(r, g, b)
    return _parse_hex(value)


def to_hsv(value: Union[Color, str]) -> Hsv:
    """Convert an RGB color or a hex string to HSV."""
    color = value if isinstance(value, Color) else to_rgb(value)
    h, s, v = colorsys.rgb_to_hsv(color.r, color.g, color.b)
    return Hsv(h, s, v)


def with_alpha(color: Color, a: float) -> Color:
    """Return a copy of ``color`` with a new alpha."""
    return replace(color, a=a)


def luminance(color: Color) -> float:
    """Return the perceived luminance of a color."""
    return 0.299 * color.r + 0.587 * color.g + 0.114 * color.b


def random_color(color1: Optional[Color] = None, color2: Optional[Color] = None) -> Color:
    """Return a random color.

    Without arguments the color is opaque with random RGB channels; with two
    colors every channel, alpha included, is drawn between theirs.
    """
    if color1 is None or color2 is None:
        return Color(random.uniform(0.0, 1.0), random.uniform(0.0, 1.0),
                     random.uniform(0.0, 1.0), 1.0)
    return Color(
        random.uniform(color1.r, color2.r),
        random.uniform(color1.g, color2.g),
        random.uniform(color1.b, color2.b),
        random.uniform(color1.a, color2.a),
    )