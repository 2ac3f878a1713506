from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, NamedTuple, Tuple

from coherentnoise.core.exceptions import InvalidParameterError


@dataclass(frozen=True)
class Color:
    """RGBA color, one byte per channel."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return self.red, self.green, self.blue, self.alpha


class GradientPoint(NamedTuple):
    pos: float
    color: Color


def blend_channel(channel0: int, channel1: int, alpha: float) -> int:
    """Linear blend of two byte channels, rounded half up."""
    return int(math.floor((channel1 * alpha) + (channel0 * (1.0 - alpha)) + 0.5))


def linear_interp_color(color0: Color, color1: Color, alpha: float) -> Color:
    return Color(
        red=blend_channel(color0.red, color1.red, alpha),
        green=blend_channel(color0.green, color1.green, alpha),
        blue=blend_channel(color0.blue, color1.blue, alpha),
        alpha=blend_channel(color0.alpha, color1.alpha, alpha),
    )


class GradientColor:
    """
    Ordered table of (position, color) stops.

    ``get_color`` linearly interpolates between the two stops bracketing the
    position and clamps to the first/last stop outside the table range.
    """

    def __init__(self):
        self._points: List[GradientPoint] = []

    @property
    def gradient_points(self) -> Tuple[GradientPoint, ...]:
        return tuple(self._points)

    @property
    def gradient_point_count(self) -> int:
        return len(self._points)

    def add_gradient_point(self, gradient_pos: float, gradient_color: Color) -> None:
        insertion_pos = self._find_insertion_pos(float(gradient_pos))
        self._points.insert(insertion_pos, GradientPoint(float(gradient_pos), gradient_color))

    def clear(self) -> None:
        self._points = []

    def _find_insertion_pos(self, gradient_pos: float) -> int:
        insertion_pos = 0
        for point in self._points:
            if gradient_pos < point.pos:
                break
            if gradient_pos == point.pos:
                raise InvalidParameterError(f"Duplicate gradient position {gradient_pos}")
            insertion_pos += 1
        return insertion_pos

    def get_color(self, gradient_pos: float) -> Color:
        count = len(self._points)
        assert count >= 2, "gradient needs at least two points"

        index_pos = 0
        for point in self._points:
            if gradient_pos < point.pos:
                break
            index_pos += 1

        index0 = min(max(index_pos - 1, 0), count - 1)
        index1 = min(max(index_pos, 0), count - 1)

        if index0 == index1:
            return self._points[index1].color

        input0, color0 = self._points[index0]
        input1, color1 = self._points[index1]
        alpha = (gradient_pos - input0) / (input1 - input0)
        return linear_interp_color(color0, color1, alpha)
