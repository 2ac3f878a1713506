from __future__ import annotations

from typing import Optional

from coherentnoise.core.exceptions import InvalidParameterError

from .buffer import Image, NoiseMap
from .color import Color, GradientColor

_TERRAIN_GRADIENT = (
    (-1.00, Color(0, 0, 128, 255)),
    (-0.20, Color(32, 64, 128, 255)),
    (-0.04, Color(64, 96, 192, 255)),
    (-0.02, Color(192, 192, 128, 255)),
    (0.00, Color(0, 192, 0, 255)),
    (0.25, Color(192, 192, 0, 255)),
    (0.50, Color(160, 96, 64, 255)),
    (0.75, Color(128, 255, 255, 255)),
    (1.00, Color(255, 255, 255, 255)),
)


class ImageRenderer:
    """Colorizes a NoiseMap into an Image through a GradientColor table."""

    def __init__(self):
        self._gradient = GradientColor()
        self._source_noise_map: Optional[NoiseMap] = None
        self._dest_image: Optional[Image] = None

    @property
    def gradient(self) -> GradientColor:
        return self._gradient

    def add_gradient_point(self, gradient_pos: float, gradient_color: Color) -> None:
        self._gradient.add_gradient_point(gradient_pos, gradient_color)

    def clear_gradient(self) -> None:
        self._gradient.clear()

    def build_grayscale_gradient(self) -> None:
        self.clear_gradient()
        self._gradient.add_gradient_point(-1.0, Color(0, 0, 0, 255))
        self._gradient.add_gradient_point(1.0, Color(255, 255, 255, 255))

    def build_terrain_gradient(self) -> None:
        self.clear_gradient()
        for pos, color in _TERRAIN_GRADIENT:
            self._gradient.add_gradient_point(pos, color)

    def set_source_noise_map(self, source_noise_map: NoiseMap) -> None:
        self._source_noise_map = source_noise_map

    def set_dest_image(self, dest_image: Image) -> None:
        self._dest_image = dest_image

    def render(self) -> None:
        source = self._source_noise_map
        if (
            source is None
            or self._dest_image is None
            or source.width <= 0
            or source.height <= 0
            or self._gradient.gradient_point_count < 2
        ):
            raise InvalidParameterError(
                "Renderer needs a non-empty source noise map, a destination image and two gradient points"
            )

        width, height = source.width, source.height
        self._dest_image.set_size(width, height)
        for y in range(height):
            for x in range(width):
                color = self._gradient.get_color(source.get_value(x, y))
                self._dest_image.set_value(x, y, color)
