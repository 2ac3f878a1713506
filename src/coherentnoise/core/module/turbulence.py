from __future__ import annotations

from coherentnoise.core.constants import (
    DEFAULT_TURBULENCE_FREQUENCY,
    DEFAULT_TURBULENCE_POWER,
    DEFAULT_TURBULENCE_ROUGHNESS,
    DEFAULT_TURBULENCE_SEED,
)

from .base import Module, register_module_type
from .perlin import Perlin

# Offsets keep the distortion samples off integer lattice points, where
# gradient noise is always zero.
_X_DISTORT_OFFSET = (12414.0 / 65536.0, 65124.0 / 65536.0)
_Y_DISTORT_OFFSET = (26519.0 / 65536.0, 18128.0 / 65536.0)


class Turbulence(Module):
    """
    Randomly displaces the input point before handing it to the source module.

    The displacement along each axis comes from its own Perlin generator
    (seeds ``seed``, ``seed + 1``, ``seed + 2``) scaled by ``power``.
    ``roughness`` is the octave count of those generators.
    """

    source_module_count = 1

    def __init__(self):
        super().__init__()
        self._x_distort_module = Perlin()
        self._y_distort_module = Perlin()
        self._z_distort_module = Perlin()
        self.power = DEFAULT_TURBULENCE_POWER
        self.seed = DEFAULT_TURBULENCE_SEED
        self.frequency = DEFAULT_TURBULENCE_FREQUENCY
        self.roughness = DEFAULT_TURBULENCE_ROUGHNESS

    @property
    def frequency(self) -> float:
        return self._x_distort_module.frequency

    @frequency.setter
    def frequency(self, value: float) -> None:
        for module in self._distort_modules():
            module.frequency = value

    @property
    def roughness(self) -> int:
        return self._x_distort_module.octave_count

    @roughness.setter
    def roughness(self, value: int) -> None:
        for module in self._distort_modules():
            module.octave_count = value

    @property
    def seed(self) -> int:
        return self._x_distort_module.seed

    @seed.setter
    def seed(self, value: int) -> None:
        self._x_distort_module.seed = value
        self._y_distort_module.seed = value + 1
        self._z_distort_module.seed = value + 2

    def _distort_modules(self) -> tuple[Perlin, Perlin, Perlin]:
        return self._x_distort_module, self._y_distort_module, self._z_distort_module

    def get_value(self, x: float, y: float) -> float:
        source = self.get_source_module(0)

        x0 = x + _X_DISTORT_OFFSET[0]
        y0 = y + _X_DISTORT_OFFSET[1]
        x1 = x + _Y_DISTORT_OFFSET[0]
        y1 = y + _Y_DISTORT_OFFSET[1]
        x_distort = x + (self._x_distort_module.get_value(x0, y0) * self.power)
        y_distort = y + (self._y_distort_module.get_value(x1, y1) * self.power)

        return source.get_value(x_distort, y_distort)


register_module_type("turbulence", Turbulence)
