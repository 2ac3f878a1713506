from __future__ import annotations

import math

from coherentnoise.core.constants import (
    DEFAULT_VORONOI_DISPLACEMENT,
    DEFAULT_VORONOI_FREQUENCY,
    DEFAULT_VORONOI_SEED,
    SQRT_3,
)
from coherentnoise.core.noisegen import lattice_floor, value_noise

from .base import Module, register_module_type


class Voronoi(Module):
    """
    Cellular noise: each unit cell holds one pseudo-random seed point and the
    output is constant over the region closest to a given seed point.

    The closest seed point is searched in the 5x5 block of cells around the
    input. The output is ``displacement`` times a value-noise sample of the
    winning cell, optionally plus the scaled distance to that point.
    """

    source_module_count = 0

    def __init__(self):
        super().__init__()
        self.displacement = DEFAULT_VORONOI_DISPLACEMENT
        self.enable_distance = False
        self.frequency = DEFAULT_VORONOI_FREQUENCY
        self.seed = DEFAULT_VORONOI_SEED

    def get_value(self, x: float, y: float) -> float:
        x *= self.frequency
        y *= self.frequency

        x_int = lattice_floor(x)
        y_int = lattice_floor(y)

        min_dist = 2147483647.0
        x_candidate = 0.0
        y_candidate = 0.0

        # First point in scan order wins ties.
        for y_cur in range(y_int - 2, y_int + 3):
            for x_cur in range(x_int - 2, x_int + 3):
                x_pos = x_cur + value_noise(x_cur, y_cur, self.seed)
                y_pos = y_cur + value_noise(x_cur, y_cur, self.seed + 1)
                x_dist = x_pos - x
                y_dist = y_pos - y
                dist = x_dist * x_dist + y_dist * y_dist

                if dist < min_dist:
                    min_dist = dist
                    x_candidate = x_pos
                    y_candidate = y_pos

        if self.enable_distance:
            x_dist = x_candidate - x
            y_dist = y_candidate - y
            value = math.sqrt(x_dist * x_dist + y_dist * y_dist) * SQRT_3 - 1.0
        else:
            value = 0.0

        return value + self.displacement * value_noise(
            math.floor(x_candidate), math.floor(y_candidate)
        )


register_module_type("voronoi", Voronoi)
