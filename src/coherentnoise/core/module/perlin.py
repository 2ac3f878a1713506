from __future__ import annotations

from coherentnoise.core.constants import (
    DEFAULT_PERLIN_FREQUENCY,
    DEFAULT_PERLIN_LACUNARITY,
    DEFAULT_PERLIN_OCTAVE_COUNT,
    DEFAULT_PERLIN_PERSISTENCE,
    DEFAULT_PERLIN_SEED,
    PERLIN_MAX_OCTAVE,
)
from coherentnoise.core.noisegen import NoiseQuality

from .base import Module, register_module_type
from .fractal import fractal_sum, validate_octave_count


class Perlin(Module):
    """
    Fractal sum of gradient coherent noise.

    Each octave doubles (``lacunarity``) the frequency and halves
    (``persistence``) the amplitude of the previous one by default. With
    ``octave_count == 1`` the output is a single gradient-coherent-noise call.
    """

    source_module_count = 0

    def __init__(self):
        super().__init__()
        self.frequency = DEFAULT_PERLIN_FREQUENCY
        self.lacunarity = DEFAULT_PERLIN_LACUNARITY
        self.noise_quality = NoiseQuality.STANDARD
        self.persistence = DEFAULT_PERLIN_PERSISTENCE
        self.seed = DEFAULT_PERLIN_SEED
        self._octave_count = DEFAULT_PERLIN_OCTAVE_COUNT

    @property
    def octave_count(self) -> int:
        return self._octave_count

    @octave_count.setter
    def octave_count(self, value: int) -> None:
        self._octave_count = validate_octave_count(value, PERLIN_MAX_OCTAVE)

    def get_value(self, x: float, y: float) -> float:
        return fractal_sum(
            x,
            y,
            frequency=self.frequency,
            lacunarity=self.lacunarity,
            persistence=self.persistence,
            octave_count=self._octave_count,
            seed=self.seed,
            quality=self.noise_quality,
        )


register_module_type("perlin", Perlin)
