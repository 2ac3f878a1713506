from __future__ import annotations

from coherentnoise.core.constants import (
    BILLOW_MAX_OCTAVE,
    DEFAULT_BILLOW_FREQUENCY,
    DEFAULT_BILLOW_LACUNARITY,
    DEFAULT_BILLOW_OCTAVE_COUNT,
    DEFAULT_BILLOW_PERSISTENCE,
    DEFAULT_BILLOW_SEED,
)
from coherentnoise.core.noisegen import NoiseQuality

from .base import Module, register_module_type
from .fractal import fractal_sum, validate_octave_count


def _billow_signal(signal: float) -> float:
    return 2.0 * abs(signal) - 1.0


class Billow(Module):
    """Perlin-style fractal sum where every octave is folded with 2|s| - 1."""

    source_module_count = 0

    def __init__(self):
        super().__init__()
        self.frequency = DEFAULT_BILLOW_FREQUENCY
        self.lacunarity = DEFAULT_BILLOW_LACUNARITY
        self.noise_quality = NoiseQuality.STANDARD
        self.persistence = DEFAULT_BILLOW_PERSISTENCE
        self.seed = DEFAULT_BILLOW_SEED
        self._octave_count = DEFAULT_BILLOW_OCTAVE_COUNT

    @property
    def octave_count(self) -> int:
        return self._octave_count

    @octave_count.setter
    def octave_count(self, value: int) -> None:
        self._octave_count = validate_octave_count(value, BILLOW_MAX_OCTAVE)

    def get_value(self, x: float, y: float) -> float:
        value = fractal_sum(
            x,
            y,
            frequency=self.frequency,
            lacunarity=self.lacunarity,
            persistence=self.persistence,
            octave_count=self._octave_count,
            seed=self.seed,
            quality=self.noise_quality,
            shape=_billow_signal,
        )
        return value + 0.5


register_module_type("billow", Billow)
