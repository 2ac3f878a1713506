from __future__ import annotations

from typing import Callable, Optional

from coherentnoise.core.exceptions import InvalidParameterError
from coherentnoise.core.noisegen import NoiseQuality, gradient_coherent_noise, make_int32_range


def validate_octave_count(octave_count: int, max_octave: int) -> int:
    octave_count = int(octave_count)
    if octave_count < 1 or octave_count > max_octave:
        raise InvalidParameterError(
            f"octave_count must be within [1, {max_octave}], got {octave_count}"
        )
    return octave_count


def fractal_sum(
    x: float,
    y: float,
    *,
    frequency: float,
    lacunarity: float,
    persistence: float,
    octave_count: int,
    seed: int,
    quality: NoiseQuality,
    shape: Optional[Callable[[float], float]] = None,
) -> float:
    """
    Sum octave_count octaves of gradient coherent noise.

    Octave i samples at frequency * lacunarity**i with seed + i and is weighted
    by persistence**i. ``shape`` remaps each octave's signal before weighting.
    """
    value = 0.0
    cur_persistence = 1.0

    x *= frequency
    y *= frequency

    for cur_octave in range(octave_count):
        nx = make_int32_range(x)
        ny = make_int32_range(y)

        signal = gradient_coherent_noise(nx, ny, seed + cur_octave, quality)
        if shape is not None:
            signal = shape(signal)
        value += signal * cur_persistence

        x *= lacunarity
        y *= lacunarity
        cur_persistence *= persistence

    return value
