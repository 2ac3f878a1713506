import math

import numpy as np
import pytest

from coherentnoise.core.noisegen import (
    NoiseQuality,
    gradient_coherent_noise,
    gradient_noise,
    integer_hash,
    lattice_floor,
    make_int32_range,
    value_noise,
)


def _wrap32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def _reference_hash(x: int, y: int, seed: int) -> int:
    # Emulates wrapping signed 32-bit arithmetic.
    n = _wrap32(1619 * x + 6971 * y + 1013 * seed) & 0x7FFFFFFF
    n = (n >> 13) ^ n
    n = _wrap32(n * _wrap32(_wrap32(n * n) * 60493 + 19990303) + 1376312589)
    return n & 0x7FFFFFFF


def test_integer_hash_golden_values():
    assert integer_hash(0, 0, 0) == 1376312589
    assert integer_hash(1, 0, 0) == 889344745
    assert integer_hash(0, 1, 0) == 2120641881
    assert integer_hash(3, -7, 42) == 1649391641
    assert integer_hash(-5, 2, 1) == 1474415489


def test_integer_hash_matches_wrapping_32bit_arithmetic():
    rng = np.random.default_rng(1234)
    for x, y, seed in rng.integers(-(2**31), 2**31 - 1, size=(500, 3)):
        x, y, seed = int(x), int(y), int(seed)
        assert integer_hash(x, y, seed) == _reference_hash(x, y, seed)


def test_value_noise_range_and_formula():
    assert value_noise(0, 0, 0) == 1.0 - 1376312589 / 1073741824.0
    for x in range(-20, 20):
        for y in range(-5, 5):
            assert -1.0 <= value_noise(x, y, 3) <= 1.0


def test_make_int32_range():
    assert make_int32_range(12.5) == 12.5
    assert make_int32_range(-1073741823.0) == -1073741823.0
    big = 5_000_000_000.25
    folded = make_int32_range(big)
    assert folded == 2.0 * math.fmod(big, 1073741824.0) - 1073741824.0
    assert -2**31 <= folded < 2**31
    assert -2**31 <= make_int32_range(-big) < 2**31


def test_lattice_floor():
    assert lattice_floor(2.5) == 2
    assert lattice_floor(-2.5) == -3
    assert lattice_floor(0.0) == -1
    assert lattice_floor(-1.0) == -2


def test_gradient_noise_is_zero_on_its_lattice_point():
    assert gradient_noise(3.0, 4.0, 3, 4, seed=9) == 0.0


def test_gradient_coherent_noise_is_zero_on_positive_lattice_points():
    for seed in range(5):
        assert gradient_coherent_noise(3.0, 4.0, seed) == 0.0


@pytest.mark.parametrize("quality", list(NoiseQuality))
def test_gradient_coherent_noise_deterministic(quality):
    rng = np.random.default_rng(5)
    for x, y in rng.uniform(-100.0, 100.0, size=(200, 2)):
        a = gradient_coherent_noise(float(x), float(y), 17, quality)
        b = gradient_coherent_noise(float(x), float(y), 17, quality)
        assert a == b


def test_gradient_coherent_noise_range():
    rng = np.random.default_rng(2024)
    points = rng.uniform(-1000.0, 1000.0, size=(10_000, 2))
    seeds = rng.integers(0, 101, size=10_000)
    qualities = list(NoiseQuality)
    for i, ((x, y), seed) in enumerate(zip(points, seeds)):
        value = gradient_coherent_noise(float(x), float(y), int(seed), qualities[i % 3])
        assert -1.0 <= value <= 1.0


def test_gradient_coherent_noise_depends_on_seed():
    values = {gradient_coherent_noise(0.37, 0.61, seed) for seed in range(20)}
    assert len(values) > 1


def test_gradient_coherent_noise_is_continuous_across_cells():
    for quality in NoiseQuality:
        left = gradient_coherent_noise(2.0 - 1e-9, 0.4, 1, quality)
        right = gradient_coherent_noise(2.0 + 1e-9, 0.4, 1, quality)
        assert left == pytest.approx(right, abs=1e-6)
