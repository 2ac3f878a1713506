from __future__ import annotations

import math
from enum import IntEnum

from .constants import (
    HASH_MASK,
    INT32_HALF_RANGE,
    SEED_NOISE_GEN,
    SHIFT_NOISE_GEN,
    X_NOISE_GEN,
    Y_NOISE_GEN,
)
from .interp import linear_interp, s_curve3, s_curve5


class NoiseQuality(IntEnum):
    """Interpolation curve used between lattice points."""

    FAST = 0
    STANDARD = 1
    BEST = 2


# 8-direction lattice gradients; diagonals are not normalized so that the
# bilinear blend of the four corner dot products stays within [-1, 1].
_GRADIENTS_2D = (
    (1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0),
    (1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0),
)


def integer_hash(x: int, y: int, seed: int = 0) -> int:
    """
    Hash two lattice coordinates and a seed into [0, 2147483647].

    Python ints do not overflow, so masking the exact result reproduces the
    low 31 bits a wrapping 32-bit implementation would keep.
    """
    n = (X_NOISE_GEN * x + Y_NOISE_GEN * y + SEED_NOISE_GEN * seed) & HASH_MASK
    n = (n >> SHIFT_NOISE_GEN) ^ n
    return (n * (n * n * 60493 + 19990303) + 1376312589) & HASH_MASK


def value_noise(x: int, y: int, seed: int = 0) -> float:
    """Value noise at an integer lattice point, in [-1, 1]."""
    return 1.0 - (integer_hash(x, y, seed) / INT32_HALF_RANGE)


def make_int32_range(n: float) -> float:
    """Fold n into the range a 32-bit integer can hold, identically on every platform."""
    if n >= INT32_HALF_RANGE:
        return (2.0 * math.fmod(n, INT32_HALF_RANGE)) - INT32_HALF_RANGE
    if n <= -INT32_HALF_RANGE:
        return (2.0 * math.fmod(n, INT32_HALF_RANGE)) + INT32_HALF_RANGE
    return n


def lattice_floor(n: float) -> int:
    return int(n) if n > 0.0 else int(n) - 1


def gradient_noise(fx: float, fz: float, ix: int, iz: int, seed: int = 0) -> float:
    """
    Dot product of the pseudo-random gradient at (ix, iz) with the offset to (fx, fz).

    Requires |fx - ix| <= 1 and |fz - iz| <= 1.
    """
    index = integer_hash(ix, iz, seed)
    index ^= index >> 8
    gx, gz = _GRADIENTS_2D[index & 7]
    return gx * (fx - ix) + gz * (fz - iz)


def gradient_coherent_noise(
    x: float, y: float, seed: int = 0, quality: NoiseQuality = NoiseQuality.STANDARD
) -> float:
    """Gradient coherent noise in [-1, 1], continuous in (x, y)."""
    x0 = lattice_floor(x)
    x1 = x0 + 1
    y0 = lattice_floor(y)
    y1 = y0 + 1

    if quality == NoiseQuality.FAST:
        xs = x - x0
        ys = y - y0
    elif quality == NoiseQuality.STANDARD:
        xs = s_curve3(x - x0)
        ys = s_curve3(y - y0)
    else:
        xs = s_curve5(x - x0)
        ys = s_curve5(y - y0)

    n0 = gradient_noise(x, y, x0, y0, seed)
    n1 = gradient_noise(x, y, x1, y0, seed)
    ix0 = linear_interp(n0, n1, xs)
    n0 = gradient_noise(x, y, x0, y1, seed)
    n1 = gradient_noise(x, y, x1, y1, seed)
    ix1 = linear_interp(n0, n1, xs)
    return linear_interp(ix0, ix1, ys)
