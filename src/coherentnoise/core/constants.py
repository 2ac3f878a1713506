"""Project-wide constants for coherent-noise generation."""

import math

# Integer hash (all primes, must stay prime)
X_NOISE_GEN = 1619
Y_NOISE_GEN = 6971
SEED_NOISE_GEN = 1013
SHIFT_NOISE_GEN = 13
HASH_MASK = 0x7FFFFFFF

INT32_HALF_RANGE = 1073741824.0  # 2^30

SQRT_3 = 1.7320508075688772935
DEG_TO_RAD = math.pi / 180.0

# Perlin / Billow
DEFAULT_PERLIN_FREQUENCY = 1.0
DEFAULT_PERLIN_LACUNARITY = 2.0
DEFAULT_PERLIN_OCTAVE_COUNT = 6
DEFAULT_PERLIN_PERSISTENCE = 0.5
DEFAULT_PERLIN_SEED = 0
PERLIN_MAX_OCTAVE = 30

DEFAULT_BILLOW_FREQUENCY = 1.0
DEFAULT_BILLOW_LACUNARITY = 2.0
DEFAULT_BILLOW_OCTAVE_COUNT = 6
DEFAULT_BILLOW_PERSISTENCE = 0.5
DEFAULT_BILLOW_SEED = 0
BILLOW_MAX_OCTAVE = 30

# Voronoi
DEFAULT_VORONOI_DISPLACEMENT = 1.0
DEFAULT_VORONOI_FREQUENCY = 1.0
DEFAULT_VORONOI_SEED = 0

# Turbulence
DEFAULT_TURBULENCE_FREQUENCY = DEFAULT_PERLIN_FREQUENCY
DEFAULT_TURBULENCE_POWER = 1.0
DEFAULT_TURBULENCE_ROUGHNESS = 3
DEFAULT_TURBULENCE_SEED = DEFAULT_PERLIN_SEED

# RotatePoint (degrees)
DEFAULT_ROTATE_X = 0.0
DEFAULT_ROTATE_Y = 0.0
DEFAULT_ROTATE_Z = 0.0

# Raster buffers
RASTER_MAX_WIDTH = 32767
RASTER_MAX_HEIGHT = 32767

# Render defaults
DEFAULT_DEST_WIDTH = 256
DEFAULT_DEST_HEIGHT = 256
DEFAULT_BOUNDS = (0.0, 1.0, 0.0, 1.0)
