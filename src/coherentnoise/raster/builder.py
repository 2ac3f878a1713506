from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional

from coherentnoise.core.exceptions import InvalidParameterError
from coherentnoise.core.interp import linear_interp
from coherentnoise.core.model.plane import Plane
from coherentnoise.core.module.base import Module
from coherentnoise.utils.logging import get_logger, log_elapsed

from .buffer import NoiseMap

logger = get_logger(__name__)

CellCallback = Callable[[int, int, float], None]


class NoiseMapBuilderPlane:
    """
    Samples a module graph over a rectangle of the (x, z) plane into a NoiseMap.

    Output cell (x, z) is evaluated at ``(lower_x + x * x_delta,
    lower_z + z * z_delta)`` where each delta is the extent divided by the
    destination size. With seamless mode enabled each cell blends four samples
    one extent apart, so opposite edges of the raster line up when it is tiled.
    """

    def __init__(self):
        self._source_module: Optional[Module] = None
        self._dest_noise_map: Optional[NoiseMap] = None
        self._dest_width = 0
        self._dest_height = 0
        self._lower_x = 0.0
        self._upper_x = 0.0
        self._lower_z = 0.0
        self._upper_z = 0.0
        self._is_seamless_enabled = False

    # -------------------------
    # Configuration
    # -------------------------

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return self._lower_x, self._upper_x, self._lower_z, self._upper_z

    @property
    def dest_width(self) -> int:
        return self._dest_width

    @property
    def dest_height(self) -> int:
        return self._dest_height

    @property
    def is_seamless_enabled(self) -> bool:
        return self._is_seamless_enabled

    def enable_seamless(self, enable: bool = True) -> None:
        self._is_seamless_enabled = bool(enable)

    def set_bounds(self, lower_x: float, upper_x: float, lower_z: float, upper_z: float) -> None:
        if lower_x >= upper_x or lower_z >= upper_z:
            raise InvalidParameterError(
                f"Bounds must satisfy lower < upper, got x=[{lower_x}, {upper_x}) z=[{lower_z}, {upper_z})"
            )
        self._lower_x = float(lower_x)
        self._upper_x = float(upper_x)
        self._lower_z = float(lower_z)
        self._upper_z = float(upper_z)

    def set_dest_size(self, dest_width: int, dest_height: int) -> None:
        self._dest_width = int(dest_width)
        self._dest_height = int(dest_height)

    def set_dest_noise_map(self, dest_noise_map: NoiseMap) -> None:
        self._dest_noise_map = dest_noise_map

    def set_source_module(self, source_module: Module) -> None:
        self._source_module = source_module

    def _validate(self, require_dest: bool) -> None:
        if (
            self._upper_x <= self._lower_x
            or self._upper_z <= self._lower_z
            or self._dest_width <= 0
            or self._dest_height <= 0
            or self._source_module is None
            or (require_dest and self._dest_noise_map is None)
        ):
            raise InvalidParameterError(
                "Builder needs valid bounds, a positive destination size, a source module"
                + (" and a destination noise map" if require_dest else "")
            )

    # -------------------------
    # Sampling
    # -------------------------

    def _sample(self, plane: Plane, x_cur: float, z_cur: float) -> float:
        if not self._is_seamless_enabled:
            return plane.get_value(x_cur, z_cur)

        x_extent = self._upper_x - self._lower_x
        z_extent = self._upper_z - self._lower_z
        sw_value = plane.get_value(x_cur, z_cur)
        se_value = plane.get_value(x_cur + x_extent, z_cur)
        nw_value = plane.get_value(x_cur, z_cur + z_extent)
        ne_value = plane.get_value(x_cur + x_extent, z_cur + z_extent)
        x_blend = 1.0 - ((x_cur - self._lower_x) / x_extent)
        z_blend = 1.0 - ((z_cur - self._lower_z) / z_extent)
        z0 = linear_interp(sw_value, se_value, x_blend)
        z1 = linear_interp(nw_value, ne_value, x_blend)
        return linear_interp(z0, z1, z_blend)

    def sample(self, world_x: float, world_z: float) -> float:
        """Value the builder would produce at an arbitrary world position."""
        if self._source_module is None:
            raise InvalidParameterError("Builder has no source module")
        return self._sample(Plane(self._source_module), world_x, world_z)

    def _build_row(self, plane: Plane, z: int) -> List[float]:
        x_delta = (self._upper_x - self._lower_x) / self._dest_width
        z_delta = (self._upper_z - self._lower_z) / self._dest_height
        z_cur = self._lower_z + z * z_delta
        return [
            self._sample(plane, self._lower_x + x * x_delta, z_cur)
            for x in range(self._dest_width)
        ]

    def build(self, callback: Optional[CellCallback] = None, jobs: int = 1) -> None:
        """
        Fill the destination noise map, or stream every cell to ``callback``.

        With ``jobs > 1`` rows are evaluated on a thread pool; cells are still
        written and reported in row-major order on the calling thread.
        """
        self._validate(require_dest=callback is None)

        if callback is None:
            self._dest_noise_map.set_size(self._dest_width, self._dest_height)

        plane = Plane(self._source_module)
        logger.debug(
            "Building noise map %dx%d bounds=%s seamless=%s jobs=%d",
            self._dest_width,
            self._dest_height,
            self.bounds,
            self._is_seamless_enabled,
            jobs,
        )

        rows = range(self._dest_height)
        with log_elapsed(logger, "Built noise map %dx%d jobs=%d", self._dest_width, self._dest_height, jobs):
            if jobs > 1:
                with ThreadPoolExecutor(max_workers=jobs) as pool:
                    row_values = list(pool.map(lambda z: self._build_row(plane, z), rows))
            else:
                row_values = (self._build_row(plane, z) for z in rows)

            for z, values in zip(rows, row_values):
                for x, value in enumerate(values):
                    if callback is not None:
                        callback(x, z, value)
                    else:
                        self._dest_noise_map.set_value(x, z, value)
