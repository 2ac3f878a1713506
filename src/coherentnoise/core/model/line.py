from __future__ import annotations

from typing import Optional

from coherentnoise.core.module.base import Module


class Line:
    """
    Samples a module along the segment from ``start`` to ``end``.

    ``get_value(p)`` evaluates the module at ``start + (end - start) * p``.
    With attenuation on, the result is scaled by ``4p(1 - p)`` so it fades to
    zero at both endpoints; otherwise ``p`` may lie outside [0, 1].
    """

    def __init__(self, module: Optional[Module] = None):
        self._module = module
        self.attenuate = True
        self.start = (0.0, 0.0)
        self.end = (1.0, 1.0)

    @property
    def module(self) -> Module:
        assert self._module is not None, "line model has no module"
        return self._module

    def set_module(self, module: Module) -> None:
        self._module = module

    def set_start_point(self, x: float, y: float) -> None:
        self.start = (float(x), float(y))

    def set_end_point(self, x: float, y: float) -> None:
        self.end = (float(x), float(y))

    def get_value(self, p: float) -> float:
        x0, y0 = self.start
        x1, y1 = self.end
        x = (x1 - x0) * p + x0
        y = (y1 - y0) * p + y0
        value = self.module.get_value(x, y)

        if self.attenuate:
            return p * (1.0 - p) * 4.0 * value
        return value
