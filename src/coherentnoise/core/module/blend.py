from __future__ import annotations

from coherentnoise.core.interp import linear_interp

from .base import Module, register_module_type


class Blend(Module):
    """
    Blends sources 0 and 1, weighted by source 2.

    Source 2 is expected in [-1, 1]: -1 selects source 0, +1 selects source 1.
    """

    source_module_count = 3

    def get_value(self, x: float, y: float) -> float:
        v0 = self.get_source_module(0).get_value(x, y)
        v1 = self.get_source_module(1).get_value(x, y)
        alpha = (self.get_source_module(2).get_value(x, y) + 1.0) / 2.0
        return linear_interp(v0, v1, alpha)


register_module_type("blend", Blend)
