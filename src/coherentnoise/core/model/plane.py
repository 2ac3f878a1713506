from __future__ import annotations

from typing import Optional

from coherentnoise.core.module.base import Module


class Plane:
    """Projects a module onto the flat (x, z) plane used by raster builders."""

    def __init__(self, module: Optional[Module] = None):
        self._module = module

    @property
    def module(self) -> Module:
        assert self._module is not None, "plane model has no module"
        return self._module

    def set_module(self, module: Module) -> None:
        self._module = module

    def get_value(self, x: float, z: float) -> float:
        return self.module.get_value(x, z)
