from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type


class Module(ABC):
    """
    Base class for noise modules.

    A module maps a 2D input point to a scalar. It holds a fixed number of
    source-module slots (class attribute ``source_module_count``) that the
    caller binds with ``set_source_module``. Modules only reference their
    sources; the caller keeps the graph alive and acyclic.

    ``get_value`` must not mutate the module, so a fully configured graph can
    be evaluated from several threads at once.
    """

    source_module_count: int = 0

    def __init__(self):
        self._source_modules: List[Optional[Module]] = [None] * self.source_module_count

    def get_source_module_count(self) -> int:
        return self.source_module_count

    def get_source_module(self, index: int) -> "Module":
        assert 0 <= index < self.source_module_count, f"source index {index} out of range"
        module = self._source_modules[index]
        assert module is not None, f"source module {index} is not set"
        return module

    def set_source_module(self, index: int, module: "Module") -> None:
        assert 0 <= index < self.source_module_count, f"source index {index} out of range"
        self._source_modules[index] = module

    @abstractmethod
    def get_value(self, x: float, y: float) -> float:
        """Evaluate the module at (x, y)."""
        ...


MODULE_REGISTRY: Dict[str, Type[Module]] = {}


def register_module_type(name: str, cls: Type[Module]) -> None:
    MODULE_REGISTRY[name] = cls


def get_module_type(name: str) -> Type[Module]:
    if name not in MODULE_REGISTRY:
        raise ValueError(f"Unknown module type '{name}'. Available: {list_module_types()}")
    return MODULE_REGISTRY[name]


def list_module_types() -> List[str]:
    return sorted(MODULE_REGISTRY.keys())
