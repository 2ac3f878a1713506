from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

import yaml

from coherentnoise.core import constants
from coherentnoise.core.module.base import get_module_type, list_module_types
from coherentnoise.core.module import billow  # noqa: F401 (registers module types)
from coherentnoise.core.module import blend  # noqa: F401
from coherentnoise.core.module import perlin  # noqa: F401
from coherentnoise.core.module import rotatepoint  # noqa: F401
from coherentnoise.core.module import turbulence  # noqa: F401
from coherentnoise.core.module import voronoi  # noqa: F401


# -------------------------
# Config structures
# -------------------------


@dataclass(frozen=True)
class ModuleConfig:
    name: str
    type: str
    params: Dict[str, Any]
    sources: Tuple[str, ...]


@dataclass(frozen=True)
class BuilderConfig:
    bounds: Tuple[float, float, float, float]
    size: Tuple[int, int]
    seamless: bool


@dataclass(frozen=True)
class RenderConfig:
    seed: int
    modules: Dict[str, ModuleConfig]
    root: str
    builder: BuilderConfig


# -------------------------
# Config parsing/validation
# -------------------------


class ConfigError(Exception):
    """Raised when a render config is invalid."""


def _require(mapping: Mapping[str, Any], key: str, expected_type: Tuple[type, ...]):
    if key not in mapping:
        raise ConfigError(f"Missing required key '{key}'")
    val = mapping[key]
    if not isinstance(val, expected_type):
        raise ConfigError(f"Key '{key}' must be of type {expected_type}, got {type(val)}")
    return val


def _parse_module(name: str, data: Any) -> ModuleConfig:
    if not isinstance(data, dict):
        raise ConfigError(f"Module '{name}' must be a mapping.")
    type_name = _require(data, "type", (str,))
    try:
        module_cls = get_module_type(type_name)
    except ValueError as exc:
        raise ConfigError(f"Module '{name}': {exc}") from exc

    sources = tuple(str(s) for s in data.get("sources", []))
    if len(sources) != module_cls.source_module_count:
        raise ConfigError(
            f"Module '{name}' of type '{type_name}' needs {module_cls.source_module_count} "
            f"sources, got {len(sources)}"
        )
    params = {k: v for k, v in data.items() if k not in ("type", "sources")}
    return ModuleConfig(name=name, type=type_name, params=params, sources=sources)


def _parse_builder(data: Mapping[str, Any]) -> BuilderConfig:
    bounds = data.get("bounds", list(constants.DEFAULT_BOUNDS))
    size = data.get("size", [constants.DEFAULT_DEST_WIDTH, constants.DEFAULT_DEST_HEIGHT])
    if not isinstance(bounds, (list, tuple)) or len(bounds) != 4:
        raise ConfigError("builder.bounds must have exactly four entries (lower_x, upper_x, lower_z, upper_z)")
    if not isinstance(size, (list, tuple)) or len(size) != 2:
        raise ConfigError("builder.size must have exactly two entries (width, height)")
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in (*bounds, *size)):
        raise ConfigError("builder.bounds and builder.size entries must be numbers")
    lower_x, upper_x, lower_z, upper_z = (float(v) for v in bounds)
    if upper_x <= lower_x or upper_z <= lower_z:
        raise ConfigError("builder.bounds must satisfy lower < upper on both axes")
    width, height = (int(v) for v in size)
    if width <= 0 or height <= 0:
        raise ConfigError("builder.size entries must be positive")
    return BuilderConfig(
        bounds=(lower_x, upper_x, lower_z, upper_z),
        size=(width, height),
        seamless=bool(data.get("seamless", False)),
    )


def parse_config_data(data: Any) -> RenderConfig:
    if not isinstance(data, dict):
        raise ConfigError("Top-level YAML must be a mapping.")

    modules_data = _require(data, "modules", (dict,))
    if not modules_data:
        raise ConfigError("At least one module must be defined.")
    modules = {str(name): _parse_module(str(name), spec) for name, spec in modules_data.items()}

    root = str(_require(data, "root", (str,)))
    if root not in modules:
        raise ConfigError(f"Root module '{root}' is not defined. Available: {sorted(modules)}")

    for module_cfg in modules.values():
        for source in module_cfg.sources:
            if source not in modules:
                raise ConfigError(f"Module '{module_cfg.name}' references undefined source '{source}'")

    builder_data = data.get("builder") or {}
    if not isinstance(builder_data, dict):
        raise ConfigError("builder must be a mapping.")

    cfg = RenderConfig(
        seed=_require(data, "seed", (int,)) if "seed" in data else 0,
        modules=modules,
        root=root,
        builder=_parse_builder(builder_data),
    )
    resolve_build_order(cfg)
    return cfg


def parse_config(path: Path) -> RenderConfig:
    try:
        data = yaml.safe_load(path.read_text())
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML: {exc}") from exc
    return parse_config_data(data)


def resolve_build_order(cfg: RenderConfig) -> List[str]:
    """
    Names of the modules reachable from the root, sources before consumers.

    Raises ConfigError when the source references form a cycle.
    """
    order: List[str] = []
    state: Dict[str, str] = {}

    def visit(name: str, path: Tuple[str, ...]) -> None:
        if state.get(name) == "done":
            return
        if state.get(name) == "visiting":
            cycle = " -> ".join(path + (name,))
            raise ConfigError(f"Module graph contains a cycle: {cycle}")
        state[name] = "visiting"
        for source in cfg.modules[name].sources:
            visit(source, path + (name,))
        state[name] = "done"
        order.append(name)

    visit(cfg.root, ())
    return order


def available_module_types() -> List[str]:
    return list_module_types()
