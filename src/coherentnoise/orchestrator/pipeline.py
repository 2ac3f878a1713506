from __future__ import annotations

import hashlib
from typing import Any, Dict, Optional, Tuple

from coherentnoise.core.exceptions import NoiseError
from coherentnoise.core.module.base import Module, get_module_type
from coherentnoise.core.noisegen import NoiseQuality
from coherentnoise.io.config import ConfigError, ModuleConfig, RenderConfig, resolve_build_order
from coherentnoise.raster.buffer import Image, NoiseMap
from coherentnoise.raster.builder import NoiseMapBuilderPlane
from coherentnoise.raster.renderer import ImageRenderer
from coherentnoise.utils.logging import get_logger

logger = get_logger(__name__)

_QUALITY_NAMES = {
    "fast": NoiseQuality.FAST,
    "standard": NoiseQuality.STANDARD,
    "std": NoiseQuality.STANDARD,
    "best": NoiseQuality.BEST,
}

GRADIENTS = ("grayscale", "terrain")


def _coerce_quality(value: Any) -> NoiseQuality:
    if isinstance(value, str):
        if value.lower() not in _QUALITY_NAMES:
            raise ConfigError(f"Unknown quality '{value}'. Available: fast, standard, best")
        return _QUALITY_NAMES[value.lower()]
    if isinstance(value, bool) or not isinstance(value, int) or value not in tuple(NoiseQuality):
        raise ConfigError(f"Unknown quality {value!r}. Available: fast, standard, best")
    return NoiseQuality(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_param(label: str, key: str, current: Any, value: Any) -> Any:
    """Match a config value against the type of the attribute it replaces."""
    if isinstance(current, bool):
        if not isinstance(value, bool):
            raise ConfigError(f"{label}: '{key}' must be a boolean, got {type(value).__name__}")
        return value
    if isinstance(current, int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{label}: '{key}' must be an integer, got {type(value).__name__}")
        return value
    if isinstance(current, float):
        if not _is_number(value):
            raise ConfigError(f"{label}: '{key}' must be a number, got {type(value).__name__}")
        return float(value)
    if isinstance(current, tuple):
        if not isinstance(value, (list, tuple)) or len(value) != len(current) or not all(map(_is_number, value)):
            raise ConfigError(f"{label}: '{key}' must be a list of {len(current)} numbers")
        return tuple(float(v) for v in value)
    raise ConfigError(f"{label}: '{key}' is not a configurable parameter")


def _apply_params(module: Module, module_cfg: ModuleConfig, seed_offset: int) -> None:
    label = f"Module '{module_cfg.name}' ({module_cfg.type})"
    params = dict(module_cfg.params)
    if hasattr(module, "seed"):
        seed = _check_param(label, "seed", module.seed, params.get("seed", module.seed))
        params["seed"] = seed + seed_offset

    for key, value in params.items():
        if key in ("quality", "noise_quality"):
            key, value = "noise_quality", _coerce_quality(value)
        current = getattr(module, key, None) if not key.startswith("_") else None
        if current is None or callable(current) or key == "source_module_count":
            raise ConfigError(f"{label} has no parameter '{key}'")
        if key != "noise_quality":
            value = _check_param(label, key, current, value)
        try:
            setattr(module, key, value)
        except (AttributeError, NoiseError, TypeError, ValueError) as exc:
            raise ConfigError(f"{label}: invalid '{key}': {exc}") from exc


def build_module_graph(cfg: RenderConfig) -> Tuple[Dict[str, Module], Module]:
    """Instantiate and wire every module reachable from the config root."""
    modules: Dict[str, Module] = {}
    for name in resolve_build_order(cfg):
        module_cfg = cfg.modules[name]
        module = get_module_type(module_cfg.type)()
        _apply_params(module, module_cfg, cfg.seed)
        for index, source in enumerate(module_cfg.sources):
            module.set_source_module(index, modules[source])
        modules[name] = module
        logger.debug("Built module name=%s type=%s sources=%s", name, module_cfg.type, module_cfg.sources)
    return modules, modules[cfg.root]


def make_builder(cfg: RenderConfig, root: Module, seamless: Optional[bool] = None) -> NoiseMapBuilderPlane:
    builder = NoiseMapBuilderPlane()
    builder.set_source_module(root)
    builder.set_bounds(*cfg.builder.bounds)
    builder.set_dest_size(*cfg.builder.size)
    builder.enable_seamless(cfg.builder.seamless if seamless is None else seamless)
    return builder


def fingerprint(noise_map: NoiseMap) -> str:
    """SHA-256 fingerprint over the noise map cells (row-major float32)."""
    return hashlib.sha256(noise_map.as_array().tobytes(order="C")).hexdigest()


def render_noise_map(
    cfg: RenderConfig, jobs: int = 1, seamless: Optional[bool] = None
) -> tuple[NoiseMap, str]:
    _, root = build_module_graph(cfg)
    noise_map = NoiseMap()
    builder = make_builder(cfg, root, seamless=seamless)
    builder.set_dest_noise_map(noise_map)
    builder.build(jobs=jobs)
    field_fp = fingerprint(noise_map)
    logger.debug("Noise map fingerprint=%s", field_fp)
    return noise_map, field_fp


def sample_point(cfg: RenderConfig, x: float, y: float) -> float:
    _, root = build_module_graph(cfg)
    return root.get_value(x, y)


def colorize(noise_map: NoiseMap, gradient: str = "grayscale") -> Image:
    if gradient not in GRADIENTS:
        raise ValueError(f"Unknown gradient '{gradient}'. Available: {list(GRADIENTS)}")
    renderer = ImageRenderer()
    if gradient == "terrain":
        renderer.build_terrain_gradient()
    else:
        renderer.build_grayscale_gradient()
    image = Image()
    renderer.set_source_noise_map(noise_map)
    renderer.set_dest_image(image)
    renderer.render()
    return image
