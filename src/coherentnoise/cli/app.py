from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from coherentnoise.core.exceptions import NoiseError
from coherentnoise.core.interp import cubic_interp, linear_interp, s_curve3, s_curve5
from coherentnoise.core.module.perlin import Perlin
from coherentnoise.io.config import ConfigError, available_module_types, parse_config, parse_config_data
from coherentnoise.io.formats import write_json, write_raster
from coherentnoise.orchestrator.pipeline import GRADIENTS, colorize, render_noise_map, sample_point
from coherentnoise.cli import ui
from coherentnoise.utils.logging import resolve_log_level, set_command_context, setup_logging

app = typer.Typer(help="Coherent-noise module graphs and raster rendering")

_SELFTEST_CONFIG = {
    "seed": 7,
    "modules": {
        "base": {"type": "perlin", "octave_count": 3},
        "cells": {"type": "voronoi", "enable_distance": True, "frequency": 2.0},
        "control": {"type": "billow", "octave_count": 2},
        "mixed": {"type": "blend", "sources": ["base", "cells", "control"]},
        "warped": {"type": "turbulence", "power": 0.125, "sources": ["mixed"]},
    },
    "root": "warped",
    "builder": {"bounds": [0.0, 2.0, 0.0, 2.0], "size": [16, 16], "seamless": True},
}


@app.callback()
def main_options(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at INFO level"),
    debug: bool = typer.Option(False, "--debug", help="Log at DEBUG level"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="error, warning, info or debug; overrides -v/--debug"),
):
    """Configure logging for every subcommand."""
    try:
        setup_logging(resolve_log_level(verbose, debug, log_level))
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    if ctx.invoked_subcommand:
        set_command_context(ctx.invoked_subcommand)


def _load_config(config: Path):
    try:
        return parse_config(config)
    except ConfigError as exc:
        typer.secho(f"Config error: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)


@app.command()
def render(
    config: Path = typer.Option(..., "--config", "-c", exists=True, readable=True, help="YAML graph config"),
    out: Path = typer.Option(..., "--out", "-o", help="Noise map output (.npy)"),
    meta: Optional[Path] = typer.Option(None, "--meta", help="Optional JSON metadata output"),
    image_out: Optional[Path] = typer.Option(None, "--image-out", help="Optional colorized RGBA output (.npy)"),
    gradient: str = typer.Option("grayscale", "--gradient", help=f"Color gradient: {', '.join(GRADIENTS)}"),
    jobs: int = typer.Option(1, "--jobs", "-j", help="Worker threads for row sampling"),
    seamless: Optional[bool] = typer.Option(None, "--seamless/--no-seamless", help="Override builder.seamless"),
    preview: bool = typer.Option(False, "--preview", help="Print the top-left corner of the raster"),
):
    """Render the config's module graph into a noise map."""
    cfg = _load_config(config)
    if gradient not in GRADIENTS:
        typer.secho(f"Unknown gradient '{gradient}'. Available: {list(GRADIENTS)}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    set_command_context("render", root=cfg.root)
    effective_seamless = cfg.builder.seamless if seamless is None else seamless
    ui.print_run_header("render", config_path=config, cfg=cfg, jobs=jobs, seamless=effective_seamless)

    try:
        noise_map, field_fp = render_noise_map(cfg, jobs=jobs, seamless=seamless)
    except (ConfigError, NoiseError) as exc:
        typer.secho(f"Render failed: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    field = noise_map.as_array()
    ui.print_stats(field, field_fp)
    if preview:
        ui.print_noise_excerpt(field)

    ui.print_io_write(out)
    write_raster(out, field)

    if image_out:
        image = colorize(noise_map, gradient=gradient)
        ui.print_io_write(image_out)
        write_raster(image_out, image.as_array())

    if meta:
        ui.print_io_write(meta)
        write_json(
            meta,
            {
                "root": cfg.root,
                "seed": cfg.seed,
                "modules": {name: {"type": m.type, **m.params, "sources": list(m.sources)} for name, m in cfg.modules.items()},
                "bounds": list(cfg.builder.bounds),
                "size": list(cfg.builder.size),
                "seamless": effective_seamless,
                "field_fingerprint": field_fp,
            },
        )

    ui.print_done(f"fingerprint={field_fp}")


@app.command()
def sample(
    config: Path = typer.Option(..., "--config", "-c", exists=True, readable=True, help="YAML graph config"),
    x: float = typer.Option(..., "--x", help="x coordinate"),
    y: float = typer.Option(..., "--y", help="y coordinate"),
):
    """Evaluate the root module at a single point."""
    cfg = _load_config(config)
    set_command_context("sample", root=cfg.root)
    try:
        value = sample_point(cfg, x, y)
    except (ConfigError, NoiseError) as exc:
        typer.secho(f"Sample failed: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(repr(value))


@app.command()
def modules():
    """List registered module types."""
    for name in available_module_types():
        typer.echo(name)


@app.command()
def selftest():
    """
    Check interpolation identities and render determinism (no filesystem writes).
    """
    checks = {
        "linear_interp": linear_interp(-0.25, 0.75, 0.0) == -0.25 and linear_interp(-0.25, 0.75, 1.0) == 0.75,
        "cubic_interp": cubic_interp(0.1, 0.2, 0.3, 0.4, 0.0) == 0.2,
        "s_curve3": s_curve3(0.0) == 0.0 and s_curve3(1.0) == 1.0 and s_curve3(0.5) == 0.5,
        "s_curve5": s_curve5(0.0) == 0.0 and s_curve5(1.0) == 1.0,
    }

    perlin = Perlin()
    checks["perlin_repeatable"] = perlin.get_value(1.25, -3.5) == perlin.get_value(1.25, -3.5)

    cfg = parse_config_data(_SELFTEST_CONFIG)
    _, fp1 = render_noise_map(cfg)
    _, fp2 = render_noise_map(cfg, jobs=2)
    checks["render_deterministic"] = fp1 == fp2

    failed = [name for name, ok in checks.items() if not ok]
    if failed:
        typer.secho(f"Selftest FAILED: {', '.join(failed)}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.secho("Selftest passed.", fg=typer.colors.GREEN)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
