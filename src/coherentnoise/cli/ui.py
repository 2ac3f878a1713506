from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import numpy as np
import typer

from coherentnoise.io.config import RenderConfig


def _timestamp_utc() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _abs_path(path: Path | None) -> str:
    if path is None:
        return "n/a"
    try:
        return str(path.resolve())
    except Exception:  # noqa: BLE001
        return str(path)


def _truncate_hex(value: str, max_len: int = 12) -> str:
    if len(value) <= max_len:
        return value
    return f"{value[:max_len]}..."


def print_run_header(
    command: str,
    *,
    config_path: Path | None,
    cfg: RenderConfig | None,
    jobs: int | None = None,
    seamless: bool | None = None,
) -> None:
    typer.echo(f"[run] command={command} ts_utc={_timestamp_utc()}")
    typer.echo(f"[config] path={_abs_path(config_path)}")
    if cfg is None:
        return
    module_types = ", ".join(f"{name}:{m.type}" for name, m in cfg.modules.items())
    typer.echo(f"[graph] root={cfg.root} seed={cfg.seed} modules={module_types}")
    lower_x, upper_x, lower_z, upper_z = cfg.builder.bounds
    width, height = cfg.builder.size
    jobs_text = jobs if jobs is not None else "n/a"
    seamless_text = cfg.builder.seamless if seamless is None else seamless
    typer.echo(
        f"[builder] x=[{lower_x}, {upper_x}) z=[{lower_z}, {upper_z}) size={width}x{height} "
        f"seamless={seamless_text} jobs={jobs_text}"
    )


def print_noise_excerpt(field: np.ndarray, window: int = 2) -> None:
    """Print the top-left corner of a raster, rows first."""
    height, width = field.shape[:2]
    rows = min(height, window * 2 + 1)
    cols = min(width, window * 2 + 1)
    typer.echo(f"[preview] rows=0..{rows - 1} cols=0..{cols - 1}")
    for z in range(rows):
        cells = " ".join(f"{float(field[z, x]):+.3f}" for x in range(cols))
        typer.echo(f"[preview] z={z}: {cells}")


def print_stats(field: np.ndarray, fingerprint: str) -> None:
    typer.echo(
        f"[stats] min={float(field.min()):.4f} max={float(field.max()):.4f} "
        f"mean={float(field.mean()):.4f} fingerprint={_truncate_hex(fingerprint)}"
    )


def print_io_write(path: Path) -> None:
    typer.echo(f"[io] Writing output: {_abs_path(path)}")


def print_done(summary: str) -> None:
    typer.echo(f"[done] {summary}")
