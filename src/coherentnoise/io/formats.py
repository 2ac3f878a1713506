from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import numpy as np


def write_raster(path: Path, array: np.ndarray) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    np.save(path, array, allow_pickle=False)


def read_raster(path: Path) -> np.ndarray:
    return np.load(path, allow_pickle=False)


def write_json(path: Path, payload: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
