"""Serialization helpers for run artifacts."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np
import yaml


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _to_serializable(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(k): _to_serializable(v) for k, v in dict.items(value)}
    if isinstance(value, (list, tuple)):
        return [_to_serializable(v) for v in value]
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    return value


def save_dict(data: Any, path: str | Path) -> None:
    """Write ``data`` as indented JSON, converting NumPy containers."""

    file_path = Path(path)
    _ensure_parent(file_path)
    with file_path.open("w", encoding="utf-8") as handle:
        json.dump(_to_serializable(data), handle, indent=2, sort_keys=True, default=str)


def write_yaml(data: Any, path: str | Path) -> None:
    file_path = Path(path)
    _ensure_parent(file_path)
    file_path.write_text(
        yaml.safe_dump(_to_serializable(data), sort_keys=False), encoding="utf-8"
    )


__all__ = ["save_dict", "write_yaml"]
