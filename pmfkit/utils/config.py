"""Configuration loading for sampling runs."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

import yaml


class ConfigNode(dict):
    """A dict wrapper that exposes dot-notation access."""

    def __getattr__(self, key: str) -> Any:
        try:
            value = self[key]
        except KeyError as exc:
            raise AttributeError(key) from exc
        return _wrap_value(value)

    def __setattr__(self, key: str, value: Any) -> None:
        if key.startswith("_"):
            return super().__setattr__(key, value)
        self[key] = value

    def __getitem__(self, key: str) -> Any:  # type: ignore[override]
        value = super().__getitem__(key)
        return _wrap_value(value)

    def to_dict(self) -> Dict[str, Any]:
        return _unwrap_value(self)


def _wrap_value(value: Any) -> Any:
    if isinstance(value, dict) and not isinstance(value, ConfigNode):
        return ConfigNode(value)
    if isinstance(value, list):
        return [
            _wrap_value(item) if isinstance(item, (dict, list)) else item
            for item in value
        ]
    return value


def _unwrap_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _unwrap_value(v) for k, v in dict.items(value)}
    if isinstance(value, list):
        return [_unwrap_value(v) for v in value]
    return value


def to_plain_dict(config: Any) -> Any:
    """Convert a possibly wrapped config into built-in containers."""

    return _unwrap_value(config)


def _read_yaml(path: Path) -> Dict[str, Any]:
    parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    return parsed or {}


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if (
            key in merged
            and isinstance(merged[key], dict)
            and isinstance(value, dict)
        ):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def _resolve_repo_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _candidate_paths(repo_root: Path, entry: str) -> Iterable[Path]:
    relative = Path(entry)
    if not relative.suffix:
        relative = relative.with_suffix(".yaml")
    yield repo_root / relative
    yield repo_root / "configs" / relative


def _load_defaults(repo_root: Path, defaults: Iterable[Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    for entry in defaults:
        if not isinstance(entry, str):
            raise TypeError("Default entries must be strings")
        if entry == "_self_":
            continue
        for candidate in _candidate_paths(repo_root, entry):
            if candidate.exists():
                merged = _merge_dicts(merged, _read_yaml(candidate))
                break
        else:
            raise FileNotFoundError(f"Unable to resolve default entry '{entry}'")
    return merged


def load_config(path: str | Path) -> ConfigNode:
    """Load the final run configuration.

    ``configs/base.yaml`` is merged with the files named in the experiment's
    ``defaults`` list and then with the experiment file itself.

    Parameters
    ----------
    path:
        Path to the experiment configuration file, relative to the repository
        root or absolute.
    """

    repo_root = _resolve_repo_root()
    experiment_path = (repo_root / path).resolve()
    if not experiment_path.exists():
        raise FileNotFoundError(f"Experiment config {experiment_path} not found")

    base_path = repo_root / "configs" / "base.yaml"
    if not base_path.exists():
        raise FileNotFoundError("Base configuration is missing")

    base_config = _read_yaml(base_path)
    experiment_config = _read_yaml(experiment_path)
    defaults = experiment_config.pop("defaults", [])

    merged = _merge_dicts(base_config, _load_defaults(repo_root, defaults))
    merged = _merge_dicts(merged, experiment_config)

    merged.setdefault("experiment", {})
    merged["experiment"].setdefault("name", experiment_path.stem)
    return ConfigNode(merged)


def distribution_entries(config: Any) -> List[Tuple[Any, Any]]:
    """Read ``distribution.entries`` as ``(value, weight)`` pairs."""

    distribution = config.get("distribution") if isinstance(config, dict) else None
    if not distribution or "entries" not in distribution:
        raise KeyError("Config must define distribution.entries")
    pairs: List[Tuple[Any, Any]] = []
    for entry in distribution["entries"]:
        if not isinstance(entry, dict) or "weight" not in entry:
            raise TypeError("Each distribution entry must be a mapping with a 'weight'")
        pairs.append((entry.get("value"), entry["weight"]))
    return pairs


__all__ = ["ConfigNode", "distribution_entries", "load_config", "to_plain_dict"]
