"""Configuration file helpers (YAML or JSON presets)."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from .models import RunConfig

CONFIG_EXTENSIONS = (".yaml", ".yml", ".json")


def _read_file(path: Path) -> dict:
    text = path.read_text(encoding="utf-8")
    if path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")
    return data


def _write_file(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as stream:
        if path.suffix in (".yaml", ".yml"):
            yaml.safe_dump(payload, stream, allow_unicode=True, sort_keys=False)
        else:
            json.dump(payload, stream, indent=2, ensure_ascii=False)


def load_run_config(path: Path | str | None) -> RunConfig:
    """Load a run configuration; ``None`` yields the built-in defaults."""

    if path is None:
        return RunConfig()
    path = Path(path)
    if path.suffix not in CONFIG_EXTENSIONS:
        raise ValueError(f"Unsupported configuration file type: {path.suffix or path.name}")
    if not path.exists():
        raise FileNotFoundError(f"Configuration not found: {path}")
    return RunConfig.model_validate(_read_file(path))


def save_run_config(path: Path | str, config: RunConfig) -> Path:
    path = Path(path)
    if path.suffix not in CONFIG_EXTENSIONS:
        raise ValueError(f"Unsupported configuration file type: {path.suffix or path.name}")
    _write_file(path, config.model_dump(mode="json"))
    return path


__all__ = ["CONFIG_EXTENSIONS", "load_run_config", "save_run_config"]
