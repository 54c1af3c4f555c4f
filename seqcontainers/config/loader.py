"""YAML loader for the config subsystem.

The file layout mirrors :class:`~seqcontainers.config.models.ContainersConfig`:
one top-level key per section (``dynarray``, ``fixed_array``, ``linked_list``,
``telemetry``). Omitted sections fall back to model defaults.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from .models import ContainersConfig

_DEFAULT_CONFIG_PATH = Path("config") / "containers.yml"


def _read_yaml(path: Path) -> Mapping[str, Any]:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"YAML root must be a mapping in {path}")
    return data


def load_containers_config_from_mapping(data: Mapping[str, Any]) -> ContainersConfig:
    """Validate an already-parsed mapping."""

    return ContainersConfig.model_validate(dict(data))


def load_containers_config(path: Path | str = _DEFAULT_CONFIG_PATH) -> ContainersConfig:
    """Load ``containers.yml`` and validate it."""

    return load_containers_config_from_mapping(_read_yaml(Path(path)))


__all__ = ["load_containers_config", "load_containers_config_from_mapping"]
