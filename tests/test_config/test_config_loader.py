from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError

from seqcontainers.config import (
    ContainersConfig,
    load_containers_config,
    load_containers_config_from_mapping,
)


def _write_yaml(path: Path, content: str) -> Path:
    path.write_text(dedent(content), encoding="utf-8")
    return path


def test_load_containers_config_should_parse_valid_yaml(tmp_path: Path) -> None:
    path = _write_yaml(
        tmp_path / "containers.yml",
        """
        dynarray:
          default_capacity: 32
          growth_factor: 1.5
        fixed_array:
          default_size: 8
        linked_list:
          seek_from_nearest_end: false
        telemetry:
          log_level: debug
          log_dir: data/logs
        """,
    )
    config = load_containers_config(path)
    assert config.dynarray.default_capacity == 32
    assert config.dynarray.growth_factor == 1.5
    assert config.fixed_array.default_size == 8
    assert config.linked_list.seek_from_nearest_end is False
    assert config.telemetry.log_level == "DEBUG"
    assert config.telemetry.log_dir == "data/logs"


def test_blank_file_should_yield_defaults(tmp_path: Path) -> None:
    config = load_containers_config(_write_yaml(tmp_path / "containers.yml", ""))
    assert config == ContainersConfig()
    assert config.dynarray.default_capacity == 16
    assert config.dynarray.growth_factor == 2.0
    assert config.telemetry.log_level == "WARNING"


def test_missing_file_should_raise(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_containers_config(tmp_path / "absent.yml")


def test_non_mapping_root_should_raise(tmp_path: Path) -> None:
    path = _write_yaml(tmp_path / "containers.yml", "- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_containers_config(path)


@pytest.mark.parametrize(
    "payload",
    [
        {"dynarray": {"default_capacity": 0}},
        {"dynarray": {"growth_factor": 1.0}},
        {"fixed_array": {"default_size": -3}},
        {"telemetry": {"log_level": "chatty"}},
    ],
)
def test_invalid_values_should_fail_validation(payload) -> None:
    with pytest.raises(ValidationError):
        load_containers_config_from_mapping(payload)


def test_config_should_be_frozen() -> None:
    config = ContainersConfig()
    with pytest.raises(ValidationError):
        config.dynarray.default_capacity = 4


@pytest.mark.parametrize("factor", [float("inf"), float("nan")])
def test_non_finite_growth_factor_should_fail_validation(factor) -> None:
    with pytest.raises(ValidationError):
        load_containers_config_from_mapping({"dynarray": {"default_capacity": 1, "growth_factor": factor}})
