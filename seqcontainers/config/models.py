"""Typed configuration models for container defaults.

pydantic validates YAML (or in-memory mappings) and hands frozen objects to
:class:`~seqcontainers.factory.ContainerFactory`. Every section has defaults,
so an empty file yields a usable config.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

from seqcontainers.containers.dynarray import DEFAULT_GROWTH_FACTOR

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class DynArraySettings(BaseModel):
    """Initial capacity and growth policy for DynArray instances."""

    default_capacity: PositiveInt = 16
    growth_factor: float = Field(DEFAULT_GROWTH_FACTOR, gt=1.0, allow_inf_nan=False, description="new = max(old + 1, old * factor)")

    model_config = ConfigDict(frozen=True)


class FixedArraySettings(BaseModel):
    """Slot count used when a FixedArray is built without an explicit size."""

    default_size: PositiveInt = 16

    model_config = ConfigDict(frozen=True)


class LinkedListSettings(BaseModel):
    """Traversal switch for positional lookups."""

    seek_from_nearest_end: bool = True

    model_config = ConfigDict(frozen=True)


class TelemetryConfig(BaseModel):
    """Logging switches applied by ``configure_from_config``."""

    log_level: str = Field("WARNING")
    log_dir: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


class ContainersConfig(BaseModel):
    """Top-level config combining per-container defaults and telemetry."""

    dynarray: DynArraySettings = Field(default_factory=DynArraySettings)
    fixed_array: FixedArraySettings = Field(default_factory=FixedArraySettings)
    linked_list: LinkedListSettings = Field(default_factory=LinkedListSettings)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    model_config = ConfigDict(frozen=True)
