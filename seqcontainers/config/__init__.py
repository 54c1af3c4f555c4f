"""Configuration loading and validation package."""

from .loader import load_containers_config, load_containers_config_from_mapping
from .models import (
    ContainersConfig,
    DynArraySettings,
    FixedArraySettings,
    LinkedListSettings,
    TelemetryConfig,
)

__all__ = [
    "ContainersConfig",
    "DynArraySettings",
    "FixedArraySettings",
    "LinkedListSettings",
    "TelemetryConfig",
    "load_containers_config",
    "load_containers_config_from_mapping",
]
