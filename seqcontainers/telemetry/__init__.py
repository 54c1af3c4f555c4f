"""Logging setup for embedders and the test harness."""
from .logging_setup import JsonFormatter, configure_from_config, configure_logging

__all__ = ["JsonFormatter", "configure_from_config", "configure_logging"]
