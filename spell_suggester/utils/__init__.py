"""Logging, configuration and metrics helpers."""

from .config_manager import Config
from .logger_utils import Log, engine_log
from .metrics_tracker import Metrics

__all__ = ["Config", "Log", "Metrics", "engine_log"]
