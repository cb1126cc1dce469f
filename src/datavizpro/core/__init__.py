"""Core infrastructure: configuration, logging, shared models."""

from datavizpro.core.config import AnalysisConfig, Settings, get_settings
from datavizpro.core.logging import configure_logging, get_logger, log_context

__all__ = [
    "AnalysisConfig",
    "Settings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "log_context",
]
