"""
Core Utilities Package

Shared configuration, error taxonomy and value helpers used by both stages.
"""

from .config import ActualConfig, Config, ConfigError, UpConfig, load_config
from .currency import major_text_to_minor_units, parse_int_prefix
from .dates import parse_day, timestamp_to_day
from .errors import SyncError, SyncErrorKind
from .stage import StageResult

__all__ = [
    # Configuration
    "ActualConfig",
    "Config",
    "ConfigError",
    "UpConfig",
    "load_config",
    # Errors
    "SyncError",
    "SyncErrorKind",
    # Values
    "StageResult",
    "major_text_to_minor_units",
    "parse_day",
    "parse_int_prefix",
    "timestamp_to_day",
]
