"""
Up → Actual Sync

Copies bank transactions from the Up banking API into an Actual Budget
server, using a CSV file as the hand-off between the two.

Domain Packages:
- core: Configuration, error taxonomy, currency and date helpers
- up: Up API client, models and CSV exporter
- actual: CSV parser, Actual Budget client and importer
- cli: Command-line entry point

Example Usage:
    from upsync import load_config, run_sync

    config = load_config("config.json")
    report = run_sync(config)
"""

__version__ = "0.1.0"

from .core.config import Config, ConfigError, load_config
from .core.errors import SyncError, SyncErrorKind
from .sync import DownloadDecision, SyncReport, decide_download, run_sync

__all__ = [
    # Configuration
    "Config",
    "ConfigError",
    "load_config",
    # Errors
    "SyncError",
    "SyncErrorKind",
    # Orchestration
    "DownloadDecision",
    "SyncReport",
    "decide_download",
    "run_sync",
]
