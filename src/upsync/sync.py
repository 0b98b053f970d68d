#!/usr/bin/env python3
"""
Sync Orchestration

Decides whether the export stage needs to run, then runs export and import
strictly in sequence: the import only starts after the export has finished
writing the CSV buffer.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from .actual.client import ActualBudgetClient
from .actual.importer import import_csv
from .core.config import Config, UpConfig
from .core.stage import StageResult
from .up.client import UpClient
from .up.exporter import export_transactions

logger = logging.getLogger(__name__)


class DownloadDecision(Enum):
    """Why the export stage does or does not run."""

    NO_API_KEY = "no_api_key"
    FILE_EXISTS = "file_exists"
    OVERWRITE = "overwrite"
    FILE_MISSING = "file_missing"

    @property
    def should_download(self) -> bool:
        return self in (DownloadDecision.OVERWRITE, DownloadDecision.FILE_MISSING)


DECISION_MESSAGES = {
    DownloadDecision.NO_API_KEY: "Up API key is missing in the config file, skipping the download step.",
    DownloadDecision.FILE_EXISTS: "CSV file already exists. Skipping the download step.",
    DownloadDecision.OVERWRITE: (
        "CSV file already exists, but overwrite flag given. "
        "Downloading Up data and overwriting the CSV file."
    ),
    DownloadDecision.FILE_MISSING: "CSV file does not exist. Downloading first.",
}


def decide_download(config: Config, overwrite: bool = False) -> DownloadDecision:
    """
    Decide whether to download fresh data from Up.

    Args:
        config: Sync configuration
        overwrite: Re-download even when the CSV file exists

    Returns:
        DownloadDecision for this run
    """
    if not config.up.api_key:
        return DownloadDecision.NO_API_KEY
    if config.csv_file_path.exists():
        return DownloadDecision.OVERWRITE if overwrite else DownloadDecision.FILE_EXISTS
    return DownloadDecision.FILE_MISSING


@dataclass
class SyncReport:
    """Outcome of a full sync run."""

    decision: DownloadDecision
    stages: list[StageResult] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(stage.success for stage in self.stages)


def run_sync(
    config: Config,
    overwrite: bool = False,
    up_client_factory: Callable[[UpConfig], UpClient] | None = None,
    actual_client: ActualBudgetClient | None = None,
    echo: Callable[[str], None] = logger.info,
) -> SyncReport:
    """
    Run export (when needed) followed by import.

    A failed export does not prevent the import; the import then works from
    whatever CSV file is on disk.

    Args:
        config: Sync configuration, loaded once by the caller
        overwrite: Force re-download when the CSV exists
        up_client_factory: Builds the Up client; UpClient when None
        actual_client: Budget client; built from config when None
        echo: Sink for user-facing progress messages

    Returns:
        SyncReport with one StageResult per stage

    Raises:
        SyncError: INITIALIZATION kind from the import stage
    """
    decision = decide_download(config, overwrite)
    echo(DECISION_MESSAGES[decision])
    report = SyncReport(decision=decision)

    if decision.should_download:
        echo("Downloading data from Up...")
        factory = up_client_factory or UpClient
        with factory(config.up) as up_client:
            export_result = export_transactions(
                up_client, config.csv_file_path, limit=config.up.transaction_limit
            )
        report.stages.append(export_result)
        if export_result.success:
            echo(f"CSV file {config.csv_file_path} has been created successfully.")
        else:
            echo(f"Download failed: {export_result.error_message}")
    else:
        report.stages.append(StageResult.skipped("export", decision.value))

    report.stages.append(import_csv(config, config.csv_file_path, client=actual_client))
    return report
