#!/usr/bin/env python3
"""
Actual Budget Importer

Import stage: waits for the CSV buffer, opens a budget session, parses and
transforms every row, and uploads the batch to the configured account.

Error policy:
- INITIALIZATION errors are re-raised; the caller ends the process
- PARSE and UPLOAD errors are logged and reported in the StageResult
- Anything else is logged as unexpected and reported
- The budget session is closed on every path
"""

import logging
import time
from pathlib import Path

from ..core.config import Config
from ..core.errors import SyncError, SyncErrorKind
from ..core.stage import StageResult
from .client import ActualBudgetClient
from .parser import parse_csv, wait_for_file

logger = logging.getLogger(__name__)

_ERROR_PREFIXES = {
    SyncErrorKind.PARSE: "Error parsing CSV file",
    SyncErrorKind.UPLOAD: "Error adding transactions",
}


def import_csv(
    config: Config,
    csv_path: str | Path,
    client: ActualBudgetClient | None = None,
    wait_timeout: float | None = None,
) -> StageResult:
    """
    Run the import stage.

    Args:
        config: Sync configuration (Actual credentials and target account)
        csv_path: CSV buffer to import
        client: Budget client; built from config when None
        wait_timeout: Seconds to wait for the CSV file; None waits indefinitely

    Returns:
        StageResult describing the import

    Raises:
        SyncError: INITIALIZATION kind when login or budget download fails
    """
    start = time.monotonic()
    csv_path = Path(csv_path)
    account_name = config.actual.account_name

    if not wait_for_file(csv_path, timeout=wait_timeout):
        logger.error(f"CSV file never appeared: {csv_path}")
        return StageResult(stage="import", success=False, error_message=f"CSV file not found: {csv_path}")

    if client is None:
        client = ActualBudgetClient(config.actual)

    try:
        client.open()

        transactions = [t.for_account(account_name) for t in parse_csv(csv_path)]
        logger.info(f"Parsed {len(transactions)} transactions from {csv_path}")

        count = client.add_transactions(account_name, transactions)
        logger.info("Transactions added successfully")
    except SyncError as e:
        # Fatal errors are reported by the caller that ends the process
        if e.is_fatal:
            raise
        logger.error(f"{_ERROR_PREFIXES[e.kind]}: {e.message}")
        return StageResult(
            stage="import",
            success=False,
            error_message=str(e),
            metadata={"error_kind": e.kind.value},
        )
    except Exception as e:  # noqa: BLE001
        logger.exception(f"Unexpected error: {e}")
        return StageResult(stage="import", success=False, error_message=f"Unexpected error: {e}")
    finally:
        client.close()

    return StageResult(
        stage="import",
        success=True,
        items_processed=count,
        execution_time_seconds=time.monotonic() - start,
        metadata={"account": account_name},
    )
