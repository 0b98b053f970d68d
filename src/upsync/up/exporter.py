#!/usr/bin/env python3
"""
Up Transaction Exporter

Downloads every transaction for every Up account and writes them to the CSV
buffer file, overwriting any previous export.

Functions:
- fetch_account_transactions: Paginate one account up to the per-account cap
- download_transactions: Fetch all accounts' transactions
- write_csv: Serialize CsvRows with a header row
- export_transactions: Full export stage; never raises
"""

import logging
import time
from collections.abc import Iterable
from pathlib import Path

import pandas as pd
import requests

from ..core.stage import StageResult
from .client import UpClient
from .models import CSV_COLUMNS, CsvRow, UpTransaction

logger = logging.getLogger(__name__)

DEFAULT_TRANSACTION_LIMIT = 1000


def fetch_account_transactions(
    client: UpClient, account_id: str, limit: int = DEFAULT_TRANSACTION_LIMIT
) -> list[UpTransaction]:
    """
    Fetch transactions for one account, stopping at the cursor's end or the cap.

    The cap is checked before each page request, so whole pages are kept and
    the result may exceed the limit by less than one page.

    Args:
        client: Up API client
        account_id: Up account identifier
        limit: Stop requesting pages once this many transactions are held

    Returns:
        Transactions in API order
    """
    transactions: list[UpTransaction] = []

    for page, has_more in client.iter_transaction_pages(account_id):
        transactions.extend(UpTransaction.from_dict(item) for item in page)
        if has_more and len(transactions) >= limit:
            logger.warning(
                f"Stopped paging account {account_id} at {len(transactions)} transactions (limit {limit})"
            )
            break

    return transactions


def download_transactions(client: UpClient, limit: int = DEFAULT_TRANSACTION_LIMIT) -> list[UpTransaction]:
    """
    Fetch transactions for every account visible to the client.

    Returns:
        All transactions, grouped by account in listing order
    """
    all_transactions: list[UpTransaction] = []

    for account in client.list_accounts():
        account_transactions = fetch_account_transactions(client, account.id, limit=limit)
        logger.info("Fetched %d transactions from %s", len(account_transactions), account.display_name or account.id)
        all_transactions.extend(account_transactions)

    return all_transactions


def write_csv(rows: Iterable[CsvRow], csv_path: str | Path) -> int:
    """
    Write rows to CSV with a header, replacing any existing file.

    Args:
        rows: Rows to write
        csv_path: Destination file

    Returns:
        Number of rows written
    """
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame([row.to_dict() for row in rows], columns=list(CSV_COLUMNS))
    df.to_csv(csv_path, index=False)
    return len(df)


def export_transactions(
    client: UpClient, csv_path: str | Path, limit: int = DEFAULT_TRANSACTION_LIMIT
) -> StageResult:
    """
    Run the export stage.

    Errors are logged and reported in the result; they are never raised so
    the import stage can still run.

    Args:
        client: Up API client
        csv_path: CSV buffer file to overwrite
        limit: Per-account transaction cap

    Returns:
        StageResult describing the export
    """
    start = time.monotonic()
    csv_path = Path(csv_path)

    try:
        transactions = download_transactions(client, limit=limit)
        written = write_csv((CsvRow.from_transaction(t) for t in transactions), csv_path)
    except requests.RequestException as e:
        logger.error(f"Error downloading Up data: {e}")
        return StageResult(stage="export", success=False, error_message=f"Up API request failed: {e}")
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Error decoding Up data: {e}")
        return StageResult(stage="export", success=False, error_message=f"Unexpected Up API response: {e}")
    except OSError as e:
        logger.error(f"Error writing CSV file {csv_path}: {e}")
        return StageResult(stage="export", success=False, error_message=f"Could not write {csv_path}: {e}")
    except Exception as e:  # noqa: BLE001
        logger.exception(f"Unexpected error downloading Up data: {e}")
        return StageResult(stage="export", success=False, error_message=f"Unexpected error: {e}")

    logger.info(f"CSV file {csv_path} has been created successfully")
    return StageResult(
        stage="export",
        success=True,
        items_processed=written,
        outputs=[csv_path],
        execution_time_seconds=time.monotonic() - start,
    )
