#!/usr/bin/env python3
"""
CSV Buffer Parser

Reads the CSV buffer written by the exporter and maps each row onto the
Actual Budget transaction shape.

Functions:
- transform_row: Map one CsvRow to an ImportTransaction
- parse_csv: Stream ImportTransactions from a CSV file in file order
- wait_for_file: Block until a file exists
"""

import logging
import time
from collections.abc import Callable, Iterator
from pathlib import Path

import pandas as pd

from ..core.currency import major_text_to_minor_units
from ..core.dates import timestamp_to_day
from ..core.errors import SyncError, SyncErrorKind
from ..up.models import CsvRow
from .models import ImportTransaction

logger = logging.getLogger(__name__)

# Rows read per chunk while streaming the CSV
CHUNK_SIZE = 500


def transform_row(row: CsvRow) -> ImportTransaction:
    """
    Map a CSV row onto an ImportTransaction.

    Args:
        row: Parsed CSV row

    Returns:
        ImportTransaction without account or deduplication id

    Raises:
        ValueError: If the amount has no integer part
    """
    return ImportTransaction(
        id=row.id,
        date=timestamp_to_day(row.createdAt),
        amount=major_text_to_minor_units(row.amount),
        payee_name=row.description,
        imported_payee=row.rawText or row.description,
        notes=row.message or "",
        category="",
    )


def parse_csv(csv_path: str | Path, chunk_size: int = CHUNK_SIZE) -> Iterator[ImportTransaction]:
    """
    Stream transactions from the CSV buffer.

    Every cell is read as text so amounts and identifiers are never coerced.
    Rows are yielded in file order and each row is visited once.

    Args:
        csv_path: CSV file written by the exporter
        chunk_size: Rows per pandas chunk

    Yields:
        ImportTransaction per CSV row

    Raises:
        SyncError: PARSE kind for unreadable files or malformed rows
    """
    csv_path = Path(csv_path)

    try:
        reader = pd.read_csv(csv_path, dtype=str, keep_default_na=False, chunksize=chunk_size)
        with reader:
            line_number = 1
            for chunk in reader:
                for record in chunk.to_dict(orient="records"):
                    line_number += 1
                    # Short rows leave NaN in the trailing cells
                    cells = {key: "" if pd.isna(value) else value for key, value in record.items()}
                    try:
                        yield transform_row(CsvRow.from_csv_dict(cells))
                    except ValueError as e:
                        raise SyncError(SyncErrorKind.PARSE, f"{csv_path} row {line_number}: {e}") from e
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, OSError) as e:
        raise SyncError(SyncErrorKind.PARSE, f"Could not read {csv_path}: {e}") from e


def wait_for_file(
    path: str | Path,
    interval: float = 1.0,
    timeout: float | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """
    Poll until a file exists.

    Args:
        path: File to wait for
        interval: Seconds between checks
        timeout: Give up after this many seconds; None waits indefinitely
        sleep: Sleep function (injectable for tests)

    Returns:
        True once the file exists, False if the timeout elapsed first
    """
    path = Path(path)
    waited = 0.0

    if not path.exists():
        logger.info(f"Waiting for {path} to appear")

    while not path.exists():
        if timeout is not None and waited >= timeout:
            return False
        sleep(interval)
        waited += interval

    return True
