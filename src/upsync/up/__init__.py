"""
Up Integration Package

Read-only access to the Up banking API and export of its transactions to the
CSV buffer.
"""

from .client import UpClient
from .exporter import (
    DEFAULT_TRANSACTION_LIMIT,
    download_transactions,
    export_transactions,
    fetch_account_transactions,
    write_csv,
)
from .models import CSV_COLUMNS, CsvRow, UpAccount, UpTransaction

__all__ = [
    "CSV_COLUMNS",
    "DEFAULT_TRANSACTION_LIMIT",
    "CsvRow",
    "UpAccount",
    "UpClient",
    "UpTransaction",
    "download_transactions",
    "export_transactions",
    "fetch_account_transactions",
    "write_csv",
]
