"""
Actual Budget Integration Package

Parses the CSV buffer into Actual transactions and uploads them through an
authenticated budget session.
"""

from .client import ActualBudgetClient
from .importer import import_csv
from .models import ImportTransaction
from .parser import parse_csv, transform_row, wait_for_file

__all__ = [
    "ActualBudgetClient",
    "ImportTransaction",
    "import_csv",
    "parse_csv",
    "transform_row",
    "wait_for_file",
]
