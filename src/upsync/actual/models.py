#!/usr/bin/env python3
"""
Actual Budget Domain Models

The transaction shape submitted to the Actual Budget server.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ImportTransaction:
    """
    Transaction ready for import into Actual Budget.

    Amount is in integer minor units (cents). Category is always empty at
    import time; categorization happens inside Actual.
    """

    id: str
    date: str  # YYYY-MM-DD, or "" when the source had no timestamp
    amount: int
    payee_name: str
    imported_payee: str
    notes: str
    category: str = ""
    imported_id: str | None = None
    account: str | None = None

    def for_account(self, account_name: str) -> "ImportTransaction":
        """Copy with the deduplication id and target account attached."""
        return replace(self, imported_id=self.id, account=account_name)

