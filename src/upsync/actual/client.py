#!/usr/bin/env python3
"""
Actual Budget Client

Scoped session against an Actual Budget server using the actualpy library.
Opening the session logs in and downloads the budget (decrypting it when
end-to-end encryption is enabled); closing it always releases the session.
"""

import logging
from collections.abc import Callable, Iterable
from contextlib import ExitStack
from decimal import Decimal
from typing import Any

import requests
from actual import Actual
from actual.exceptions import ActualError
from actual.queries import get_account, reconcile_transaction

from ..core.config import ActualConfig
from ..core.dates import parse_day
from ..core.errors import SyncError, SyncErrorKind
from .models import ImportTransaction

logger = logging.getLogger(__name__)


class ActualBudgetClient:
    """
    Actual Budget session with explicit open/close.

    Usable as a context manager; close() runs on every exit path and logs
    (rather than raises) teardown failures so they never mask the original
    error.
    """

    def __init__(self, config: ActualConfig, actual_factory: Callable[..., Any] = Actual):
        """Initialize with Actual configuration; nothing is contacted until open()."""
        self.config = config
        self._actual_factory = actual_factory
        self._stack: ExitStack | None = None
        self.actual: Any = None

    def open(self) -> None:
        """
        Log in and download the configured budget.

        Raises:
            SyncError: INITIALIZATION kind if login or download fails
        """
        encryption_password = self.config.encryption_password if self.config.e2ee else None
        if encryption_password:
            logger.info("End to end encryption enabled. Downloading budget data using provided password...")
        else:
            logger.info("Downloading budget data...")

        stack = ExitStack()
        try:
            actual = self._actual_factory(
                base_url=self.config.server_url,
                password=self.config.password,
                file=self.config.budget_id,
                encryption_password=encryption_password,
            )
            self.actual = stack.enter_context(actual)
        except (ActualError, requests.RequestException, OSError) as e:
            stack.close()
            raise SyncError(SyncErrorKind.INITIALIZATION, f"Failed to initialize Actual API: {e}") from e

        self._stack = stack
        logger.info("API initialized successfully")

    def close(self) -> None:
        """Release the session; safe to call more than once."""
        stack, self._stack = self._stack, None
        self.actual = None
        if stack is None:
            return
        try:
            stack.close()
        except Exception as e:  # noqa: BLE001
            logger.error(f"Error during API shutdown: {e}")

    def add_transactions(self, account_name: str, transactions: Iterable[ImportTransaction]) -> int:
        """
        Submit transactions to an account in one commit.

        Transactions whose imported_id already exists in the budget are
        matched by the server-side reconciliation instead of duplicated.

        Args:
            account_name: Target account name in the budget
            transactions: Transactions with imported_id attached

        Returns:
            Number of transactions submitted

        Raises:
            SyncError: UPLOAD kind if the account is missing or the commit fails
        """
        if self.actual is None:
            raise SyncError(SyncErrorKind.UPLOAD, "Actual session is not open")

        session = self.actual.session
        try:
            account = get_account(session, account_name)
            if account is None:
                raise SyncError(SyncErrorKind.UPLOAD, f"Account not found in budget: {account_name}")

            matched: list[Any] = []
            count = 0
            for transaction in transactions:
                try:
                    day = parse_day(transaction.date)
                except ValueError as e:
                    raise SyncError(
                        SyncErrorKind.UPLOAD, f"Transaction {transaction.id} has no valid date: {e}"
                    ) from e

                reconciled = reconcile_transaction(
                    session,
                    date=day,
                    account=account,
                    payee=transaction.payee_name,
                    notes=transaction.notes,
                    category=transaction.category or None,
                    amount=Decimal(transaction.amount) / 100,
                    imported_id=transaction.imported_id,
                    imported_payee=transaction.imported_payee,
                    update_existing=False,
                    already_matched=matched,
                )
                matched.append(reconciled)
                count += 1

            self.actual.commit()
        except (ActualError, requests.RequestException, LookupError) as e:
            raise SyncError(SyncErrorKind.UPLOAD, f"Error adding transactions: {e}") from e

        logger.info(f"Submitted {count} transactions to {account_name}")
        return count

    def __enter__(self) -> "ActualBudgetClient":
        self.open()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
