#!/usr/bin/env python3
"""
Up Domain Models

Models for Up banking API resources and their flattened CSV projection.
UpTransaction mirrors the API's JSON:API shape; CsvRow is the fixed-column
record written to the intermediate CSV file.
"""

from dataclasses import asdict, dataclass
from typing import Any

from ..core.json_utils import compact_json

# Column order of the CSV buffer; the header row must match exactly
CSV_COLUMNS: tuple[str, ...] = (
    "id",
    "status",
    "rawText",
    "description",
    "message",
    "holdInfo",
    "amount",
    "settledAt",
    "createdAt",
)


@dataclass
class UpAccount:
    """Up account from API."""

    id: str
    display_name: str
    account_type: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UpAccount":
        """
        Create UpAccount from an API resource object.

        Args:
            data: One element of the /accounts "data" array

        Returns:
            UpAccount instance
        """
        attributes = data.get("attributes") or {}
        return cls(
            id=data["id"],
            display_name=attributes.get("displayName", ""),
            account_type=attributes.get("accountType"),
        )


@dataclass
class UpTransaction:
    """
    Up transaction from API.

    Amount is kept as the API's decimal text (e.g. "-12.50"); it is only
    converted to minor units on import.
    """

    id: str
    status: str
    description: str
    amount: str
    created_at: str
    raw_text: str | None = None
    message: str | None = None
    hold_info: dict[str, Any] | None = None
    settled_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UpTransaction":
        """
        Create UpTransaction from an API resource object.

        Args:
            data: One element of a transactions page "data" array

        Returns:
            UpTransaction instance

        Raises:
            KeyError: If the resource lacks an id or attributes
        """
        attributes = data["attributes"]
        amount = attributes.get("amount") or {}
        return cls(
            id=data["id"],
            status=attributes.get("status", ""),
            description=attributes.get("description", ""),
            amount=str(amount.get("value", "")),
            created_at=attributes.get("createdAt", ""),
            raw_text=attributes.get("rawText"),
            message=attributes.get("message"),
            hold_info=attributes.get("holdInfo"),
            settled_at=attributes.get("settledAt"),
        )


def _cell(value: Any) -> str:
    """Render a value as CSV cell text (null becomes empty)."""
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return compact_json(value)
    return str(value)


@dataclass(frozen=True)
class CsvRow:
    """
    One line of the CSV buffer.

    Field names follow CSV_COLUMNS; every value is text.
    """

    id: str
    status: str
    rawText: str  # noqa: N815
    description: str
    message: str
    holdInfo: str  # noqa: N815
    amount: str
    settledAt: str  # noqa: N815
    createdAt: str  # noqa: N815

    @classmethod
    def from_transaction(cls, transaction: UpTransaction) -> "CsvRow":
        """Project an UpTransaction onto the CSV columns."""
        return cls(
            id=transaction.id,
            status=transaction.status,
            rawText=_cell(transaction.raw_text),
            description=_cell(transaction.description),
            message=_cell(transaction.message),
            holdInfo=_cell(transaction.hold_info),
            amount=transaction.amount,
            settledAt=_cell(transaction.settled_at),
            createdAt=_cell(transaction.created_at),
        )

    @classmethod
    def from_csv_dict(cls, data: dict[str, Any]) -> "CsvRow":
        """
        Create CsvRow from a parsed CSV record.

        Missing columns become empty strings.
        """
        return cls(**{column: _cell(data.get(column)) for column in CSV_COLUMNS})

    def to_dict(self) -> dict[str, str]:
        """Dictionary keyed by CSV column, in column order."""
        values = asdict(self)
        return {column: values[column] for column in CSV_COLUMNS}
