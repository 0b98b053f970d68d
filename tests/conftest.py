"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

ENV_VARS = [
    "UP_API_TOKEN",
    "UP_TIMEOUT",
    "UP_PAGE_SIZE",
    "ACTUAL_PASSWORD",
    "ACTUAL_ENCRYPTION_PASSWORD",
    "UPSYNC_CONFIG",
    "LOG_LEVEL",
    "DEBUG",
]


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for test files."""
    return Path(tmp_path)


@pytest.fixture
def sample_up_transaction() -> Dict[str, Any]:
    """Sample Up transaction resource as returned by the API."""
    return {
        "type": "transactions",
        "id": "tx-0001",
        "attributes": {
            "status": "SETTLED",
            "rawText": "STORE#123",
            "description": "Coffee Shop",
            "message": "flat white",
            "holdInfo": {"amount": {"currencyCode": "AUD", "value": "-4.50"}},
            "amount": {"currencyCode": "AUD", "value": "-4.50", "valueInBaseUnits": -450},
            "settledAt": "2024-01-16T00:00:00+11:00",
            "createdAt": "2024-01-15T10:30:00+11:00",
        },
    }


@pytest.fixture
def sparse_up_transaction() -> Dict[str, Any]:
    """Up transaction with every optional attribute null."""
    return {
        "type": "transactions",
        "id": "tx-0002",
        "attributes": {
            "status": "HELD",
            "rawText": None,
            "description": "Salary",
            "message": None,
            "holdInfo": None,
            "amount": {"currencyCode": "AUD", "value": "2500.00", "valueInBaseUnits": 250000},
            "settledAt": None,
            "createdAt": "2024-02-01T09:00:00+11:00",
        },
    }


@pytest.fixture
def config_data(temp_dir) -> Dict[str, Any]:
    """Valid config-file contents."""
    return {
        "apiKey": "up:yeah:test-token",
        "csvFilePath": "transactions.csv",
        "serverURL": "http://localhost:5006",
        "password": "actual-password",
        "budgetId": "Test Budget",
        "EE2E": False,
        "encryptionPassword": "",
        "accountName": "Up Spending",
    }


@pytest.fixture
def write_config(temp_dir):
    """Write a config file into temp_dir and return its path."""

    def _write(data: Dict[str, Any], name: str = "config.json") -> Path:
        path = temp_dir / name
        path.write_text(json.dumps(data))
        return path

    return _write


@pytest.fixture
def csv_lines() -> List[str]:
    """CSV buffer contents in exporter column order."""
    return [
        "id,status,rawText,description,message,holdInfo,amount,settledAt,createdAt",
        "tx-1,SETTLED,STORE#123,Coffee Shop,flat white,,-4.50,2024-01-16T00:00:00+11:00,2024-01-15T10:30:00Z",
        "tx-2,HELD,,Salary,,,2500.00,,2024-02-01T09:00:00+11:00",
        "tx-3,SETTLED,,Refund,,,12,,",
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Keep host environment variables out of configuration loading."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "up: Tests for the Up API exporter")
    config.addinivalue_line("markers", "actual: Tests for the Actual Budget importer")
