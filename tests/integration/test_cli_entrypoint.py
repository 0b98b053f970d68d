#!/usr/bin/env python3
"""
Integration tests for the CLI entry point.

Runs the real command with the network edges (Up HTTP session and the Actual
budget client) replaced by fakes.
"""

from unittest.mock import MagicMock, patch

import pandas as pd
import pytest
from click.testing import CliRunner

from tests.fixtures.up_api import FakeUpApi, make_transaction
from upsync.actual.client import ActualBudgetClient
from upsync.cli.main import main
from upsync.core.config import UpConfig
from upsync.core.errors import SyncError, SyncErrorKind
from upsync.up.client import UpClient


def fake_actual_client() -> MagicMock:
    client = MagicMock(spec=ActualBudgetClient)
    client.add_transactions.side_effect = lambda account, transactions: len(list(transactions))
    return client


@pytest.mark.integration
class TestCLIMain:
    """Test the upsync command end to end."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_lists_overwrite_flag(self):
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "--overwrite" in result.output

    def test_unknown_flag_rejected(self):
        result = self.runner.invoke(main, ["--dry-run"])

        assert result.exit_code != 0

    def test_missing_config_exits_1(self, temp_dir, monkeypatch):
        monkeypatch.setenv("UPSYNC_CONFIG", str(temp_dir / "missing.json"))

        result = self.runner.invoke(main, [])

        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_no_api_key_imports_existing_csv(self, config_data, write_config, csv_lines, temp_dir, monkeypatch):
        """Without an Up key the export is skipped and the existing CSV is imported."""
        del config_data["apiKey"]
        monkeypatch.setenv("UPSYNC_CONFIG", str(write_config(config_data)))
        (temp_dir / "transactions.csv").write_text("\n".join(csv_lines) + "\n")
        actual_client = fake_actual_client()

        with patch("upsync.actual.importer.ActualBudgetClient", return_value=actual_client), \
                patch("upsync.sync.UpClient") as up_client_cls:
            result = self.runner.invoke(main, [])

        assert result.exit_code == 0, result.output
        assert "Up API key is missing" in result.output
        up_client_cls.assert_not_called()
        account, transactions = actual_client.add_transactions.call_args.args
        assert account == "Up Spending"
        assert [t.id for t in transactions] == ["tx-1", "tx-2", "tx-3"]

    def test_existing_csv_skips_download(self, config_data, write_config, csv_lines, temp_dir, monkeypatch):
        monkeypatch.setenv("UPSYNC_CONFIG", str(write_config(config_data)))
        (temp_dir / "transactions.csv").write_text("\n".join(csv_lines) + "\n")

        with patch("upsync.actual.importer.ActualBudgetClient", return_value=fake_actual_client()), \
                patch("upsync.sync.export_transactions") as export_mock:
            result = self.runner.invoke(main, [])

        assert result.exit_code == 0, result.output
        assert "Skipping the download step" in result.output
        export_mock.assert_not_called()

    def test_overwrite_downloads_then_imports(self, config_data, write_config, temp_dir, monkeypatch):
        monkeypatch.setenv("UPSYNC_CONFIG", str(write_config(config_data)))
        csv_path = temp_dir / "transactions.csv"
        csv_path.write_text("id\nstale\n")
        api = FakeUpApi({"acc": [make_transaction("fresh-1", amount="-12.50"), make_transaction("fresh-2")]})
        actual_client = fake_actual_client()

        def up_factory(config: UpConfig) -> UpClient:
            return UpClient(config, session=api.session())

        with patch("upsync.actual.importer.ActualBudgetClient", return_value=actual_client), \
                patch("upsync.sync.UpClient", side_effect=up_factory):
            result = self.runner.invoke(main, ["--overwrite"])

        assert result.exit_code == 0, result.output
        assert "overwrite flag given" in result.output
        assert list(pd.read_csv(csv_path, dtype=str)["id"]) == ["fresh-1", "fresh-2"]
        _, transactions = actual_client.add_transactions.call_args.args
        assert [t.amount for t in transactions] == [-1200, -100]

    def test_initialization_failure_exits_1(self, config_data, write_config, csv_lines, temp_dir, monkeypatch):
        monkeypatch.setenv("UPSYNC_CONFIG", str(write_config(config_data)))
        (temp_dir / "transactions.csv").write_text("\n".join(csv_lines) + "\n")
        actual_client = fake_actual_client()
        actual_client.open.side_effect = SyncError(SyncErrorKind.INITIALIZATION, "bad password")

        with patch("upsync.actual.importer.ActualBudgetClient", return_value=actual_client):
            result = self.runner.invoke(main, [])

        assert result.exit_code == 1
        assert "Failed to initialize API: bad password" in result.output
        assert result.output.count("Failed to initialize API") == 1
        actual_client.close.assert_called_once()

    def test_upload_failure_exits_0(self, config_data, write_config, csv_lines, temp_dir, monkeypatch):
        monkeypatch.setenv("UPSYNC_CONFIG", str(write_config(config_data)))
        (temp_dir / "transactions.csv").write_text("\n".join(csv_lines) + "\n")
        actual_client = fake_actual_client()
        actual_client.add_transactions.side_effect = SyncError(SyncErrorKind.UPLOAD, "rejected")

        with patch("upsync.actual.importer.ActualBudgetClient", return_value=actual_client):
            result = self.runner.invoke(main, [])

        assert result.exit_code == 0
        assert "import: failed" in result.output
