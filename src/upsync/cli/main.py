#!/usr/bin/env python3
"""
Main CLI Entry Point for Up → Actual Sync

Single command: download Up transactions to the CSV buffer when needed, then
import the buffer into Actual Budget.
"""

import click

from ..core.config import ConfigError, load_config
from ..core.errors import SyncError
from ..sync import run_sync


@click.command()
@click.option(
    "--overwrite",
    is_flag=True,
    help="Re-download from Up and overwrite the CSV file even if it already exists",
)
def main(overwrite: bool) -> None:
    """
    Sync Up bank transactions into Actual Budget.

    Reads config.json (or the file named by UPSYNC_CONFIG), exports Up
    transactions to the configured CSV file and imports that file into the
    configured Actual Budget account.
    """
    try:
        config = load_config()
    except ConfigError as e:
        click.echo(f"❌ {e}", err=True)
        raise SystemExit(1) from e

    config.setup_logging()

    try:
        report = run_sync(config, overwrite=overwrite, echo=click.echo)
    except SyncError as e:
        click.echo(f"❌ Failed to initialize API: {e.message}", err=True)
        raise SystemExit(1) from e

    click.echo()
    for stage in report.stages:
        marker = "✅" if stage.success else "⚠️ "
        click.echo(f"{marker} {stage.summary_line()}")


if __name__ == "__main__":
    main()
