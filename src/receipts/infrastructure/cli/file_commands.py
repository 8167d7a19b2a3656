"""CLI commands for the transient files directory."""

from __future__ import annotations

import click

from receipts.infrastructure.bootstrap import transient_file_store


@click.command("cleanup")
@click.option("--limit", default=1000, show_default=True, type=click.IntRange(min=1), help="Maximum files to delete.")
def files_cleanup(limit: int) -> None:
    """Delete expired transient files."""
    deleted = transient_file_store().delete_expired_files(limit=limit)
    click.echo(f"Deleted {deleted} expired file(s).")
