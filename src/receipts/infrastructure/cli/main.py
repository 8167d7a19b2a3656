import click

from receipts.infrastructure.cli.file_commands import files_cleanup
from receipts.infrastructure.cli.receipt_commands import receipt_generate, receipt_show
from receipts.infrastructure.logging import setup_logging
from receipts.infrastructure.settings import get_settings


@click.group()
def cli() -> None:
    """Receipts — printable order receipts"""
    setup_logging(get_settings())


@cli.group()
def receipt() -> None:
    """Generate and look up order receipts."""


@cli.group()
def files() -> None:
    """Manage transient files."""


# Register subcommands
receipt.add_command(receipt_generate)
receipt.add_command(receipt_show)
files.add_command(files_cleanup)
