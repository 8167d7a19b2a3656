"""CLI commands for order receipts."""

from __future__ import annotations

import click

from receipts.domain.exceptions import DomainException
from receipts.infrastructure.bootstrap import receipt_service


@click.command("generate")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--expires", default=None, help="Expiration date (YYYY-MM-DD). Defaults to tomorrow.")
@click.option("--force", is_flag=True, default=False, help="Create a new receipt even if one exists.")
def receipt_generate(order_id: int, expires: str | None, force: bool) -> None:
    """Generate a receipt for an order, reusing an existing one unless --force."""
    service = receipt_service()

    try:
        file_name = service.get_or_create_receipt(
            order_id, expiration_date=expires, force_new=force
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if file_name is None:
        raise click.ClickException(f"Order #{order_id} not found")

    click.echo(f"Receipt for order #{order_id}: {file_name}")
    click.echo(f"Path: {service.get_receipt_path(order_id)}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--print", "print_contents", is_flag=True, default=False, help="Print the receipt document.")
def receipt_show(order_id: int, print_contents: bool) -> None:
    """Show the current receipt of an order, if any."""
    service = receipt_service()
    path = service.get_receipt_path(order_id)

    if path is None:
        click.echo(f"No receipt available for order #{order_id}.")
        return

    if print_contents:
        try:
            contents = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise click.ClickException(
                f"Receipt for order #{order_id} is no longer available: {exc}"
            )
        click.echo(contents)
    else:
        click.echo(f"Receipt for order #{order_id}: {path.name}")
        click.echo(f"Path: {path}")
