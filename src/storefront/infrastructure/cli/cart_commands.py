"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


@click.command("add")
@click.option("--product-id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to put in the cart.")
@click.pass_obj
def cart_add(container: Container, product_id: str, quantity: int) -> None:
    """Add a product to the cart."""
    try:
        dto = container.cart_service.add_item_to_cart(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {dto.quantity} x {dto.product_id} to the cart.")


@click.command("update")
@click.option("--product-id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity.")
@click.pass_obj
def cart_update(container: Container, product_id: str, quantity: int) -> None:
    """Change the quantity of a cart line."""
    try:
        dto = container.cart_service.update_item_quantity(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart quantity of {dto.product_id} set to {dto.quantity}.")


@click.command("remove")
@click.option("--product-id", required=True, help="Product ID.")
@click.pass_obj
def cart_remove(container: Container, product_id: str) -> None:
    """Remove a product from the cart."""
    try:
        container.cart_service.remove_item_from_cart(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Removed {product_id} from the cart.")


@click.command("list")
@click.pass_obj
def cart_list(container: Container) -> None:
    """List cart lines."""
    items = container.cart_service.get_all_cart_items()

    if not items:
        click.echo("Cart is empty.")
        return

    click.echo(f"{'Product':<36} {'Qty':>5}")
    click.echo("-" * 42)
    for item in items:
        click.echo(f"{item.product_id:<36} {item.quantity:>5}")


@click.command("summary")
@click.pass_obj
def cart_summary(container: Container) -> None:
    """Show the cart priced against the catalog."""
    summary = container.cart_service.get_cart_summary()

    if not summary.items:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in summary.items:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} "
            f"{'$' + format(line.unit_price, '.2f'):>10} {'$' + format(line.subtotal, '.2f'):>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Cart Total':<27} {'$' + format(summary.total, '.2f'):>20}")
