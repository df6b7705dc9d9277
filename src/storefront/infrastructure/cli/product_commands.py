"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.dto import ProductDTO, ProductUpdate
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"ID:          {dto.id}")
    click.echo(f"Name:        {dto.name}")
    click.echo(f"Price:       ${dto.price:.2f}")
    click.echo(f"Stock:       {dto.stock}")
    if dto.description:
        click.echo(f"Description: {dto.description}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.pass_obj
def product_add(
    container: Container, name: str, description: str, price: str, stock: int
) -> None:
    """Add a new product to the catalog."""
    try:
        dto = container.product_service.create_product(
            name=name, description=description, price=price, stock=stock
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' added at ${dto.price:.2f}")


@click.command("list")
@click.pass_obj
def product_list(container: Container) -> None:
    """List all products in the catalog."""
    products = container.product_service.get_all_products()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 75)
    for p in products:
        click.echo(f"{p.id:<36} {p.name:<20} {'$' + format(p.price, '.2f'):>10} {p.stock:>6}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(container: Container, product_id: str) -> None:
    """Show a single product."""
    try:
        dto = container.product_service.get_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.pass_obj
def product_update(
    container: Container,
    product_id: str,
    name: str | None,
    description: str | None,
    price: str | None,
    stock: int | None,
) -> None:
    """Update one or more fields of a product."""
    changes = ProductUpdate(name=name, description=description, price=price, stock=stock)
    if changes == ProductUpdate():
        raise click.UsageError("Nothing to update: pass at least one field.")

    try:
        dto = container.product_service.update_product(product_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} updated.")
    _display_product(dto)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(container: Container, product_id: str) -> None:
    """Remove a product from the catalog."""
    try:
        container.product_service.delete_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")
