import click
import uvicorn

from storefront.infrastructure.api.app_factory import create_app
from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_list,
    cart_remove,
    cart_summary,
    cart_update,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging_config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log at the configured level instead of WARNING.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Storefront — product catalog and shopping cart"""
    if ctx.obj is None:
        settings = Settings()
        configure_logging(settings.log_level if verbose else "WARNING")
        ctx.obj = build_container(settings)


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (defaults to settings).")
@click.option("--port", default=None, type=int, help="Bind port (defaults to settings).")
@click.pass_obj
def serve(container: Container, host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    settings = container.settings
    uvicorn.run(
        create_app(container),
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def cart() -> None:
    """Manage the cart."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_list)
cart.add_command(cart_remove)
cart.add_command(cart_summary)
cart.add_command(cart_update)
