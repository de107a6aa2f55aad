import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.cart_commands import cart_add, cart_remove, cart_show
from storefront.infrastructure.cli.checkout_commands import checkout
from storefront.infrastructure.cli.product_commands import product_list
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging_setup import setup_logging


@click.group()
@click.option("--api-url", default=None, help="Store API base URL.")
@click.option("--user-id", default=None, help="Cart owner.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log every request.")
@click.pass_context
def cli(
    ctx: click.Context, api_url: str | None, user_id: str | None, verbose: bool
) -> None:
    """Storefront — browse products, manage the cart, check out."""
    setup_logging(verbose)
    try:
        settings = Settings.from_env()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    ctx.obj = Settings(
        api_url=api_url or settings.api_url,
        user_id=user_id or settings.user_id,
        timeout=settings.timeout,
    )


@cli.group()
def cart() -> None:
    """Manage the cart."""


# Register subcommands
cli.add_command(product_list)
cli.add_command(checkout)
cart.add_command(cart_show)
cart.add_command(cart_add)
cart.add_command(cart_remove)
