"""CLI command for checking out the cart."""

from __future__ import annotations

import click

from storefront.application.controller import StoreController
from storefront.application.dto import receipt_to_dto
from storefront.domain.model.receipt import Receipt
from storefront.infrastructure.cli.display import display_receipt
from storefront.infrastructure.cli.session import run_session
from storefront.infrastructure.config import Settings


@click.command("checkout")
@click.option("--name", required=True, help="Name for the order.")
@click.option("--email", required=True, help="Email for the receipt.")
@click.pass_obj
def checkout(settings: Settings, name: str, email: str) -> None:
    """Check out the current cart and print the receipt."""

    async def _checkout(controller: StoreController) -> Receipt | None:
        if not controller.open_checkout():
            raise click.ClickException("Cart is empty.")
        await controller.submit_checkout(name, email)
        return controller.state.receipt

    receipt = run_session(settings, _checkout)
    if receipt is None:
        # "Checkout failed" has already been printed
        raise click.exceptions.Exit(1)

    display_receipt(receipt_to_dto(receipt))
