"""CLI commands for the cart.

Every mutation re-reads the cart from the store before printing it, so
what is shown is always the server's version.
"""

from __future__ import annotations

import click

from storefront.application.controller import StoreController
from storefront.application.dto import cart_to_dto
from storefront.domain.model.cart import Cart
from storefront.infrastructure.cli.display import display_cart
from storefront.infrastructure.cli.session import run_session
from storefront.infrastructure.config import Settings


@click.command("show")
@click.pass_obj
def cart_show(settings: Settings) -> None:
    """Show the current cart."""

    async def _show(controller: StoreController) -> Cart:
        return controller.state.cart

    display_cart(cart_to_dto(run_session(settings, _show)))


@click.command("add")
@click.argument("product_id")
@click.option("--qty", default=1, show_default=True, type=int, help="Quantity to add.")
@click.pass_obj
def cart_add(settings: Settings, product_id: str, qty: int) -> None:
    """Add a product to the cart."""

    async def _add(controller: StoreController) -> Cart:
        await controller.add(product_id, qty)
        return controller.state.cart

    display_cart(cart_to_dto(run_session(settings, _add)))


@click.command("remove")
@click.argument("line_id")
@click.pass_obj
def cart_remove(settings: Settings, line_id: str) -> None:
    """Remove a line from the cart."""

    async def _remove(controller: StoreController) -> Cart:
        await controller.remove(line_id)
        return controller.state.cart

    display_cart(cart_to_dto(run_session(settings, _remove)))
