"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.application.controller import StoreController
from storefront.application.dto import product_to_dto
from storefront.domain.model.product import Product
from storefront.infrastructure.cli.display import display_products
from storefront.infrastructure.cli.session import run_session
from storefront.infrastructure.config import Settings


async def _loaded_products(controller: StoreController) -> tuple[Product, ...]:
    return controller.state.products


@click.command("products")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    products = run_session(settings, _loaded_products)
    display_products([product_to_dto(p) for p in products])
