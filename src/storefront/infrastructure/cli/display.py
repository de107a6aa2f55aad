"""Shared terminal output for the CLI commands."""

from __future__ import annotations

import click

from storefront.application.actions import Action
from storefront.application.dto import CartDTO, ProductDTO, ReceiptDTO
from storefront.application.state import Notification, NotificationLevel, StoreState

_COLORS = {
    NotificationLevel.SUCCESS: "green",
    NotificationLevel.ERROR: "red",
    NotificationLevel.INFO: None,
}


class NotificationPrinter:
    """Controller listener that echoes each new notification once."""

    def __init__(self) -> None:
        self._last: Notification | None = None

    def __call__(self, state: StoreState, action: Action) -> None:
        notification = state.notification
        if notification is None or notification is self._last:
            return
        self._last = notification
        click.secho(
            notification.message,
            fg=_COLORS[notification.level],
            err=notification.level is NotificationLevel.ERROR,
        )


def display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<26} {'Name':<20} {'Price':>10}")
    click.echo("-" * 58)
    for p in products:
        click.echo(f"{p.id:<26} {p.name:<20} {p.price:>10}")


def display_cart(cart: CartDTO) -> None:
    click.echo(f"Your Cart ({cart.count_label})")
    if not cart.lines:
        click.echo("Cart is empty.")
    else:
        click.echo(f"  {'Line':<26} {'Product':<20} {'Qty':>5} {'Total':>10}")
        click.echo(f"  {'-'*64}")
        for line in cart.lines:
            click.echo(
                f"  {line.id:<26} {line.name:<20} {line.quantity:>5} {line.line_total:>10}"
            )
        click.echo(f"  {'-'*64}")
    click.echo(f"Total: {cart.total}")


def display_receipt(receipt: ReceiptDTO) -> None:
    click.echo("Receipt")
    click.echo(f"  ID:    {receipt.id}")
    click.echo(f"  Name:  {receipt.name}")
    click.echo(f"  Email: {receipt.email}")
    click.echo(f"  Total: {receipt.total}")
    click.echo(f"  Date:  {receipt.date}")
