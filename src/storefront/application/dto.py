"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry already-formatted values from the application layer to the
CLI without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.model.receipt import Receipt


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str  # formatted, e.g. "₹100"


@dataclass(frozen=True)
class CartLineDTO:
    id: str
    name: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    total: str  # the server's subtotal, formatted
    item_count: int

    @property
    def count_label(self) -> str:
        suffix = "" if self.item_count == 1 else "s"
        return f"{self.item_count} item{suffix}"


@dataclass(frozen=True)
class ReceiptDTO:
    id: str
    name: str
    email: str
    total: str
    date: str


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(id=product.id, name=product.name, price=str(product.price))


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        lines=[
            CartLineDTO(
                id=item.id,
                name=item.name,
                quantity=item.qty,
                line_total=str(item.line_total),
            )
            for item in cart.items
        ],
        total=str(cart.subtotal),
        item_count=cart.item_count,
    )


def receipt_to_dto(receipt: Receipt) -> ReceiptDTO:
    issued_at = receipt.issued_at
    if issued_at is not None:
        date = issued_at.strftime("%Y-%m-%d %H:%M UTC")
    elif receipt.timestamp is not None:
        date = str(receipt.timestamp)
    else:
        date = ""
    return ReceiptDTO(
        id=receipt.id,
        name=receipt.name,
        email=receipt.email,
        total=str(receipt.total) if receipt.total is not None else "",
        date=date,
    )
