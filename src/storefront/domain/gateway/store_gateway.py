"""Abstract gateway to the remote store.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete HTTP implementation lives in the
infrastructure layer; tests use an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.checkout import CheckoutForm, CheckoutResult
from storefront.domain.model.product import Product


class StoreGateway(ABC):

    @abstractmethod
    async def list_products(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    async def fetch_cart(self) -> Cart | None:
        """Return the current user's cart, or None if the store sent none."""

    @abstractmethod
    async def add_to_cart(self, product_id: str, qty: int = 1) -> Any:
        """Add *qty* of a product. The response body is opaque to callers."""

    @abstractmethod
    async def remove_cart_item(self, line_id: str) -> Any:
        """Remove a cart line. The response body is opaque to callers."""

    @abstractmethod
    async def checkout(
        self, items: Sequence[CartItem], form: CheckoutForm
    ) -> CheckoutResult:
        """Turn the given cart lines into an order."""
