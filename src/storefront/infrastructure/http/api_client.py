"""HTTP client for the store API.

Implements ``StoreGateway`` on top of httpx. Status codes are not
inspected: any response with a JSON body is a normal result, and the
callers decide what it means. Only two things are treated as errors
here, both raised as ``StoreUnavailableError``:

- transport failures (connection refused, timeout, DNS, ...)
- bodies that are not JSON, or product and cart payloads not shaped as
  documented

Checkout is decoded once, at this boundary, into ``CheckoutSucceeded`` or
``CheckoutFailed`` depending on whether the body carries a ``receipt``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any
from urllib.parse import quote

import httpx

from storefront.domain.exceptions import StoreUnavailableError, ValidationError
from storefront.domain.gateway.store_gateway import StoreGateway
from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.checkout import (
    CheckoutFailed,
    CheckoutForm,
    CheckoutResult,
    CheckoutSucceeded,
)
from storefront.domain.model.product import Product
from storefront.domain.model.receipt import Receipt
from storefront.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

_DECODE_ERRORS = (AttributeError, KeyError, TypeError, ValueError, ValidationError)


class HttpStoreGateway(StoreGateway):

    def __init__(
        self,
        base_url: str,
        user_id: str = "demo-user",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._user_id = user_id
        self._timeout = timeout
        self._transport = transport
        # Ids and cart lines exactly as the server sent them, so they can be
        # echoed back unchanged (a numeric id stays numeric).
        self._product_ids: dict[str, Any] = {}
        self._raw_lines: dict[str, dict] = {}

    # --- StoreGateway interface -----------------------------------------------

    async def list_products(self) -> list[Product]:
        data = await self._request("GET", "/api/products")
        try:
            products = [self._to_product(raw) for raw in data]
        except _DECODE_ERRORS as exc:
            raise StoreUnavailableError(f"Unexpected products payload: {exc}") from exc
        for product, raw in zip(products, data):
            self._product_ids[product.id] = raw["id"]
        return products

    async def fetch_cart(self) -> Cart | None:
        data = await self._request(
            "GET", "/api/cart", params={"userId": self._user_id}
        )
        raw_cart = data.get("cart") if isinstance(data, dict) else None
        if not raw_cart:
            return None
        try:
            cart = self._to_cart(raw_cart)
        except _DECODE_ERRORS as exc:
            raise StoreUnavailableError(f"Unexpected cart payload: {exc}") from exc
        self._raw_lines = {
            item.id: raw for item, raw in zip(cart.items, raw_cart.get("items") or [])
        }
        return cart

    async def add_to_cart(self, product_id: str, qty: int = 1) -> Any:
        payload = {
            "productId": self._product_ids.get(product_id, product_id),
            "qty": qty,
        }
        return await self._request("POST", "/api/cart", json=payload)

    async def remove_cart_item(self, line_id: str) -> Any:
        return await self._request("DELETE", f"/api/cart/{quote(line_id, safe='')}")

    async def checkout(
        self, items: Sequence[CartItem], form: CheckoutForm
    ) -> CheckoutResult:
        payload = {
            "cartItems": [self._to_raw_line(item) for item in items],
            "name": form.name,
            "email": form.email,
        }
        data = await self._request("POST", "/api/cart/checkout", json=payload)

        raw_receipt = data.get("receipt") if isinstance(data, dict) else None
        if not raw_receipt:
            return CheckoutFailed(reason=self._failure_reason(data))
        # The order is placed once a receipt comes back, however incomplete
        return CheckoutSucceeded(receipt=self._to_receipt(raw_receipt))

    # --- Transport ------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        logger.debug("%s %s%s", method, self._base_url, path)
        try:
            async with self._client() as client:
                response = await client.request(method, path, **kwargs)
        except httpx.RequestError as exc:
            logger.error("Store API unavailable: %s", exc)
            raise StoreUnavailableError(str(exc)) from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise StoreUnavailableError(
                f"{method} {path} returned a non-JSON body "
                f"(status {response.status_code})"
            ) from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_product(raw: dict) -> Product:
        return Product(
            id=str(raw["id"]),
            name=raw["name"],
            price=Money.of(raw["price"]),
        )

    @staticmethod
    def _to_cart_item(raw: dict) -> CartItem:
        line_id = raw.get("_id", raw.get("id"))
        if line_id is None:
            raise KeyError("_id")
        product_id = raw.get("productId")
        return CartItem(
            id=str(line_id),
            name=raw["name"],
            price=Money.of(raw["price"]),
            qty=int(raw["qty"]),
            product_id=str(product_id) if product_id is not None else None,
        )

    @classmethod
    def _to_cart(cls, raw: dict) -> Cart:
        return Cart(
            items=tuple(cls._to_cart_item(i) for i in raw.get("items") or []),
            subtotal=Money.of(raw.get("subtotal", 0)),
        )

    @staticmethod
    def _to_receipt(raw: Any) -> Receipt:
        if not isinstance(raw, dict):
            raw = {}
        receipt_id = raw.get("id", raw.get("_id"))
        try:
            total = Money.of(raw["total"])
        except (KeyError, ValidationError):
            logger.warning("Receipt without a readable total: %r", raw.get("total"))
            total = None
        return Receipt(
            id=str(receipt_id) if receipt_id is not None else "",
            name=str(raw.get("name") or ""),
            email=str(raw.get("email") or ""),
            total=total,
            timestamp=raw.get("timestamp"),
        )

    def _to_raw_line(self, item: CartItem) -> dict:
        cached = self._raw_lines.get(item.id)
        if cached is not None:
            return cached
        raw: dict[str, Any] = {
            "_id": item.id,
            "name": item.name,
            "price": item.price.to_json(),
            "qty": item.qty,
        }
        if item.product_id is not None:
            raw["productId"] = item.product_id
        return raw

    @staticmethod
    def _failure_reason(data: Any) -> str | None:
        if isinstance(data, dict):
            for key in ("error", "message"):
                if data.get(key):
                    return str(data[key])
        return None
