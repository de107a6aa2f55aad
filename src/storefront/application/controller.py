"""Application service: the storefront controller.

Orchestrates the store gateway and the reducer. Every cart mutation
follows the same pattern: call the store, then re-read the whole cart and
replace the local snapshot with it. Checkout is the one exception: the
receipt comes back directly and the local cart is reset to empty.

Cart operations (add, remove, checkout) are serialized through a single
lock: each mutate-then-refetch pair finishes before the next mutation
is sent.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from storefront.application.actions import (
    Action,
    CartLoaded,
    CheckoutClosed,
    CheckoutCompleted,
    CheckoutOpened,
    CheckoutRejected,
    ItemAdded,
    ItemRemoved,
    LoadFailed,
    LoadFinished,
    LoadStarted,
    ProductsLoaded,
    ReceiptDismissed,
)
from storefront.application.reducer import reduce
from storefront.application.state import StoreState
from storefront.domain.exceptions import StoreUnavailableError, ValidationError
from storefront.domain.gateway.store_gateway import StoreGateway
from storefront.domain.model.checkout import (
    CheckoutForm,
    CheckoutResult,
    CheckoutSucceeded,
)
from storefront.domain.model.value_objects import Quantity

logger = logging.getLogger(__name__)

Listener = Callable[[StoreState, Action], None]


class StoreController:

    def __init__(
        self,
        gateway: StoreGateway,
        state: StoreState | None = None,
    ) -> None:
        self._gateway = gateway
        self._state = state or StoreState()
        self._cart_lock = asyncio.Lock()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> StoreState:
        return self._state

    def subscribe(self, listener: Listener) -> None:
        """Call *listener* with the new state after every dispatched action."""
        self._listeners.append(listener)

    def dispatch(self, action: Action) -> StoreState:
        self._state = reduce(self._state, action)
        for listener in self._listeners:
            listener(self._state, action)
        return self._state

    # --- Load -----------------------------------------------------------------

    async def load(self) -> None:
        """Fetch products, then the cart.

        A store failure becomes an error notification; ``loading`` is
        cleared either way.
        """
        self.dispatch(LoadStarted())
        try:
            products = await self._gateway.list_products()
            self.dispatch(ProductsLoaded(tuple(products)))
            cart = await self._gateway.fetch_cart()
            self.dispatch(CartLoaded(cart))
        except StoreUnavailableError as exc:
            logger.error("Initial load failed: %s", exc)
            self.dispatch(LoadFailed())
        finally:
            self.dispatch(LoadFinished())

    # --- Cart mutations -------------------------------------------------------

    async def add(self, product_id: str, qty: int = 1) -> None:
        """Add a product, then replace the cart with the server's copy.

        Store failures are not caught here.
        """
        quantity = Quantity(qty)
        async with self._cart_lock:
            await self._gateway.add_to_cart(product_id, quantity.value)
            cart = await self._gateway.fetch_cart()
            self.dispatch(ItemAdded(cart))
        logger.debug("Added product %s x%d", product_id, quantity.value)

    async def remove(self, line_id: str) -> None:
        """Remove a cart line, then replace the cart with the server's copy.

        Removing a line the server does not know about is not an error on
        this side; whatever cart comes back is shown.
        """
        async with self._cart_lock:
            await self._gateway.remove_cart_item(line_id)
            cart = await self._gateway.fetch_cart()
            self.dispatch(ItemRemoved(cart))
        logger.debug("Removed cart line %s", line_id)

    # --- Checkout -------------------------------------------------------------

    def open_checkout(self) -> bool:
        """Open the checkout dialog. Has no effect on an empty cart."""
        return self.dispatch(CheckoutOpened()).checkout_open

    def close_checkout(self) -> None:
        self.dispatch(CheckoutClosed())

    async def submit_checkout(self, name: str, email: str) -> CheckoutResult:
        """Send the current cart lines for checkout.

        On success the receipt is kept, the cart resets to empty and the
        dialog closes. On failure cart and dialog stay as they are so the
        customer can retry with the same input.
        """
        if not self._state.checkout_open:
            raise ValidationError("Checkout is not open")

        form = CheckoutForm.create(name, email)

        async with self._cart_lock:
            items = self._state.cart.items
            result = await self._gateway.checkout(items, form)

            if isinstance(result, CheckoutSucceeded):
                logger.info("Checkout complete, receipt %s", result.receipt.id)
                self.dispatch(CheckoutCompleted(result.receipt))
            else:
                logger.warning("Checkout rejected by store: %s", result.reason)
                self.dispatch(CheckoutRejected())

        return result

    def dismiss_receipt(self) -> None:
        self.dispatch(ReceiptDismissed())
