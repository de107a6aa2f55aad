"""Pure state transitions for the storefront.

``reduce(state, action)`` never performs I/O and never mutates its
input. Every user-visible message is chosen here so the notification
text for a transition lives next to the transition itself.
"""

from __future__ import annotations

from dataclasses import replace

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
from storefront.application.state import Notification, NotificationLevel, StoreState
from storefront.domain.model.cart import Cart

LOAD_FAILED_MESSAGE = "Failed to load data"
ADDED_MESSAGE = "Added to cart"
REMOVED_MESSAGE = "Removed"
CHECKOUT_COMPLETE_MESSAGE = "Checkout complete!"
CHECKOUT_FAILED_MESSAGE = "Checkout failed"


def reduce(state: StoreState, action: Action) -> StoreState:
    """Return the state that follows *state* once *action* has happened."""
    if isinstance(action, LoadStarted):
        return replace(state, loading=True)

    if isinstance(action, ProductsLoaded):
        return replace(state, products=tuple(action.products))

    if isinstance(action, CartLoaded):
        return replace(state, cart=action.cart or Cart.empty())

    if isinstance(action, LoadFailed):
        return replace(state, notification=_error(LOAD_FAILED_MESSAGE))

    if isinstance(action, LoadFinished):
        return replace(state, loading=False)

    if isinstance(action, ItemAdded):
        return replace(
            state,
            cart=action.cart or Cart.empty(),
            notification=Notification(NotificationLevel.SUCCESS, ADDED_MESSAGE),
        )

    if isinstance(action, ItemRemoved):
        return replace(
            state,
            cart=action.cart or Cart.empty(),
            notification=Notification(NotificationLevel.INFO, REMOVED_MESSAGE),
        )

    if isinstance(action, CheckoutOpened):
        # Guard: checkout is unreachable with nothing in the cart
        if state.cart.is_empty:
            return state
        return replace(state, checkout_open=True)

    if isinstance(action, CheckoutClosed):
        return replace(state, checkout_open=False)

    if isinstance(action, CheckoutCompleted):
        return replace(
            state,
            receipt=action.receipt,
            cart=Cart.empty(),
            checkout_open=False,
            notification=Notification(
                NotificationLevel.SUCCESS, CHECKOUT_COMPLETE_MESSAGE
            ),
        )

    if isinstance(action, CheckoutRejected):
        return replace(state, notification=_error(CHECKOUT_FAILED_MESSAGE))

    if isinstance(action, ReceiptDismissed):
        return replace(state, receipt=None)

    raise TypeError(f"Unknown action: {type(action).__name__}")


def _error(message: str) -> Notification:
    return Notification(NotificationLevel.ERROR, message)
