"""Unit tests for the pure state transitions."""

import pytest

from storefront.application.actions import (
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
from storefront.application.state import Notification, NotificationLevel, StoreState
from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.product import Product
from storefront.domain.model.receipt import Receipt
from storefront.domain.model.value_objects import Money


def _cart() -> Cart:
    return Cart(
        items=(CartItem(id="a", name="Mug", price=Money.of(100), qty=1),),
        subtotal=Money.of(100),
    )


def _receipt() -> Receipt:
    return Receipt(
        id="r1", name="Al", email="al@x.com", total=Money.of(100), timestamp=1690000000000
    )


class TestLoadTransitions:

    def test_load_started_sets_loading(self):
        assert reduce(StoreState(), LoadStarted()).loading is True

    def test_products_loaded(self):
        products = (Product(id="1", name="Mug", price=Money.of(100)),)
        state = reduce(StoreState(loading=True), ProductsLoaded(products))
        assert state.products == products
        assert state.loading is True

    def test_cart_loaded(self):
        assert reduce(StoreState(), CartLoaded(_cart())).cart == _cart()

    def test_absent_cart_loads_as_empty(self):
        state = reduce(StoreState(cart=_cart()), CartLoaded(None))
        assert state.cart == Cart.empty()

    def test_load_failed_notifies(self):
        state = reduce(StoreState(loading=True), LoadFailed())
        assert state.notification == Notification(
            NotificationLevel.ERROR, "Failed to load data"
        )
        assert state.loading is True  # cleared by LoadFinished

    def test_load_finished_clears_loading(self):
        assert reduce(StoreState(loading=True), LoadFinished()).loading is False


class TestCartTransitions:

    def test_item_added_replaces_cart_and_notifies_success(self):
        state = reduce(StoreState(), ItemAdded(_cart()))
        assert state.cart == _cart()
        assert state.notification.level is NotificationLevel.SUCCESS
        assert state.notification.message == "Added to cart"

    def test_item_removed_replaces_cart_and_notifies_neutrally(self):
        state = reduce(StoreState(cart=_cart()), ItemRemoved(Cart.empty()))
        assert state.cart.is_empty
        assert state.notification == Notification(NotificationLevel.INFO, "Removed")

    def test_item_removed_with_absent_cart(self):
        state = reduce(StoreState(cart=_cart()), ItemRemoved(None))
        assert state.cart == Cart.empty()


class TestCheckoutTransitions:

    def test_open_with_items(self):
        assert reduce(StoreState(cart=_cart()), CheckoutOpened()).checkout_open is True

    def test_open_on_empty_cart_has_no_effect(self):
        state = StoreState()
        assert reduce(state, CheckoutOpened()) is state

    def test_close(self):
        state = StoreState(cart=_cart(), checkout_open=True)
        assert reduce(state, CheckoutClosed()).checkout_open is False

    def test_completed(self):
        state = StoreState(cart=_cart(), checkout_open=True)
        state = reduce(state, CheckoutCompleted(_receipt()))
        assert state.receipt == _receipt()
        assert state.cart == Cart.empty()
        assert state.checkout_open is False
        assert state.notification == Notification(
            NotificationLevel.SUCCESS, "Checkout complete!"
        )

    def test_rejected_keeps_cart_and_dialog(self):
        state = StoreState(cart=_cart(), checkout_open=True)
        state = reduce(state, CheckoutRejected())
        assert state.cart == _cart()
        assert state.checkout_open is True
        assert state.notification == Notification(
            NotificationLevel.ERROR, "Checkout failed"
        )

    def test_receipt_dismissed(self):
        state = reduce(StoreState(receipt=_receipt()), ReceiptDismissed())
        assert state.receipt is None


class TestPurity:

    def test_input_state_is_not_modified(self):
        before = StoreState(cart=_cart(), checkout_open=True)
        reduce(before, CheckoutCompleted(_receipt()))
        assert before.cart == _cart()
        assert before.checkout_open is True
        assert before.receipt is None

    def test_unknown_action_rejected(self):
        with pytest.raises(TypeError, match="Unknown action"):
            reduce(StoreState(), object())
