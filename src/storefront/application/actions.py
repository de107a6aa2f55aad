"""Actions — plain records of something that happened.

The controller dispatches these after each network call; the reducer
turns them into the next ``StoreState``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.model.receipt import Receipt


@dataclass(frozen=True)
class LoadStarted:
    pass


@dataclass(frozen=True)
class ProductsLoaded:
    products: tuple[Product, ...]


@dataclass(frozen=True)
class CartLoaded:
    cart: Cart | None


@dataclass(frozen=True)
class LoadFailed:
    pass


@dataclass(frozen=True)
class LoadFinished:
    pass


@dataclass(frozen=True)
class ItemAdded:
    cart: Cart | None  # re-fetched, not derived from the add response


@dataclass(frozen=True)
class ItemRemoved:
    cart: Cart | None


@dataclass(frozen=True)
class CheckoutOpened:
    pass


@dataclass(frozen=True)
class CheckoutClosed:
    pass


@dataclass(frozen=True)
class CheckoutCompleted:
    receipt: Receipt


@dataclass(frozen=True)
class CheckoutRejected:
    pass


@dataclass(frozen=True)
class ReceiptDismissed:
    pass


Action = Union[
    LoadStarted,
    ProductsLoaded,
    CartLoaded,
    LoadFailed,
    LoadFinished,
    ItemAdded,
    ItemRemoved,
    CheckoutOpened,
    CheckoutClosed,
    CheckoutCompleted,
    CheckoutRejected,
    ReceiptDismissed,
]
