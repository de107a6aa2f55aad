"""UI state of the storefront, held as one immutable value.

Only ``reducer.reduce`` produces new states; the controller swaps its
current state for the returned one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.model.receipt import Receipt


class NotificationLevel(Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str


@dataclass(frozen=True)
class StoreState:
    products: tuple[Product, ...] = ()
    cart: Cart = field(default_factory=Cart.empty)
    loading: bool = False
    checkout_open: bool = False
    receipt: Receipt | None = None
    notification: Notification | None = None
