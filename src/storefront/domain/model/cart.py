"""Cart snapshot — the latest state the server reported for a user's cart.

The server is the only source of truth for cart contents. The client never
edits a Cart in place; it replaces the whole snapshot after every mutation
or swaps in ``Cart.empty()`` after a successful checkout.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class CartItem:
    """One cart line.

    ``id`` identifies the line, not the product: the same product added
    twice is expected to be a single line with a larger ``qty``, but that
    is for the server to decide.
    """

    id: str
    name: str
    price: Money  # snapshot taken by the server when the line was created
    qty: int
    product_id: str | None = None

    @property
    def line_total(self) -> Money:
        """Display-only; never summed into the cart subtotal."""
        return self.price * self.qty


@dataclass(frozen=True)
class Cart:
    """Server-computed cart.

    Invariant: ``subtotal`` is whatever the server sent. It is not derived
    from the items and may legitimately differ from their sum.
    """

    items: tuple[CartItem, ...] = field(default_factory=tuple)
    subtotal: Money = field(default_factory=Money.zero)

    @staticmethod
    def empty() -> Cart:
        return Cart(items=(), subtotal=Money.zero())

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        return len(self.items)

    def find_line(self, line_id: str) -> CartItem | None:
        for item in self.items:
            if item.id == line_id:
                return item
        return None
