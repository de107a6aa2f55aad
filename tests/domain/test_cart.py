"""Unit tests for the Cart snapshot."""

from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.value_objects import Money


def _line(line_id: str = "a", price: str = "100", qty: int = 1) -> CartItem:
    return CartItem(id=line_id, name="Mug", price=Money.of(price), qty=qty)


class TestCart:

    def test_empty_cart(self):
        cart = Cart.empty()
        assert cart.items == ()
        assert cart.subtotal == Money.zero()
        assert cart.is_empty
        assert cart.item_count == 0

    def test_default_equals_empty(self):
        assert Cart() == Cart.empty()

    def test_subtotal_is_not_recomputed(self):
        """The server's subtotal is shown as-is, even if it disagrees with the lines."""
        cart = Cart(items=(_line(qty=2),), subtotal=Money.of("150"))
        assert cart.subtotal == Money.of("150")

    def test_item_count_counts_lines_not_units(self):
        cart = Cart(items=(_line("a", qty=3), _line("b")), subtotal=Money.of("400"))
        assert cart.item_count == 2

    def test_find_line(self):
        cart = Cart(items=(_line("a"), _line("b")), subtotal=Money.of("200"))
        assert cart.find_line("b").id == "b"
        assert cart.find_line("zzz") is None


class TestCartItem:

    def test_line_total(self):
        assert _line(price="100", qty=3).line_total == Money.of("300")

    def test_line_id_is_independent_of_product_id(self):
        item = CartItem(id="a", name="Mug", price=Money.of(100), qty=1, product_id="1")
        assert item.id != item.product_id
