"""Unit tests for checkout input and the decoded receipt."""

from datetime import datetime, timezone

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.checkout import CheckoutForm
from storefront.domain.model.receipt import Receipt
from storefront.domain.model.value_objects import Money


class TestCheckoutForm:

    def test_happy_path(self):
        form = CheckoutForm.create("Al", "al@x.com")
        assert form == CheckoutForm(name="Al", email="al@x.com")

    def test_strips_whitespace(self):
        form = CheckoutForm.create("  Al ", " al@x.com ")
        assert form.name == "Al"
        assert form.email == "al@x.com"

    def test_name_required(self):
        with pytest.raises(ValidationError, match="Name is required"):
            CheckoutForm.create("   ", "al@x.com")

    def test_email_required(self):
        with pytest.raises(ValidationError, match="Email is required"):
            CheckoutForm.create("Al", "")

    @pytest.mark.parametrize("email", ["al", "al@", "@x.com", "a l@x.com", "a@b@c"])
    def test_malformed_email_rejected(self, email):
        with pytest.raises(ValidationError, match="Invalid email"):
            CheckoutForm.create("Al", email)


def _receipt(timestamp) -> Receipt:
    return Receipt(
        id="r1", name="Al", email="al@x.com", total=Money.of(100), timestamp=timestamp
    )


class TestReceipt:

    def test_epoch_millis_timestamp(self):
        assert _receipt(1690000000000).issued_at == datetime(
            2023, 7, 22, 4, 26, 40, tzinfo=timezone.utc
        )

    def test_iso_timestamp_with_z(self):
        assert _receipt("2023-07-22T04:26:40Z").issued_at == datetime(
            2023, 7, 22, 4, 26, 40, tzinfo=timezone.utc
        )

    def test_iso_timestamp_with_offset_normalized_to_utc(self):
        issued = _receipt("2023-07-22T09:56:40+05:30").issued_at
        assert issued == datetime(2023, 7, 22, 4, 26, 40, tzinfo=timezone.utc)
        assert issued.tzinfo == timezone.utc

    def test_unreadable_timestamp(self):
        assert _receipt("yesterday").issued_at is None

    def test_raw_timestamp_preserved(self):
        assert _receipt(1690000000000).timestamp == 1690000000000

    def test_missing_timestamp(self):
        assert _receipt(None).issued_at is None

    def test_non_string_timestamp(self):
        assert _receipt({"at": 1}).issued_at is None
        assert _receipt(True).issued_at is None

    def test_out_of_range_epoch(self):
        assert _receipt(10**20).issued_at is None
