"""Checkout input and outcome.

``CheckoutForm`` is what the customer types in the checkout dialog.
``CheckoutSucceeded`` / ``CheckoutFailed`` is the decoded answer from the
store: the gateway decides which one it is, so nothing above it ever
looks at the raw response body.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.receipt import Receipt

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")


@dataclass(frozen=True)
class CheckoutForm:

    name: str
    email: str

    @staticmethod
    def create(name: str, email: str) -> CheckoutForm:
        """Build a form, enforcing the same rules as the dialog's inputs."""
        if not name or not name.strip():
            raise ValidationError("Name is required")
        if not email or not email.strip():
            raise ValidationError("Email is required")
        email = email.strip()
        if not _EMAIL_PATTERN.match(email):
            raise ValidationError(f"Invalid email address: '{email}'")
        return CheckoutForm(name=name.strip(), email=email)


@dataclass(frozen=True)
class CheckoutSucceeded:
    receipt: Receipt


@dataclass(frozen=True)
class CheckoutFailed:
    # Server-provided detail, if any. Logged, never shown to the customer.
    reason: str | None = None


CheckoutResult = Union[CheckoutSucceeded, CheckoutFailed]
