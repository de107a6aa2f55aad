"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

CURRENCY_SYMBOLS = {"INR": "₹"}


@dataclass(frozen=True)
class Money:
    """Monetary amount as sent by the store API.

    The store prices everything in a single currency; amounts are held as
    Decimal so that what the server sent is displayed exactly.
    """

    amount: Decimal
    currency: str = "INR"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")

    # --- Arithmetic helpers ---------------------------------------------------

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        symbol = CURRENCY_SYMBOLS.get(self.currency, f"{self.currency} ")
        sign = "-" if self.amount < 0 else ""
        return f"{sign}{symbol}{self._plain()}"

    def to_json(self) -> int | float:
        """Number form used when echoing an amount back to the API."""
        if self.amount == self.amount.to_integral_value():
            return int(self.amount)
        return float(self.amount)

    # --- Internal helpers -----------------------------------------------------

    def _plain(self) -> str:
        # Render like a JSON number: 100 not 100.00, 99.5 not 99.50
        amount = abs(self.amount)
        if amount == amount.to_integral_value():
            return f"{amount:.0f}"
        return format(amount.normalize(), "f")

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot add zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
