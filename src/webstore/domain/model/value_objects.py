"""Money, quantities and timestamps used by every aggregate.

All three are immutable.  Construction validates, so a Money or Quantity
that exists is always usable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from webstore.domain.exceptions import ValidationError

CENT = Decimal("0.01")


@dataclass(frozen=True, order=True)
class Money:
    """Non-negative Decimal amount in a single currency.

    Prices, discounted prices, line totals and earnings all use this type.
    Values built with ``Money.of`` are rounded to whole cents.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(f"Money amount cannot be negative, got {self.amount}")

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Coerce to Decimal and round to whole cents (half up)."""
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        return Money(value.quantize(CENT, rounding=ROUND_HALF_UP))

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def total(amounts: list[Money]) -> Money:
        return sum(amounts, Money.zero())

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    def __add__(self, other: Money) -> Money:
        if other.currency != self.currency:
            raise ValidationError(f"Cannot combine {self.currency} with {other.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, units: int) -> Money:
        # Only whole units; fractional factors would need their own rounding rule.
        if isinstance(units, bool) or not isinstance(units, int):
            raise TypeError(f"Money can only be multiplied by an int, got {type(units).__name__}")
        return Money(self.amount * units, self.currency)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"


@dataclass(frozen=True)
class Quantity:
    """Number of units on an order line; always a positive int."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


def utc_now() -> datetime:
    """Naive UTC timestamp; every stored date in this package is naive UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
