"""Discount: a percentage off, valid inside a date window.

A discount's effect is materialized onto ``Product.discounted_price`` when
it is applied; nothing recomputes it on read.  The cached value changes
only when a discount is applied again or the expiry sweep runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from webstore.domain.exceptions import ValidationError
from webstore.domain.model.value_objects import CENT

HUNDRED = Decimal("100")


def calculate_discounted_price(price: Decimal, percentage: Decimal) -> Decimal:
    """Return ``price`` reduced by ``percentage`` percent, rounded to cents.

    Percentages above 100 are not rejected here and produce a negative
    result; it is up to the caller to decide what a negative price means.
    """
    if price < 0 or percentage < 0:
        raise ValidationError(
            f"Price and discount percentage must be non-negative "
            f"(price={price}, percentage={percentage})"
        )
    discounted = price * (1 - percentage / HUNDRED)
    return discounted.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass
class Discount:

    id: int | None
    name: str
    percentage: Decimal
    start_date: datetime
    end_date: datetime

    @staticmethod
    def create(
        name: str,
        percentage: Decimal,
        start_date: datetime,
        end_date: datetime,
    ) -> Discount:
        if not name or not name.strip():
            raise ValidationError("Discount name is required")
        if percentage < 0:
            raise ValidationError("Discount percentage cannot be negative")
        if start_date > end_date:
            raise ValidationError("Discount start date must not be after its end date")
        return Discount(
            id=None,
            name=name.strip(),
            percentage=percentage,
            start_date=start_date,
            end_date=end_date,
        )

    def is_active_at(self, moment: datetime) -> bool:
        return self.end_date > moment
