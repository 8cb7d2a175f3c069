"""Application services: create and list discounts."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation

from webstore.domain.exceptions import ValidationError
from webstore.domain.model.discount import Discount
from webstore.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class CreateDiscountHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        percentage: str | Decimal,
        start_date: datetime,
        end_date: datetime,
    ) -> Discount:
        try:
            pct = Decimal(str(percentage))
        except InvalidOperation as exc:
            raise ValidationError(f"Invalid discount percentage: {percentage!r}") from exc

        discount = Discount.create(name, pct, start_date, end_date)
        with self._uow:
            self._uow.discounts.save(discount)
            self._uow.commit()

        logger.info("Discount #%s '%s' created (%s%%)", discount.id, discount.name, pct)
        return discount


class ListDiscountsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Discount]:
        """All discounts, or those inside ``[start, end]`` when both are given."""
        if (start is None) != (end is None):
            raise ValidationError("Both start and end dates are required for a range")
        if start is not None and end is not None and start > end:
            raise ValidationError("Start date must be earlier than or equal to end date")
        with self._uow:
            if start is not None and end is not None:
                return self._uow.discounts.list_in_range(start, end)
            return self._uow.discounts.list_all()
