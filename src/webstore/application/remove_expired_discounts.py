"""Application service: expiry sweep for discounts.

Walks every product, detaches discounts whose end date has passed and
clears ``discounted_price`` on products left without any discount.
Only products that changed are written, so running the sweep again right
away does nothing.
"""

from __future__ import annotations

import logging
from datetime import datetime

from webstore.domain.model.value_objects import utc_now
from webstore.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class RemoveExpiredDiscountsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, now: datetime | None = None) -> int:
        """Run the sweep and return how many products were updated."""
        now = now or utc_now()
        changed = 0
        with self._uow:
            for product in self._uow.products.list_all():
                if product.drop_expired_discounts(now):
                    self._uow.products.save(product)
                    changed += 1
            self._uow.commit()

        logger.info("Expired discounts removed from %d product(s)", changed)
        return changed
