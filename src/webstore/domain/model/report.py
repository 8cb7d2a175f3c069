"""Report snapshots and product performance rows.

A Report is written once, every time daily or monthly earnings are
computed, and never updated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from webstore.domain.model.value_objects import Money

DAILY = -1  # month/year sentinel for daily reports


@dataclass
class Report:

    id: int | None
    report_date: datetime
    total_earnings: Money
    month: int
    year: int
    top_selling_product_id: int | None

    @property
    def is_daily(self) -> bool:
        return self.month == DAILY and self.year == DAILY


@dataclass(frozen=True)
class ProductPerformance:
    product_id: int
    product_name: str
    total_sales: Money
    units_sold: int
