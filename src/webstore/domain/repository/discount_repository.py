"""Abstract repository for Discount."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from webstore.domain.model.discount import Discount


class DiscountRepository(ABC):

    @abstractmethod
    def get_by_id(self, discount_id: int) -> Discount | None:
        """Return a discount by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Discount]:
        """Return every discount."""

    @abstractmethod
    def list_in_range(self, start: datetime, end: datetime) -> list[Discount]:
        """Return discounts whose window lies within ``[start, end]``."""

    @abstractmethod
    def save(self, discount: Discount) -> None:
        """Persist a new or updated discount, assigning its ID if new."""
