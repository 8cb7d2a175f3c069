"""Unit of Work: one transaction spanning several repositories.

Handlers use it as a context manager and call ``commit()`` once all
writes for the operation are done::

    with self._uow:
        ...
        self._uow.commit()

Leaving the block without committing, or with an exception, rolls back
every write made inside it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from webstore.domain.repository.catalog_repository import CatalogRepository
from webstore.domain.repository.discount_repository import DiscountRepository
from webstore.domain.repository.order_repository import OrderRepository
from webstore.domain.repository.product_repository import ProductRepository
from webstore.domain.repository.report_repository import ReportRepository
from webstore.domain.repository.user_repository import UserRepository


class UnitOfWork(ABC):

    catalog: CatalogRepository
    users: UserRepository
    products: ProductRepository
    discounts: DiscountRepository
    orders: OrderRepository
    reports: ReportRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Make every write since the block started durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every uncommitted write."""
