"""SQLAlchemy-backed UnitOfWork: one session, one transaction per block."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.orm.exc import StaleDataError

from webstore.domain.exceptions import ConcurrentUpdateError, UnexpectedError
from webstore.domain.repository.unit_of_work import UnitOfWork
from webstore.infrastructure.persistence.sql_catalog_repository import SqlCatalogRepository
from webstore.infrastructure.persistence.sql_discount_repository import SqlDiscountRepository
from webstore.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from webstore.infrastructure.persistence.sql_product_repository import SqlProductRepository
from webstore.infrastructure.persistence.sql_report_repository import SqlReportRepository
from webstore.infrastructure.persistence.sql_user_repository import SqlUserRepository

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self._session_factory()
        self.catalog = SqlCatalogRepository(self._session)
        self.users = SqlUserRepository(self._session)
        self.products = SqlProductRepository(self._session)
        self.discounts = SqlDiscountRepository(self._session)
        self.orders = SqlOrderRepository(self._session)
        self.reports = SqlReportRepository(self._session)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        finally:
            self._session.close()  # type: ignore[union-attr]
            self._session = None
        if isinstance(exc, StaleDataError):
            logger.warning("Concurrent update rejected: %s", exc)
            raise ConcurrentUpdateError(
                "The data was changed by another transaction; retry the operation"
            ) from exc
        if isinstance(exc, SQLAlchemyError):
            logger.error("Database operation failed", exc_info=exc)
            raise UnexpectedError(f"Database operation failed: {exc}") from exc

    def commit(self) -> None:
        self._session.commit()  # type: ignore[union-attr]

    def rollback(self) -> None:
        self._session.rollback()  # type: ignore[union-attr]
