"""SQLAlchemy implementation of CatalogRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from webstore.domain.model.catalog import CatalogEntry, CatalogKind
from webstore.domain.repository.catalog_repository import CatalogRepository
from webstore.infrastructure.persistence.orm import (
    BrandRow,
    CategoryRow,
    ColorRow,
    GenderRow,
    SizeRow,
)

ROW_TYPES = {
    CatalogKind.CATEGORY: CategoryRow,
    CatalogKind.BRAND: BrandRow,
    CatalogKind.GENDER: GenderRow,
    CatalogKind.COLOR: ColorRow,
    CatalogKind.SIZE: SizeRow,
}


def to_entry(row) -> CatalogEntry | None:
    if row is None:
        return None
    return CatalogEntry(id=row.id, name=row.name)


class SqlCatalogRepository(CatalogRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_or_create(self, kind: CatalogKind, name: str) -> CatalogEntry:
        entry = CatalogEntry.named(name)
        row_type = ROW_TYPES[kind]
        row = self._session.scalars(
            select(row_type).where(func.lower(row_type.name) == entry.name.lower())
        ).first()
        if row is None:
            row = row_type(name=entry.name)
            self._session.add(row)
            self._session.flush()
        return CatalogEntry(id=row.id, name=row.name)

    def list_all(self, kind: CatalogKind) -> list[CatalogEntry]:
        row_type = ROW_TYPES[kind]
        rows = self._session.scalars(select(row_type).order_by(row_type.name))
        return [CatalogEntry(id=row.id, name=row.name) for row in rows]
