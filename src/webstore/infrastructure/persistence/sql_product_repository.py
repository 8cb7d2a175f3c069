"""SQLAlchemy implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from webstore.domain.model.product import Product
from webstore.domain.model.value_objects import Money
from webstore.domain.repository.product_repository import ProductRepository
from webstore.infrastructure.persistence.orm import (
    BrandRow,
    CategoryRow,
    ProductDiscountRow,
    ProductRow,
)
from webstore.infrastructure.persistence.sql_catalog_repository import to_entry
from webstore.infrastructure.persistence.sql_discount_repository import to_discount


def to_product(row: ProductRow) -> Product:
    return Product(
        id=row.id,
        name=row.name,
        description=row.description or "",
        price=Money.of(row.price),
        discounted_price=Money.of(row.discounted_price),
        quantity=row.quantity,
        category=to_entry(row.category),
        brand=to_entry(row.brand),
        gender=to_entry(row.gender),
        color=to_entry(row.color),
        size=to_entry(row.size),
        discounts=[to_discount(link.discount) for link in row.discount_links],
    )


def _ref_id(entry) -> int | None:
    return entry.id if entry is not None else None


class SqlProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        row = self._session.get(ProductRow, product_id)
        return to_product(row) if row is not None else None

    def get_for_update(self, product_id: int) -> Product | None:
        # Row lock held until commit/rollback.  SQLite ignores FOR UPDATE; there
        # the version column makes a write based on a stale read fail on flush.
        row = self._session.scalars(
            select(ProductRow)
            .where(ProductRow.id == product_id)
            .with_for_update(of=ProductRow)
            .execution_options(populate_existing=True)
        ).first()
        return to_product(row) if row is not None else None

    def list_all(self) -> list[Product]:
        rows = self._session.scalars(select(ProductRow).order_by(ProductRow.id))
        return [to_product(row) for row in rows]

    def list_by_category(self, category_name: str) -> list[Product]:
        rows = self._session.scalars(
            select(ProductRow)
            .join(CategoryRow, ProductRow.category_id == CategoryRow.id)
            .where(func.lower(CategoryRow.name) == category_name.strip().lower())
            .order_by(ProductRow.id)
        )
        return [to_product(row) for row in rows]

    def list_by_brand(self, brand_name: str) -> list[Product]:
        rows = self._session.scalars(
            select(ProductRow)
            .join(BrandRow, ProductRow.brand_id == BrandRow.id)
            .where(func.lower(BrandRow.name) == brand_name.strip().lower())
            .order_by(ProductRow.id)
        )
        return [to_product(row) for row in rows]

    def save(self, product: Product) -> None:
        row = self._session.get(ProductRow, product.id) if product.id is not None else None
        if row is None:
            row = ProductRow()
            self._session.add(row)
        self._apply(row, product)
        self._session.flush()
        product.id = row.id

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _apply(row: ProductRow, product: Product) -> None:
        row.name = product.name
        row.description = product.description
        row.price = product.price.amount
        row.discounted_price = product.discounted_price.amount
        row.quantity = product.quantity
        row.category_id = _ref_id(product.category)
        row.brand_id = _ref_id(product.brand)
        row.gender_id = _ref_id(product.gender)
        row.color_id = _ref_id(product.color)
        row.size_id = _ref_id(product.size)

        # Rebuild the association only when the attached discounts changed.
        wanted = [d.id for d in product.discounts]
        current = [link.discount_id for link in row.discount_links]
        if wanted != current:
            row.discount_links = [ProductDiscountRow(discount_id=d_id) for d_id in wanted]
