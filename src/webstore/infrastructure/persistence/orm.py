"""SQLAlchemy table mappings.

These rows are persistence details only; repositories translate them to
and from the domain dataclasses.  Money columns are Numeric(12, 2) and
every datetime is stored as naive UTC.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class UserRow(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    first_name: Mapped[str] = mapped_column(String(100), default="")
    last_name: Mapped[str] = mapped_column(String(100), default="")


# --- Catalog lookup tables -----------------------------------------------------


class _CatalogColumns:
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True)


class CategoryRow(_CatalogColumns, Base):
    __tablename__ = "categories"


class BrandRow(_CatalogColumns, Base):
    __tablename__ = "brands"


class GenderRow(_CatalogColumns, Base):
    __tablename__ = "genders"


class ColorRow(_CatalogColumns, Base):
    __tablename__ = "colors"


class SizeRow(_CatalogColumns, Base):
    __tablename__ = "sizes"


# --- Products and discounts ----------------------------------------------------


class DiscountRow(Base):
    __tablename__ = "discounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    percentage: Mapped[Decimal] = mapped_column(Numeric(7, 2))
    start_date: Mapped[datetime] = mapped_column(DateTime)
    end_date: Mapped[datetime] = mapped_column(DateTime, index=True)


class ProductDiscountRow(Base):
    """Product <-> discount association.

    Has its own key so the same discount can be attached to a product
    more than once.
    """

    __tablename__ = "product_discounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    product_id: Mapped[int] = mapped_column(ForeignKey("products.id"), index=True)
    discount_id: Mapped[int] = mapped_column(ForeignKey("discounts.id"))

    discount: Mapped[DiscountRow] = relationship(lazy="selectin")


class ProductRow(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    description: Mapped[str] = mapped_column(Text, default="")
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    discounted_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0"))
    quantity: Mapped[int] = mapped_column(Integer, default=0)
    category_id: Mapped[int | None] = mapped_column(ForeignKey("categories.id"))
    brand_id: Mapped[int | None] = mapped_column(ForeignKey("brands.id"))
    gender_id: Mapped[int | None] = mapped_column(ForeignKey("genders.id"))
    color_id: Mapped[int | None] = mapped_column(ForeignKey("colors.id"))
    size_id: Mapped[int | None] = mapped_column(ForeignKey("sizes.id"))
    # Bumped on every UPDATE; a write based on an older read fails.
    version_id: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    category: Mapped[CategoryRow | None] = relationship(lazy="selectin")
    brand: Mapped[BrandRow | None] = relationship(lazy="selectin")
    gender: Mapped[GenderRow | None] = relationship(lazy="selectin")
    color: Mapped[ColorRow | None] = relationship(lazy="selectin")
    size: Mapped[SizeRow | None] = relationship(lazy="selectin")
    discount_links: Mapped[list[ProductDiscountRow]] = relationship(
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by=ProductDiscountRow.id,
    )

    __mapper_args__ = {"version_id_col": version_id}


# --- Orders --------------------------------------------------------------------


class OrderRow(Base):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    order_date: Mapped[datetime] = mapped_column(DateTime, index=True)
    status: Mapped[str] = mapped_column(String(20), index=True)

    user: Mapped[UserRow] = relationship(lazy="selectin")
    items: Mapped[list[OrderItemRow]] = relationship(
        back_populates="order",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="OrderItemRow.id",
    )


class OrderItemRow(Base):
    __tablename__ = "order_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    order_id: Mapped[int] = mapped_column(ForeignKey("orders.id"), index=True)
    product_id: Mapped[int] = mapped_column(ForeignKey("products.id"), index=True)
    quantity: Mapped[int] = mapped_column(Integer)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    reserved: Mapped[bool] = mapped_column(Boolean, default=False)

    order: Mapped[OrderRow] = relationship(back_populates="items")
    product: Mapped[ProductRow] = relationship(lazy="selectin")


class ReportRow(Base):
    __tablename__ = "reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    report_date: Mapped[datetime] = mapped_column(DateTime)
    total_earnings: Mapped[Decimal] = mapped_column(Numeric(14, 2))
    month: Mapped[int] = mapped_column(Integer)
    year: Mapped[int] = mapped_column(Integer)
    top_selling_product_id: Mapped[int | None] = mapped_column(ForeignKey("products.id"))
