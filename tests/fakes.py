"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the SQL repositories
but keep everything in a dict. No database, no side effects.

Stored objects are copied on the way in and out, like rows mapped to
fresh dataclasses, so a test only sees changes that were saved.  The
FakeUnitOfWork snapshots every store on entry and restores it unless
``commit()`` was called.
"""

from __future__ import annotations

import copy
from datetime import datetime

from webstore.domain.model.catalog import CatalogEntry, CatalogKind
from webstore.domain.model.discount import Discount
from webstore.domain.model.order import Order, OrderStatus
from webstore.domain.model.product import Product
from webstore.domain.model.report import Report
from webstore.domain.model.user import User
from webstore.domain.repository.catalog_repository import CatalogRepository
from webstore.domain.repository.discount_repository import DiscountRepository
from webstore.domain.repository.order_repository import OrderRepository
from webstore.domain.repository.product_repository import ProductRepository
from webstore.domain.repository.report_repository import ReportRepository
from webstore.domain.repository.unit_of_work import UnitOfWork
from webstore.domain.repository.user_repository import UserRepository


class _FakeStore:

    def __init__(self) -> None:
        self._store: dict = {}
        self._next_id = 1

    def _assign_id(self, entity) -> None:
        if entity.id is None:
            entity.id = self._next_id
        self._next_id = max(self._next_id, entity.id + 1)

    def snapshot(self) -> tuple[dict, int]:
        return copy.deepcopy(self._store), self._next_id

    def restore(self, state: tuple[dict, int]) -> None:
        self._store, self._next_id = state


class FakeCatalogRepository(_FakeStore, CatalogRepository):

    def get_or_create(self, kind: CatalogKind, name: str) -> CatalogEntry:
        entry = CatalogEntry.named(name)
        for stored_kind, stored in self._store.values():
            if stored_kind == kind and stored.matches(entry.name):
                return stored
        created = CatalogEntry(id=self._next_id, name=entry.name)
        self._store[created.id] = (kind, created)
        self._next_id += 1
        return created

    def list_all(self, kind: CatalogKind) -> list[CatalogEntry]:
        return [entry for k, entry in self._store.values() if k == kind]


class FakeUserRepository(_FakeStore, UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        super().__init__()
        for user in users or []:
            self.save(user)

    def get_by_email(self, email: str) -> User | None:
        for user in self._store.values():
            if user.email.lower() == email.strip().lower():
                return copy.deepcopy(user)
        return None

    def save(self, user: User) -> None:
        self._assign_id(user)
        self._store[user.id] = copy.deepcopy(user)


class FakeProductRepository(_FakeStore, ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        super().__init__()
        self.locked: list[int] = []
        for product in products or []:
            self.save(product)

    def get_by_id(self, product_id: int) -> Product | None:
        product = self._store.get(product_id)
        return copy.deepcopy(product) if product is not None else None

    def get_for_update(self, product_id: int) -> Product | None:
        self.locked.append(product_id)
        return self.get_by_id(product_id)

    def list_all(self) -> list[Product]:
        return [copy.deepcopy(p) for p in self._store.values()]

    def list_by_category(self, category_name: str) -> list[Product]:
        return [p for p in self.list_all() if p.category and p.category.matches(category_name)]

    def list_by_brand(self, brand_name: str) -> list[Product]:
        return [p for p in self.list_all() if p.brand and p.brand.matches(brand_name)]

    def save(self, product: Product) -> None:
        self._assign_id(product)
        self._store[product.id] = copy.deepcopy(product)


class FakeDiscountRepository(_FakeStore, DiscountRepository):

    def __init__(self, discounts: list[Discount] | None = None) -> None:
        super().__init__()
        for discount in discounts or []:
            self.save(discount)

    def get_by_id(self, discount_id: int) -> Discount | None:
        discount = self._store.get(discount_id)
        return copy.deepcopy(discount) if discount is not None else None

    def list_all(self) -> list[Discount]:
        return [copy.deepcopy(d) for d in self._store.values()]

    def list_in_range(self, start: datetime, end: datetime) -> list[Discount]:
        return [d for d in self.list_all() if d.start_date >= start and d.end_date <= end]

    def save(self, discount: Discount) -> None:
        self._assign_id(discount)
        self._store[discount.id] = copy.deepcopy(discount)


class FakeOrderRepository(_FakeStore, OrderRepository):
    """Orders are returned with their items' products re-read from the
    product repository, the way a join would return current product rows."""

    def __init__(self, products: FakeProductRepository) -> None:
        super().__init__()
        self._products = products
        self._next_item_id = 1

    def get_by_id(self, order_id: int) -> Order | None:
        order = self._store.get(order_id)
        return self._load(order) if order is not None else None

    def list_all(self) -> list[Order]:
        return [self._load(o) for o in self._store.values()]

    def list_by_status(self, status: OrderStatus) -> list[Order]:
        return [o for o in self.list_all() if o.status == status]

    def list_by_user_email(self, email: str) -> list[Order]:
        return [o for o in self.list_all() if o.user.email.lower() == email.lower()]

    def save(self, order: Order) -> None:
        self._assign_id(order)
        for item in order.items:
            if item.id is None:
                item.id = self._next_item_id
            self._next_item_id = max(self._next_item_id, item.id + 1)
        self._store[order.id] = copy.deepcopy(order)

    def snapshot(self) -> tuple[dict, int]:
        store, next_id = super().snapshot()
        return store, (next_id, self._next_item_id)  # type: ignore[return-value]

    def restore(self, state) -> None:
        self._store, (self._next_id, self._next_item_id) = state

    def _load(self, order: Order) -> Order:
        loaded = copy.deepcopy(order)
        for item in loaded.items:
            current = self._products.get_by_id(item.product.id)
            if current is not None:
                item.product = current
        return loaded


class FakeReportRepository(_FakeStore, ReportRepository):

    def add(self, report: Report) -> None:
        self._assign_id(report)
        self._store[report.id] = copy.deepcopy(report)

    def list_all(self) -> list[Report]:
        return [copy.deepcopy(r) for r in self._store.values()]


class FakeUnitOfWork(UnitOfWork):

    def __init__(
        self,
        users: list[User] | None = None,
        products: list[Product] | None = None,
        discounts: list[Discount] | None = None,
    ) -> None:
        self.catalog = FakeCatalogRepository()
        self.users = FakeUserRepository(users)
        self.products = FakeProductRepository(products)
        self.discounts = FakeDiscountRepository(discounts)
        self.orders = FakeOrderRepository(self.products)
        self.reports = FakeReportRepository()
        self.commits = 0
        self._snapshot: dict | None = None

    def _stores(self) -> dict[str, _FakeStore]:
        return {
            "catalog": self.catalog,
            "users": self.users,
            "products": self.products,
            "discounts": self.discounts,
            "orders": self.orders,
            "reports": self.reports,
        }

    def __enter__(self) -> FakeUnitOfWork:
        self._snapshot = {name: store.snapshot() for name, store in self._stores().items()}
        return self

    def commit(self) -> None:
        self.commits += 1
        self._snapshot = None

    def rollback(self) -> None:
        if self._snapshot is None:
            return
        for name, store in self._stores().items():
            store.restore(self._snapshot[name])
        self._snapshot = None
