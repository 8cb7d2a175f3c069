"""Tests for products, stock and users."""

from datetime import datetime

import pytest

from webstore.application.add_product import AddProductHandler, ListProductsHandler
from webstore.application.add_user import AddUserHandler
from webstore.application.product_quantity import ProductQuantityHandler
from webstore.application.set_stock import SetStockHandler
from webstore.domain.exceptions import ProductNotFoundError, ValidationError
from webstore.domain.model.catalog import CatalogKind
from webstore.domain.model.order import Order, OrderItem, OrderStatus
from webstore.domain.model.product import Product
from webstore.domain.model.user import User
from webstore.domain.model.value_objects import Money
from tests.fakes import FakeUnitOfWork


class TestAddProduct:

    def test_adds_product(self):
        uow = FakeUnitOfWork()
        dto = AddProductHandler(uow).handle("Runner", "59.99", quantity=4)

        assert dto.id is not None
        assert dto.price == "$59.99"
        assert dto.effective_price == "$59.99"
        assert uow.products.get_by_id(dto.id).quantity == 4

    def test_creates_catalog_entries_once(self):
        uow = FakeUnitOfWork()
        handler = AddProductHandler(uow)
        first = handler.handle("Runner", "50", catalog={CatalogKind.CATEGORY: "Shoes"})
        second = handler.handle(
            "Boot", "80", catalog={CatalogKind.CATEGORY: "shoes", CatalogKind.BRAND: "Acme"}
        )

        assert first.category == "Shoes"
        assert second.category == "Shoes"
        assert second.brand == "Acme"
        assert len(uow.catalog.list_all(CatalogKind.CATEGORY)) == 1

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            AddProductHandler(FakeUnitOfWork()).handle("Runner", "0")

    def test_bad_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            AddProductHandler(FakeUnitOfWork()).handle("Runner", "cheap")

    def test_list_products(self):
        uow = FakeUnitOfWork()
        AddProductHandler(uow).handle("Runner", "50")
        AddProductHandler(uow).handle("Boot", "80")
        assert [p.name for p in ListProductsHandler(uow).handle()] == ["Runner", "Boot"]


class TestSetStock:

    def test_sets_quantity(self):
        uow = FakeUnitOfWork(products=[Product(id=1, name="Runner", price=Money.of("50"))])
        SetStockHandler(uow).handle(1, 12)
        assert uow.products.get_by_id(1).quantity == 12
        assert uow.products.locked == [1]

    def test_negative_rejected(self):
        uow = FakeUnitOfWork(products=[Product(id=1, name="Runner", price=Money.of("50"))])
        with pytest.raises(ValidationError, match="cannot be negative"):
            SetStockHandler(uow).handle(1, -1)

    def test_unknown_product(self):
        with pytest.raises(ProductNotFoundError):
            SetStockHandler(FakeUnitOfWork()).handle(7, 1)


class TestProductQuantity:

    def test_on_hand_minus_sold(self):
        user = User(id=1, email="a@b.com")
        uow = FakeUnitOfWork(
            users=[user],
            products=[Product(id=1, name="Runner", price=Money.of("50"), quantity=20)],
        )
        product = uow.products.get_by_id(1)
        for status, qty in [(OrderStatus.COMPLETED, 3), (OrderStatus.COMPLETED, 2), (OrderStatus.PENDING, 9)]:
            order = Order.place(user, datetime(2024, 5, 1), [OrderItem.for_product(product, qty)])
            order.update_status(status)
            uow.orders.save(order)

        dto = ProductQuantityHandler(uow).handle(1)

        assert dto.name == "Runner"
        assert dto.on_hand == 20
        assert dto.sold == 5
        assert dto.remaining == 15

    def test_invalid_id(self):
        with pytest.raises(ValidationError, match="positive integer"):
            ProductQuantityHandler(FakeUnitOfWork()).handle(0)

    def test_unknown_product(self):
        with pytest.raises(ProductNotFoundError):
            ProductQuantityHandler(FakeUnitOfWork()).handle(3)


class TestAddUser:

    def test_adds_user(self):
        uow = FakeUnitOfWork()
        user = AddUserHandler(uow).handle("Ann@Example.com", "Ann", "Lee")
        assert user.id is not None
        assert uow.users.get_by_email("ann@example.com").full_name == "Ann Lee"

    def test_duplicate_rejected(self):
        uow = FakeUnitOfWork(users=[User(id=1, email="ann@example.com")])
        with pytest.raises(ValidationError, match="already exists"):
            AddUserHandler(uow).handle("ANN@example.com")

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            AddUserHandler(FakeUnitOfWork()).handle("not-an-email")
