"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from webstore.application.dto import ProductDTO
from webstore.domain.model.catalog import CatalogKind
from webstore.domain.model.product import Product
from webstore.domain.model.value_objects import Money
from webstore.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        price: str,
        quantity: int = 0,
        description: str = "",
        catalog: dict[CatalogKind, str] | None = None,
    ) -> ProductDTO:
        """Add a product, creating any catalog entries it names that don't exist yet."""
        with self._uow:
            refs = {
                kind.value: self._uow.catalog.get_or_create(kind, entry_name)
                for kind, entry_name in (catalog or {}).items()
                if entry_name
            }
            product = Product.create(
                name=name,
                price=Money.of(price),
                quantity=quantity,
                description=description,
                **refs,
            )
            self._uow.products.save(product)
            self._uow.commit()

        logger.info("Product #%s '%s' added at %s", product.id, product.name, product.price)
        return ProductDTO.from_product(product)


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[ProductDTO]:
        with self._uow:
            return [ProductDTO.from_product(p) for p in self._uow.products.list_all()]
