"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from webstore.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_for_update(self, product_id: int) -> Product | None:
        """Like ``get_by_id`` but locks the product until the unit of work ends.

        Used by every stock mutation so concurrent reservations on the
        same product are serialized.
        """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def list_by_category(self, category_name: str) -> list[Product]:
        """Return products whose category name matches, ignoring case."""

    @abstractmethod
    def list_by_brand(self, brand_name: str) -> list[Product]:
        """Return products whose brand name matches, ignoring case."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, assigning its ID if new."""
