"""Application service: Apply Discount use case.

A discount can target one product, every product in a category or every
product of a brand.  Each targeted product gets its ``discounted_price``
recomputed from its base price and the discount attached, all in one
transaction.
"""

from __future__ import annotations

import logging

from webstore.domain.exceptions import (
    DiscountNotFoundError,
    ProductNotFoundError,
    ValidationError,
)
from webstore.domain.model.discount import Discount
from webstore.domain.model.product import Product
from webstore.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class ApplyDiscountHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def to_product(self, product_id: int, discount_id: int) -> str:
        if product_id <= 0 or discount_id <= 0:
            raise ValidationError("Product ID and discount ID must be positive integers")
        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(f"Product #{product_id} not found")
            discount = self._get_discount(discount_id)
            self._apply(discount, [product])
            self._uow.commit()

        logger.info("Discount #%s applied to product #%s", discount_id, product_id)
        return "Discount applied to product successfully"

    def to_category(self, category_name: str, discount_id: int) -> str:
        self._check_target("Category", category_name, discount_id)
        with self._uow:
            products = self._uow.products.list_by_category(category_name)
            if not products:
                logger.warning("No products found for category %r", category_name)
                raise ProductNotFoundError(f"No products found for category: {category_name}")
            discount = self._get_discount(discount_id)
            self._apply(discount, products)
            self._uow.commit()

        logger.info(
            "Discount #%s applied to %d product(s) in category %r",
            discount_id, len(products), category_name,
        )
        return "Discount applied to category successfully"

    def to_brand(self, brand_name: str, discount_id: int) -> str:
        self._check_target("Brand", brand_name, discount_id)
        with self._uow:
            products = self._uow.products.list_by_brand(brand_name)
            if not products:
                logger.warning("No products found for brand %r", brand_name)
                raise ProductNotFoundError(f"No products found for brand: {brand_name}")
            discount = self._get_discount(discount_id)
            self._apply(discount, products)
            self._uow.commit()

        logger.info(
            "Discount #%s applied to %d product(s) of brand %r",
            discount_id, len(products), brand_name,
        )
        return "Discount applied to brand successfully"

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _check_target(label: str, name: str, discount_id: int) -> None:
        if not name or not name.strip():
            raise ValidationError(f"{label} name cannot be empty")
        if discount_id <= 0:
            raise ValidationError("Discount ID must be a positive integer")

    def _get_discount(self, discount_id: int) -> Discount:
        discount = self._uow.discounts.get_by_id(discount_id)
        if discount is None:
            logger.warning("Discount #%s not found", discount_id)
            raise DiscountNotFoundError(f"Discount #{discount_id} not found")
        return discount

    def _apply(self, discount: Discount, products: list[Product]) -> None:
        # Compute every new price before writing anything.
        for product in products:
            product.apply_discount(discount)
        for product in products:
            self._uow.products.save(product)
