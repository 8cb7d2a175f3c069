"""Product aggregate.

Products live independently of orders. They carry their on-hand stock
(``quantity``), their base price and a cached ``discounted_price`` that is
either zero (no discount in effect) or the result of the last discount
applied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from webstore.domain.exceptions import InsufficientStockError, ValidationError
from webstore.domain.model.catalog import CatalogEntry
from webstore.domain.model.discount import Discount, calculate_discounted_price
from webstore.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    The catalog references (category, brand, gender, color, size) are
    always populated when a product is loaded through a repository.
    """

    id: int | None
    name: str
    price: Money
    quantity: int = 0
    description: str = ""
    category: CatalogEntry | None = None
    brand: CatalogEntry | None = None
    gender: CatalogEntry | None = None
    color: CatalogEntry | None = None
    size: CatalogEntry | None = None
    discounted_price: Money = field(default_factory=Money.zero)
    discounts: list[Discount] = field(default_factory=list)

    @staticmethod
    def create(
        name: str,
        price: Money,
        quantity: int = 0,
        description: str = "",
        **catalog: CatalogEntry | None,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if price.is_zero:
            raise ValidationError("Product price must be greater than zero")
        if quantity < 0:
            raise ValidationError("Product quantity cannot be negative")
        return Product(
            id=None,
            name=name.strip(),
            price=price,
            quantity=quantity,
            description=description.strip(),
            **catalog,
        )

    # --- Pricing ---------------------------------------------------------------

    @property
    def effective_price(self) -> Money:
        """Discounted price when one is set, otherwise the base price."""
        if not self.discounted_price.is_zero:
            return self.discounted_price
        return self.price

    def apply_discount(self, discount: Discount) -> None:
        """Materialize ``discount`` onto this product.

        The discount is appended even if it is already attached; applying
        the same discount twice leaves two associations.  A discount that
        takes nothing off (0%) is attached but leaves ``discounted_price``
        at zero.
        """
        amount = calculate_discounted_price(self.price.amount, discount.percentage)
        if amount < 0:
            raise ValidationError(
                f"Discount '{discount.name}' ({discount.percentage}%) would make "
                f"the price of {self.name} negative"
            )
        if amount == self.price.amount:
            # Zero means "no discounted price"; it never equals the base price.
            self.discounted_price = Money.zero()
        else:
            self.discounted_price = Money(amount, self.price.currency)
        self.discounts.append(discount)

    def drop_expired_discounts(self, now: datetime) -> bool:
        """Detach discounts whose window has ended.

        Resets ``discounted_price`` to zero once no discount remains.
        Returns True if anything changed.
        """
        active = [d for d in self.discounts if d.is_active_at(now)]
        changed = len(active) != len(self.discounts)
        self.discounts = active
        if not active and not self.discounted_price.is_zero:
            self.discounted_price = Money.zero()
            changed = True
        return changed

    # --- Stock -----------------------------------------------------------------

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0

    def take_stock(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Reservation quantity must be positive")
        if quantity > self.quantity:
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(need {quantity}, have {self.quantity})"
            )
        self.quantity -= quantity

    def return_stock(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Release quantity must be positive")
        self.quantity += quantity

    def set_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Product quantity cannot be negative")
        self.quantity = quantity
