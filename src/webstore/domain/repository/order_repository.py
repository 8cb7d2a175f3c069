"""Abstract repository for Order aggregate.

Every read returns the full graph: user, items, each item's product and
the product's catalog references.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from webstore.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, oldest first."""

    @abstractmethod
    def list_by_status(self, status: OrderStatus) -> list[Order]:
        """Return orders in the given status, oldest first."""

    @abstractmethod
    def list_by_user_email(self, email: str) -> list[Order]:
        """Return the orders placed by the user with this email."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order.

        Assigns IDs to the order and to any new items, and deletes item
        records that are no longer on the order.
        """
