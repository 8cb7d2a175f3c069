"""Abstract repository for User."""

from __future__ import annotations

from abc import ABC, abstractmethod

from webstore.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return the user with this email (case-insensitive), or None."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user, assigning its ID if new."""
