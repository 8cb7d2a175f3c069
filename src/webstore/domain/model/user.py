"""User: the buyer an order belongs to.

Authentication and roles are handled outside this package; here a user
is only something an order can be placed for, looked up by email.
"""

from __future__ import annotations

from dataclasses import dataclass

from webstore.domain.exceptions import ValidationError


@dataclass
class User:

    id: int | None
    email: str
    first_name: str = ""
    last_name: str = ""

    @staticmethod
    def create(email: str, first_name: str = "", last_name: str = "") -> User:
        if not email or "@" not in email:
            raise ValidationError(f"Invalid email address: {email!r}")
        return User(
            id=None,
            email=email.strip().lower(),
            first_name=first_name.strip(),
            last_name=last_name.strip(),
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
