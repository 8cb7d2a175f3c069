"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from webstore.domain.model.user import User
from webstore.domain.repository.user_repository import UserRepository
from webstore.infrastructure.persistence.orm import UserRow


def to_user(row: UserRow) -> User:
    return User(
        id=row.id,
        email=row.email,
        first_name=row.first_name,
        last_name=row.last_name,
    )


class SqlUserRepository(UserRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_email(self, email: str) -> User | None:
        row = self._session.scalars(
            select(UserRow).where(func.lower(UserRow.email) == email.strip().lower())
        ).first()
        return to_user(row) if row is not None else None

    def save(self, user: User) -> None:
        row = self._session.get(UserRow, user.id) if user.id is not None else None
        if row is None:
            row = UserRow()
            self._session.add(row)
        row.email = user.email
        row.first_name = user.first_name
        row.last_name = user.last_name
        self._session.flush()
        user.id = row.id
