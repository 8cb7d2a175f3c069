"""Application service: Add User use case."""

from __future__ import annotations

import logging

from webstore.domain.exceptions import ValidationError
from webstore.domain.model.user import User
from webstore.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class AddUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, email: str, first_name: str = "", last_name: str = "") -> User:
        user = User.create(email, first_name, last_name)
        with self._uow:
            if self._uow.users.get_by_email(user.email) is not None:
                raise ValidationError(f"User '{user.email}' already exists")
            self._uow.users.save(user)
            self._uow.commit()

        logger.info("User #%s '%s' added", user.id, user.email)
        return user
