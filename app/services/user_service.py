# File: app/services/user_service.py

"""
User service.

Forwards every call to the repository unchanged. No validation and no
error translation happen here.
"""

import logging
from typing import Optional

from app.models.user import User
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def find_all(self) -> list[User]:
        return self._repository.find_all()

    def find_by_id(self, user_id: int) -> Optional[User]:
        user = self._repository.find_by_id(user_id)
        if user is None:
            logger.debug("No user with id %s", user_id)
        return user

    def save(self, user: User) -> User:
        saved = self._repository.save(user)
        logger.info("Saved user %s", saved.id)
        return saved
