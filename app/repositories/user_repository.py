# File: app/repositories/user_repository.py

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.user import User

# Primary keys are signed 64-bit INTEGER columns
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_all(self) -> list[User]:
        statement = select(User).order_by(User.id)
        return list(self._session.scalars(statement).all())

    def find_by_id(self, user_id: int) -> Optional[User]:
        # The driver cannot bind ids outside the column range; none can exist
        if not MIN_ID <= user_id <= MAX_ID:
            return None
        return self._session.get(User, user_id)

    def save(self, user: User) -> User:
        """
        Persist ``user`` and return it with ``id`` populated.

        On a storage error the session is rolled back and the error re-raised.
        """
        try:
            self._session.add(user)
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            raise
        self._session.refresh(user)
        return user
