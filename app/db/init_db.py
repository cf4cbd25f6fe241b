"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before ``create_all`` runs.
"""

from collections.abc import Iterable

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.db.session import engine
from app.models.base import Base
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserCreate
from app.services.user_service import UserService


def init_db(bind: Engine = engine) -> None:
    """
    Create all tables based on SQLAlchemy models. Safe to call repeatedly.
    """
    Base.metadata.create_all(bind=bind)


def seed_initial_data(db: Session, users: Iterable[UserCreate]) -> list[User]:
    """
    Insert ``users`` through the service layer and return the stored rows.
    """
    service = UserService(UserRepository(db))
    return [service.save(User(**user.model_dump())) for user in users]
