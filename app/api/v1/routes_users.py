# File: app/api/v1/routes_users.py

"""
User API routes.

GET  /users        -> all users
GET  /users/{id}   -> one user, or null when the id was never assigned
POST /users        -> store a user and return it with its generated id
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.api.deps import get_user_service
from app.models.user import User
from app.schemas.user import UserCreate, UserRead
from app.services.user_service import UserService

router = APIRouter()


@router.get(
    "",
    response_model=list[UserRead],
    summary="List users",
)
def list_users(service: UserService = Depends(get_user_service)):
    return service.find_all()


@router.get(
    "/{user_id}",
    response_model=Optional[UserRead],
    summary="Get a user by id",
)
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    """
    Return the user, or ``null`` with 200 when no user has this id.
    """
    return service.find_by_id(user_id)


@router.post(
    "",
    response_model=UserRead,
    summary="Create a user",
)
def create_user(
    payload: UserCreate,
    service: UserService = Depends(get_user_service),
):
    return service.save(User(**payload.model_dump()))
