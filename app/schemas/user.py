# File: app/schemas/user.py

from pydantic import BaseModel, ConfigDict


class UserBase(BaseModel):
    name: str
    email: str


class UserCreate(UserBase):
    # Unknown keys (including "id") are dropped: ids come from the database
    pass


class UserRead(UserBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
