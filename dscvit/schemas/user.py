# File: dscvit/schemas/user.py

from typing import Optional

from pydantic import BaseModel


class UserFields(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    activated: Optional[bool] = None


class UserCreate(UserFields):
    id: str


class UserUpdate(UserFields):
    """
    Full replacement of a user's mutable fields; anything left out is
    written back as NULL.
    """
    id: str


class UserRead(BaseModel):
    id: str
    username: Optional[str] = None
    activated: Optional[bool] = None

    class Config:
        from_attributes = True
