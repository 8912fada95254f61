# File: taskboard/schemas/user.py

from typing import Optional

from pydantic import EmailStr

from taskboard.schemas.base import APIModel, UTCDateTime


class UserBase(APIModel):
    email: EmailStr


class UserCreate(UserBase):
    name: str
    password: str
    avatar: Optional[str] = None


class UserLogin(APIModel):
    # Plain str: a malformed email is just a failed login, not a 400.
    email: str
    password: str


class ProfileUpdate(APIModel):
    """
    Partial profile update. Only keys present in the request body are
    applied; see ``auth_service.update_profile``.
    """

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    avatar: Optional[str] = None


class UserRead(UserBase):
    id: str
    name: str
    avatar: Optional[str] = None
    created_at: UTCDateTime
    updated_at: UTCDateTime


class UserResponse(APIModel):
    user: UserRead


class AuthResponse(APIModel):
    user: UserRead
    token: str
