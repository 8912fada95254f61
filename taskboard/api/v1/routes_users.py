# File: taskboard/api/v1/routes_users.py

"""
User API: registration, login and the caller's own profile.

Registration and login are public; they are how a client gets a token.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from taskboard.api.deps import get_current_user, get_db
from taskboard.core.security import create_access_token
from taskboard.models.user import User
from taskboard.schemas.user import (
    AuthResponse,
    ProfileUpdate,
    UserCreate,
    UserLogin,
    UserRead,
    UserResponse,
)
from taskboard.services import auth_service

router = APIRouter()


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(user=UserRead.model_validate(user), token=create_access_token(user.id))


@router.post(
    "",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    user = auth_service.register_user(db, payload)
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse, summary="Log in with email and password")
def login(payload: UserLogin, db: Session = Depends(get_db)):
    user = auth_service.authenticate_user(db, email=payload.email, password=payload.password)
    return _auth_response(user)


@router.get("/profile", response_model=UserResponse, summary="Current user's profile")
def read_profile(current_user: User = Depends(get_current_user)):
    return UserResponse(user=UserRead.model_validate(current_user))


@router.put("/profile", response_model=UserResponse, summary="Update current user's profile")
def update_profile(
    payload: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Update name, email, avatar and optionally the password.

    An empty ``password`` (what the profile form sends when the field is left
    blank) keeps the current one.
    """
    user = auth_service.update_profile(db, current_user, payload)
    return UserResponse(user=UserRead.model_validate(user))
