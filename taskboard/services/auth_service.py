# File: taskboard/services/auth_service.py

"""
Authentication service.

Account-level operations on top of ``taskboard.core.security``:
  - registration (with email uniqueness)
  - credential verification for login
  - profile updates, re-hashing only when a new password is supplied
  - resolving a bearer token back to a User row
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskboard.core.config import settings
from taskboard.core.errors import ConflictError, UnauthorizedError, ValidationError
from taskboard.core.security import hash_password, verify_password, verify_token
from taskboard.models.user import User
from taskboard.schemas.user import ProfileUpdate, UserCreate

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"

# bcrypt only looks at the first 72 bytes and newer releases refuse more.
_BCRYPT_MAX_BYTES = 72


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _clean_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Name is required")
    return name


def _check_password(password: Optional[str]) -> str:
    password = password or ""
    if len(password) < settings.password_min_length:
        raise ValidationError(
            f"Password must be at least {settings.password_min_length} characters"
        )
    if len(password.encode("utf-8")) > _BCRYPT_MAX_BYTES:
        raise ValidationError(f"Password must be at most {_BCRYPT_MAX_BYTES} bytes")
    return password


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.scalars(select(User).where(User.email == normalize_email(email))).first()


def _commit_user(db: Session, user: User) -> User:
    try:
        db.commit()
    except IntegrityError as exc:
        # Lost a race with another request using the same email.
        db.rollback()
        raise ConflictError() from exc
    db.refresh(user)
    return user


def register_user(db: Session, payload: UserCreate) -> User:
    """
    Create a new account.

    Raises ValidationError for a blank name or short password and
    ConflictError when the email is already registered.
    """
    name = _clean_name(payload.name)
    password = _check_password(payload.password)
    email = normalize_email(payload.email)

    if get_user_by_email(db, email) is not None:
        raise ConflictError()

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        avatar=payload.avatar or settings.default_avatar,
    )
    db.add(user)
    user = _commit_user(db, user)
    logger.info("Registered user %s", user.id)
    return user


def authenticate_user(db: Session, *, email: str, password: str) -> User:
    """
    Return the user owning ``email`` if ``password`` matches.

    Unknown email and wrong password raise the same UnauthorizedError so the
    response does not reveal which one failed.
    """
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Failed login attempt")
        raise UnauthorizedError(INVALID_CREDENTIALS)
    return user


def update_profile(db: Session, user: User, payload: ProfileUpdate) -> User:
    """
    Apply the fields present in ``payload`` to ``user``.

    The password is hashed here, and only when a non-empty one is sent;
    otherwise the stored hash is left untouched.
    """
    changes = payload.model_dump(exclude_unset=True)

    if "name" in changes:
        user.name = _clean_name(changes["name"])

    if "email" in changes:
        if changes["email"] is None:
            raise ValidationError("Email is required")
        email = normalize_email(changes["email"])
        if email != user.email:
            existing = get_user_by_email(db, email)
            if existing is not None and existing.id != user.id:
                raise ConflictError("Email already in use")
            user.email = email

    if "avatar" in changes:
        user.avatar = changes["avatar"] or settings.default_avatar

    if changes.get("password"):
        user.password_hash = hash_password(_check_password(changes["password"]))

    return _commit_user(db, user)


def resolve_token(db: Session, token: str) -> Optional[User]:
    """
    Verify ``token`` and load the user it names.

    Raises InvalidTokenError for a bad token; returns None when the token is
    fine but the account is gone.
    """
    user_id = verify_token(token)
    return get_user(db, user_id)
