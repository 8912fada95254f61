# File: taskboard/api/deps.py

from collections.abc import Generator
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from taskboard.core.errors import InvalidTokenError, UnauthorizedError
from taskboard.db.session import SessionLocal
from taskboard.models.user import User
from taskboard.services.auth_service import resolve_token

# auto_error=False so a missing header goes through our own 401 instead of
# FastAPI's 403.
bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve ``Authorization: Bearer <token>`` to the calling User.

    Runs before every protected handler; the handler never sees an
    unauthenticated request.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Not authorized, no token")

    try:
        user = resolve_token(db, credentials.credentials)
    except InvalidTokenError as exc:
        raise UnauthorizedError("Not authorized, token failed") from exc

    if user is None:
        raise UnauthorizedError("Not authorized, user not found")
    return user
