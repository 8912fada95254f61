# File: taskboard/core/security.py

"""
Security helpers for the Taskboard API.

Password hashing uses bcrypt directly; access tokens are HS256 JWTs signed
with ``settings.secret_key`` via python-jose. Settings are read at call time
so tests (and operators) can adjust rounds or expiry without re-importing.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
from jose import JWTError, jwt

from taskboard.core.config import settings
from taskboard.core.errors import InvalidTokenError


def hash_password(plaintext: str) -> str:
    """Return a salted bcrypt hash of ``plaintext``."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")


def verify_password(plaintext: str, hashed: str) -> bool:
    """
    Check ``plaintext`` against a stored bcrypt hash.

    A malformed or empty hash simply fails verification.
    """
    if not plaintext or not hashed:
        return False
    try:
        return bcrypt.checkpw(plaintext.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Issue a signed access token for ``subject`` (a user id).
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode: dict[str, Any] = {
        "sub": str(subject),
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def verify_token(token: str) -> str:
    """
    Decode ``token`` and return the user id it was issued for.

    Raises InvalidTokenError on a bad signature, an expired or non-expiring
    token, a missing subject, or anything that is not a JWT at all.
    """
    if not token:
        raise InvalidTokenError()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            options={"require_exp": True},
        )
    except JWTError as exc:
        raise InvalidTokenError() from exc

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise InvalidTokenError()
    return subject
