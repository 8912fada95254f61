# File: taskboard/models/user.py

"""
User model.

Holds identity and credentials. ``password_hash`` is only ever written by
the auth service, which hashes before assignment.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.models.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # URL or an inline data: URI uploaded from the profile page
    avatar: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email}>"
