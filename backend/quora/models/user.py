"""User ORM — the account a question or answer belongs to.

Invariants:
    - uuid is the public identifier, unique
    - role is "admin" or "nonadmin"; compared case-insensitively by the rules

Design Decisions:
    - Users are referenced, not owned, by the question service: no cascade from here
      to questions (signup/delete-user flows live elsewhere)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from quora.core.domain_types import UserRole
from quora.db.base import Base


class User(Base):
    """User entity — identity and role."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    username: Mapped[str] = mapped_column(String(30), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    role: Mapped[str] = mapped_column(
        String(30), nullable=False, default=UserRole.NONADMIN.value,
    )
