"""UserAuth ORM — access tokens issued at sign-in, read by the token validator.

Invariants:
    - access_token is unique
    - logout_at set means the token is dead regardless of expires_at

Design Decisions:
    - ON DELETE CASCADE from users: tokens never outlive their user
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quora.db.base import Base


class UserAuth(Base):
    """Access token entity."""
    __tablename__ = "user_auth"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    access_token: Mapped[str] = mapped_column(
        String(500), nullable=False, unique=True,
    )
    login_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    logout_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    user: Mapped["User"] = relationship("User", lazy="joined")
