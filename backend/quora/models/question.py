"""Question ORM — persists question content and its owner.

Invariants:
    - uuid is the public identifier; id never leaves the store
    - content is non-nullable and unique at creation (checked by the service)
    - user_id is set at creation and never changes
    - Deleting a question deletes its answers

Design Decisions:
    - owner loaded with lazy="joined": every read needs the owner's uuid for records
    - answers loaded with lazy="selectin" + delete-orphan cascade: async sessions cannot
      lazy-load, and ORM cascade must see the children to delete them
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quora.db.base import Base


class Question(Base):
    """Question entity — content owned by one user."""
    __tablename__ = "question"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    content: Mapped[str] = mapped_column(
        String(500), nullable=False, index=True,
    )
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )

    # Relationships
    user: Mapped["User"] = relationship("User", lazy="joined")
    answers: Mapped[list["Answer"]] = relationship(
        "Answer", back_populates="question",
        cascade="all, delete-orphan", lazy="selectin",
    )
