"""Answer ORM — a user's answer to a question.

Invariants:
    - Always belongs to a Question (question_id FK, ON DELETE CASCADE)
    - Pure data record: no business rules in this service
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quora.db.base import Base


class Answer(Base):
    """Answer entity."""
    __tablename__ = "answer"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(String(200), nullable=False, unique=True)
    ans: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    question_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("question.id", ondelete="CASCADE"), nullable=False,
    )

    question: Mapped["Question"] = relationship(
        "Question", back_populates="answers",
    )
