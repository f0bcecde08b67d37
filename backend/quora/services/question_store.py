"""Question Store — SQLAlchemy implementation of the QuestionStore protocol.

Invariants:
    - Every method runs on the request-scoped AsyncSession passed in (no global session)
    - ORM rows never leave this module: callers receive QuestionRecord values
    - Writes flush but do not commit; commit() ends the unit of work
    - Listing order is ascending internal id (insertion order)

Design Decisions:
    - get_by_content returns the first match: uniqueness is enforced at creation by the
      service, not by a DB constraint (edits may legitimately collide)
    - delete goes through session.delete so ORM cascade removes answers even on
      backends without FK enforcement
    - populate_existing on every read: a long-lived session never serves a stale
      owner or answer collection from its identity map
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quora.core.domain_types import (
    QuestionId, QuestionRecord, UserId,
)
from quora.core.errors import (
    ErrorContext, QuestionNotFoundError, UserNotFoundError,
)
from quora.models.question import Question
from quora.models.user import User


def to_record(row: Question) -> QuestionRecord:
    return QuestionRecord(
        id=QuestionId(row.uuid),
        content=row.content,
        date=row.date,
        owner_id=UserId(row.user.uuid),
    )


class SqlQuestionStore:
    """Question persistence over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_row(self, question_id: QuestionId) -> Question | None:
        result = await self.db.execute(
            select(Question)
            .where(Question.uuid == question_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def _require_row(self, question_id: QuestionId) -> Question:
        row = await self._get_row(question_id)
        if row is None:
            raise QuestionNotFoundError(
                context=ErrorContext(question_id=question_id),
            )
        return row

    async def insert(self, record: QuestionRecord) -> QuestionRecord:
        result = await self.db.execute(
            select(User).where(User.uuid == record.owner_id),
        )
        owner = result.scalar_one_or_none()
        if owner is None:
            raise UserNotFoundError(ErrorContext(user_id=record.owner_id))
        row = Question(
            uuid=record.id,
            content=record.content,
            date=record.date,
            user_id=owner.id,
        )
        self.db.add(row)
        await self.db.flush()
        return record

    async def get_by_id(self, question_id: QuestionId) -> QuestionRecord | None:
        row = await self._get_row(question_id)
        return to_record(row) if row else None

    async def get_by_content(self, content: str) -> QuestionRecord | None:
        result = await self.db.execute(
            select(Question)
            .where(Question.content == content)
            .limit(1)
            .execution_options(populate_existing=True),
        )
        row = result.scalars().first()
        return to_record(row) if row else None

    async def update_content(
        self, question_id: QuestionId, content: str,
    ) -> None:
        row = await self._require_row(question_id)
        row.content = content
        await self.db.flush()

    async def delete(self, question_id: QuestionId) -> None:
        row = await self._require_row(question_id)
        await self.db.delete(row)
        await self.db.flush()

    async def list_all(self) -> list[QuestionRecord]:
        result = await self.db.execute(
            select(Question)
            .order_by(Question.id)
            .execution_options(populate_existing=True),
        )
        return [to_record(q) for q in result.scalars().all()]

    async def list_by_owner(self, owner_id: UserId) -> list[QuestionRecord]:
        result = await self.db.execute(
            select(Question)
            .join(User, Question.user_id == User.id)
            .where(User.uuid == owner_id)
            .order_by(Question.id)
            .execution_options(populate_existing=True),
        )
        return [to_record(q) for q in result.scalars().all()]

    async def commit(self) -> None:
        await self.db.commit()
