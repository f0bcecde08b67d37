"""Question Service — lifecycle rules for creating, editing, listing and deleting questions.

Invariants:
    - Every check re-queries the store (no caching, no memoization)
    - Errors raised immediately; nothing here retries or recovers
    - Each mutating operation commits exactly once, after all checks pass
    - Stored content is trimmed; duplicate detection compares trimmed content exactly

Design Decisions:
    - Stores injected via constructor (QuestionStore / UserStore protocols): the service
      never touches AsyncSession directly
    - Pure checks live in core/enforce_questions.py; this class sequences them around IO
    - Edit requires a real requester id: a missing id is rejected as not-owner instead
      of skipping the ownership check
"""

import logging
import uuid
from datetime import datetime, timezone

from quora.core.domain_types import (
    AuthenticatedUser, QuestionId, QuestionRecord, UserId, UserRole,
)
from quora.core.enforce_questions import (
    check_can_delete,
    check_can_edit,
    check_edit_content,
    check_new_content,
    normalize_content,
)
from quora.core.errors import (
    DuplicateQuestionError,
    ErrorContext,
    QuestionNotFoundError,
    QuoraError,
    UserNotFoundError,
)
from quora.core.repository_protocols import QuestionStore, UserStore

logger = logging.getLogger(__name__)


def _raise_if(error: QuoraError | None) -> None:
    if error is not None:
        raise error


class QuestionService:
    """Question lifecycle — validation, duplicate detection, ownership and role checks."""

    def __init__(
        self,
        questions: QuestionStore,
        users: UserStore,
        admin_role: str = UserRole.ADMIN.value,
    ):
        self.questions = questions
        self.users = users
        self.admin_role = admin_role

    async def create_question(
        self, content: str | None, user: AuthenticatedUser,
    ) -> QuestionRecord:
        """Validate content, reject duplicates, persist with a fresh uuid."""
        _raise_if(check_new_content(content))
        content = normalize_content(content)

        if await self.questions.get_by_content(content) is not None:
            raise DuplicateQuestionError(ErrorContext(user_id=user.id))

        record = QuestionRecord(
            id=QuestionId(str(uuid.uuid4())),
            content=content,
            date=datetime.now(timezone.utc),
            owner_id=user.id,
        )
        await self.questions.insert(record)
        await self.questions.commit()
        logger.info(
            "Question created",
            extra={"question_id": record.id, "user_id": user.id},
        )
        return record

    async def edit_question(
        self,
        content: str | None,
        user_id: UserId | None,
        question_id: QuestionId,
    ) -> QuestionRecord:
        """Owner-only content change; no-op edits rejected."""
        question = await self.get_question_by_id(question_id)

        denied = check_can_edit(user_id, question)
        if denied is not None:
            logger.warning(
                "Edit denied: requester is not the owner",
                extra={"question_id": question_id, "user_id": user_id},
            )
            raise denied
        _raise_if(check_edit_content(content, question))

        await self.questions.update_content(
            question_id, normalize_content(content),
        )
        await self.questions.commit()
        logger.info(
            "Question edited",
            extra={"question_id": question_id, "user_id": user_id},
        )
        return await self.get_question_by_id(question_id)

    async def delete_question(
        self, user: AuthenticatedUser, question_id: QuestionId,
    ) -> QuestionRecord:
        """Owner or admin removes the question and its answers."""
        question = await self.get_question_by_id(question_id)

        denied = check_can_delete(user, question, self.admin_role)
        if denied is not None:
            logger.warning(
                "Delete denied: requester is neither owner nor admin",
                extra={"question_id": question_id, "user_id": user.id},
            )
            raise denied

        await self.questions.delete(question_id)
        await self.questions.commit()
        logger.info(
            "Question deleted",
            extra={"question_id": question_id, "user_id": user.id},
        )
        return question

    async def get_all_questions(self) -> list[QuestionRecord]:
        return await self.questions.list_all()

    async def get_all_questions_by_user(
        self, user_id: UserId,
    ) -> list[QuestionRecord]:
        if not await self.users.exists(user_id):
            raise UserNotFoundError(ErrorContext(user_id=user_id))
        return await self.questions.list_by_owner(user_id)

    async def get_question_by_id(self, question_id: QuestionId) -> QuestionRecord:
        question = await self.questions.get_by_id(question_id)
        if question is None:
            raise QuestionNotFoundError(
                context=ErrorContext(question_id=question_id),
            )
        return question
