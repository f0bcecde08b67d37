"""Question Rule Enforcement — content and ownership checks for the question lifecycle.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - check_* functions return a QuoraError on violation, None on success
    - The service raises what these return; nothing here raises
    - Ownership is exact match on public identifier; admin is case-insensitive role match

Design Decisions:
    - Return errors (not raise): callers attach ErrorContext and decide when to raise,
      checks stay trivially testable
    - A missing requester id never satisfies ownership (no implicit bypass)
"""

from quora.core.domain_types import AuthenticatedUser, QuestionRecord, UserRole
from quora.core.errors import (
    AuthorizationFailedError,
    ErrorContext,
    InvalidQuestionError,
    QuoraError,
)


def is_blank(content: str | None) -> bool:
    """True for None, empty, or whitespace-only content."""
    return content is None or not content.strip()


def normalize_content(content: str) -> str:
    return content.strip()


def is_owner(user_id: str | None, question: QuestionRecord) -> bool:
    return user_id is not None and user_id == question.owner_id


def is_admin(role: str | None, admin_role: str = UserRole.ADMIN.value) -> bool:
    return role is not None and role.lower() == admin_role.lower()


def check_new_content(content: str | None) -> QuoraError | None:
    """Rule 1: New question content must be non-empty after trimming."""
    if is_blank(content):
        return InvalidQuestionError("Content can't be null or empty")
    return None


def check_edit_content(
    content: str | None, question: QuestionRecord,
) -> QuoraError | None:
    """Rule 2: Edited content must be non-empty and differ from the current content."""
    if is_blank(content) or (
        normalize_content(content).lower() == question.content.strip().lower()
    ):
        return InvalidQuestionError(
            "Content can't be null or empty or equal to existing content",
            ErrorContext(question_id=question.id),
        )
    return None


def check_can_edit(
    user_id: str | None, question: QuestionRecord,
) -> QuoraError | None:
    """Rule 3: Only the owner edits."""
    if not is_owner(user_id, question):
        return AuthorizationFailedError(
            "ATHR-003", "Only the question owner can edit the question",
            ErrorContext(question_id=question.id, user_id=user_id),
        )
    return None


def check_can_delete(
    user: AuthenticatedUser,
    question: QuestionRecord,
    admin_role: str = UserRole.ADMIN.value,
) -> QuoraError | None:
    """Rule 4: Owner or admin deletes."""
    if not is_owner(user.id, question) and not is_admin(user.role, admin_role):
        return AuthorizationFailedError(
            "ATHR-003", "Only the question owner or admin can delete the question",
            ErrorContext(question_id=question.id, user_id=user.id),
        )
    return None
