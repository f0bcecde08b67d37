"""Boundary Protocols — contracts between the question service and its collaborators.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell (services/) via dependency injection
    - Stores speak QuestionRecord / AuthenticatedUser, never ORM rows

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO
    - Narrow mutation API (update_content): content is the only mutable field
"""

from typing import Protocol

from quora.core.domain_types import (
    AuthenticatedUser, QuestionId, QuestionRecord, UserId,
)


class QuestionStore(Protocol):
    """Contract for question persistence — implemented by shell."""
    async def insert(self, record: QuestionRecord) -> QuestionRecord: ...
    async def get_by_id(self, question_id: QuestionId) -> QuestionRecord | None: ...
    async def get_by_content(self, content: str) -> QuestionRecord | None: ...
    async def update_content(
        self, question_id: QuestionId, content: str,
    ) -> None: ...
    async def delete(self, question_id: QuestionId) -> None: ...
    async def list_all(self) -> list[QuestionRecord]: ...
    async def list_by_owner(self, owner_id: UserId) -> list[QuestionRecord]: ...
    async def commit(self) -> None: ...


class UserStore(Protocol):
    """Contract for user lookup — implemented by shell."""
    async def exists(self, user_id: UserId) -> bool: ...


class TokenValidator(Protocol):
    """Contract for bearer token validation — implemented by shell."""
    async def validate(
        self, authorization: str | None, activity: str,
    ) -> AuthenticatedUser: ...
