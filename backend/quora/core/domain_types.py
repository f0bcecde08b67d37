"""Domain Types — rich types and immutable value records shared across layers.

Invariants:
    - QuestionId, UserId wrap the public uuid strings — the internal integer key never leaves the store
    - QuestionRecord and AuthenticatedUser are frozen: layers pass values, not ORM rows
    - Response status strings are fixed — clients match on them

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Frozen dataclasses for records in transit: mutation goes through the store's narrow API
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

QuestionId = NewType("QuestionId", str)
UserId = NewType("UserId", str)


# ─── Enums ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    """User roles — only ADMIN carries override rights (delete)."""
    ADMIN = "admin"
    NONADMIN = "nonadmin"


class QuestionStatus(str, Enum):
    """Fixed status strings returned by mutating endpoints."""
    CREATED = "QUESTION CREATED"
    EDITED = "QUESTION EDITED"
    DELETED = "QUESTION DELETED"


# ─── Value Records ───────────────────────────────────────────────

@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity returned by the token validator."""
    id: UserId
    username: str
    role: str


@dataclass(frozen=True)
class QuestionRecord:
    """A question as seen outside the store."""
    id: QuestionId
    content: str
    date: datetime
    owner_id: UserId
