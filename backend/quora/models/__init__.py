"""ORM Models — SQLAlchemy declarative models for users, tokens, questions and answers.

Invariants:
    - All models inherit from Base (db/base.py)
    - Internal integer keys stay inside the store; uuid columns are the public identifiers

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from quora.models.user import User  # noqa: F401
from quora.models.user_auth import UserAuth  # noqa: F401
from quora.models.question import Question  # noqa: F401
from quora.models.answer import Answer  # noqa: F401
