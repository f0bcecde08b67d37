"""Request Dependencies — wires request-scoped stores, validator, service and caller identity.

Invariants:
    - Every object here shares the request's single AsyncSession
    - Nothing is cached across requests
    - The caller is authenticated before any request body is read: endpoints declare
      no body parameter and parse it with read_body() once require_user() resolved

Design Decisions:
    - require_user(activity) is a dependency factory: the activity phrase ends up in the
      ATHR-002 message, so each endpoint binds its own
    - Body parsing goes through the same pydantic models and RequestValidationError as
      FastAPI's own parsing, so malformed bodies from signed-in callers still get the
      VALIDATION_ERROR envelope
"""

from typing import Callable, TypeVar

from fastapi import Depends, Header, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from quora.config import get_settings
from quora.core.domain_types import AuthenticatedUser
from quora.core.repository_protocols import TokenValidator
from quora.infrastructure.database import get_db
from quora.services.question_service import QuestionService
from quora.services.question_store import SqlQuestionStore
from quora.services.token_validator import BearerTokenValidator
from quora.services.user_store import SqlUserStore

BodyT = TypeVar("BodyT", bound=BaseModel)


def get_token_validator(
    db: AsyncSession = Depends(get_db),
) -> BearerTokenValidator:
    return BearerTokenValidator(db)


def get_question_service(
    db: AsyncSession = Depends(get_db),
) -> QuestionService:
    return QuestionService(
        SqlQuestionStore(db),
        SqlUserStore(db),
        admin_role=get_settings().admin_role,
    )


def require_user(activity: str) -> Callable:
    """Dependency resolving the bearer token to the signed-in user for `activity`."""

    async def current_user(
        authorization: str | None = Header(None),
        validator: TokenValidator = Depends(get_token_validator),
    ) -> AuthenticatedUser:
        return await validator.validate(authorization, activity)

    return current_user


async def read_body(request: Request, model: type[BodyT]) -> BodyT:
    """Parse the JSON body into `model`; an empty body yields the model's defaults."""
    raw = await request.body()
    if not raw.strip():
        return model()
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in e.errors()],
        )
