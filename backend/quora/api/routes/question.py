"""Question Routes — create, edit, list and delete endpoints.

Invariants:
    - Every endpoint authenticates first: the require_user dependency resolves before
      the handler reads any body, so an unauthenticated caller always gets 401
    - A missing body is the same as missing content and surfaces as QUE-888
    - Validator and service errors propagate unchanged to the global handlers
    - Routes never contain business logic (delegate to QuestionService)
    - Mutating endpoints answer {id, status}; listings answer [{id, content}]
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from quora.api.dependencies import get_question_service, read_body, require_user
from quora.core.domain_types import (
    AuthenticatedUser, QuestionId, QuestionRecord, QuestionStatus, UserId,
)
from quora.schemas.question import (
    QuestionDeleteResponse,
    QuestionDetailsResponse,
    QuestionEditRequest,
    QuestionEditResponse,
    QuestionRequest,
    QuestionResponse,
)
from quora.services.question_service import QuestionService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/question", tags=["question"])


def _to_details(questions: list[QuestionRecord]) -> list[QuestionDetailsResponse]:
    return [QuestionDetailsResponse(id=q.id, content=q.content) for q in questions]


def _body_schema(model: type) -> dict:
    return {
        "requestBody": {
            "required": False,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        },
    }


@router.post(
    "/create", response_model=QuestionResponse,
    status_code=status.HTTP_200_OK,
    openapi_extra=_body_schema(QuestionRequest),
)
async def create_question(
    request: Request,
    user: AuthenticatedUser = Depends(require_user("for posting a question")),
    service: QuestionService = Depends(get_question_service),
):
    """Post a new question as the authenticated user."""
    body = await read_body(request, QuestionRequest)
    question = await service.create_question(body.content, user)
    return QuestionResponse(id=question.id, status=QuestionStatus.CREATED.value)


@router.put(
    "/edit/{question_id}", response_model=QuestionEditResponse,
    openapi_extra=_body_schema(QuestionEditRequest),
)
async def edit_question(
    question_id: str,
    request: Request,
    user: AuthenticatedUser = Depends(require_user("to edit the question")),
    service: QuestionService = Depends(get_question_service),
):
    """Edit question content. Owner only."""
    body = await read_body(request, QuestionEditRequest)
    question = await service.edit_question(
        body.content, user.id, QuestionId(question_id),
    )
    return QuestionEditResponse(id=question.id, status=QuestionStatus.EDITED.value)


@router.get(
    "/all", response_model=list[QuestionDetailsResponse],
    dependencies=[Depends(require_user("to get all questions"))],
)
async def get_all_questions(
    service: QuestionService = Depends(get_question_service),
):
    """Every question in the system."""
    return _to_details(await service.get_all_questions())


@router.get(
    "/all/{user_id}", response_model=list[QuestionDetailsResponse],
    dependencies=[Depends(require_user("to get all questions by user"))],
)
async def get_all_questions_by_user(
    user_id: str,
    service: QuestionService = Depends(get_question_service),
):
    """Every question posted by one user."""
    return _to_details(await service.get_all_questions_by_user(UserId(user_id)))


@router.delete("/delete/{question_id}", response_model=QuestionDeleteResponse)
async def delete_question(
    question_id: str,
    user: AuthenticatedUser = Depends(require_user("to delete the question")),
    service: QuestionService = Depends(get_question_service),
):
    """Delete a question and its answers. Owner or admin."""
    question = await service.delete_question(user, QuestionId(question_id))
    return QuestionDeleteResponse(
        id=question.id, status=QuestionStatus.DELETED.value,
    )
