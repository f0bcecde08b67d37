"""Question Schemas — Pydantic request/response models for the question endpoints.

Invariants:
    - Request content is optional at the schema level: blank or missing content is a
      business error (QUE-888), not a schema error
    - Responses expose only the public uuid, never the internal key

Design Decisions:
    - Separate edit/delete response models even though shapes match: keeps the
      OpenAPI schema explicit per endpoint
"""

from pydantic import BaseModel


class QuestionRequest(BaseModel):
    """Body of POST /question/create."""
    content: str | None = None


class QuestionEditRequest(BaseModel):
    """Body of PUT /question/edit/{questionId}."""
    content: str | None = None


class QuestionResponse(BaseModel):
    id: str
    status: str


class QuestionEditResponse(BaseModel):
    id: str
    status: str


class QuestionDeleteResponse(BaseModel):
    id: str
    status: str


class QuestionDetailsResponse(BaseModel):
    """One entry of a question listing."""
    id: str
    content: str
