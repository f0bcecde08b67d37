"""Bearer Token Validator — resolves an Authorization header to an AuthenticatedUser.

Invariants:
    - Missing or blank header → ATHR-000
    - Unknown token → ATHR-001 (user has not signed in)
    - Signed-out or expired token → ATHR-002, message names the attempted activity
    - Never issues, refreshes or revokes tokens (sign-in/sign-out live elsewhere)

Design Decisions:
    - "Bearer <token>" and a bare token are both accepted: older clients send the raw token
    - Stored timestamps without tzinfo are read as UTC (SQLite drops the offset)
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quora.core.domain_types import AuthenticatedUser, UserId
from quora.core.errors import AuthenticationFailedError, ErrorContext
from quora.models.user_auth import UserAuth

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str | None) -> str | None:
    """Strip the Bearer prefix; None when nothing usable was sent."""
    if authorization is None:
        return None
    value = authorization.strip()
    if value.lower().startswith(BEARER_PREFIX.lower()):
        value = value[len(BEARER_PREFIX):].strip()
    return value or None


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def is_token_active(auth: UserAuth, now: datetime) -> bool:
    if auth.logout_at is not None:
        return False
    return _as_utc(auth.expires_at) > now


class BearerTokenValidator:
    """Validates access tokens stored in user_auth."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def validate(
        self, authorization: str | None, activity: str,
    ) -> AuthenticatedUser:
        token = extract_bearer_token(authorization)
        if token is None:
            raise AuthenticationFailedError(
                "ATHR-000", "Authorization header is missing",
                ErrorContext(activity=activity),
            )

        result = await self.db.execute(
            select(UserAuth)
            .where(UserAuth.access_token == token)
            .execution_options(populate_existing=True),
        )
        auth = result.scalar_one_or_none()
        if auth is None:
            raise AuthenticationFailedError(
                "ATHR-001", "User has not signed in",
                ErrorContext(activity=activity),
            )

        if not is_token_active(auth, datetime.now(timezone.utc)):
            logger.info(
                "Rejected inactive token",
                extra={"user_id": auth.user.uuid, "activity": activity},
            )
            raise AuthenticationFailedError(
                "ATHR-002", f"User is signed out.Sign in first {activity}",
                ErrorContext(user_id=auth.user.uuid, activity=activity),
            )

        return AuthenticatedUser(
            id=UserId(auth.user.uuid),
            username=auth.user.username,
            role=auth.user.role,
        )
