"""User Store — read-only user lookups by public identifier."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quora.core.domain_types import UserId
from quora.models.user import User


class SqlUserStore:
    """User lookups over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists(self, user_id: UserId) -> bool:
        result = await self.db.execute(
            select(User.id).where(User.uuid == user_id),
        )
        return result.scalar_one_or_none() is not None
