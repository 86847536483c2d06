"""PostgreSQL implementation of User repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from promptu.domain.model import User
from promptu.domain.repository import UserRepository
from promptu.domain.value import UserId
from promptu.persistence.mappers import row_to_user, user_to_dict
from promptu.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Members mirrored from the identity provider."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        row = (
            await self.session.execute(
                select(users_table).where(users_table.c.id == user_id)
            )
        ).mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Insert the user or overwrite the row with the same ID."""
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={key: stmt.excluded[key] for key in values if key != "id"},
        )
        await self.session.execute(stmt)
        return user

    async def count(self, created_after: Optional[datetime] = None) -> int:
        stmt = select(func.count()).select_from(users_table)
        if created_after is not None:
            stmt = stmt.where(users_table.c.created_at >= created_after)
        return (await self.session.execute(stmt)).scalar_one()
