import logging
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.utils.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    async def find_by_username(self, username: str) -> User | None:
        """Return the user with this username, or None if there is none."""
        ...


class SqlUserStore:
    """User lookups backed by the application database."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_username(self, username: str) -> User | None:
        try:
            username.encode()
        except UnicodeEncodeError:
            # stored usernames are always valid UTF-8, so this one cannot match
            return None
        try:
            result = await self._session.execute(select(User).where(User.username == username))
        except (SQLAlchemyError, OSError) as exc:
            logger.error("User lookup failed: %s", exc)
            raise StoreUnavailableError() from exc
        return result.scalars().first()


class InMemoryUserStore:
    """Dict-backed store, keyed by username."""

    def __init__(self, users: list[User] | None = None):
        self._users: dict[str, User] = {}
        for user in users or []:
            if user.username in self._users:
                raise ValueError(f"Duplicate username: {user.username}")
            self._users[user.username] = user

    async def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)
