import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.security import MAX_PASSWORD_BYTES, hash_password, password_too_long

logger = logging.getLogger(__name__)


def seed_user_id(username: str) -> str:
    return str(uuid.uuid5(uuid.NAMESPACE_DNS, f"user-{username}"))


async def seed_user(session: AsyncSession, username: str, password: str) -> bool:
    """Insert a user with a hashed password unless one with that name exists.

    Returns True if a user was added.
    """
    if not username or not password:
        return False
    if password_too_long(password):
        logger.error(
            "Not seeding user %r: password is longer than %d bytes",
            username,
            MAX_PASSWORD_BYTES,
        )
        return False

    result = await session.execute(select(User).where(User.username == username))
    if result.scalars().first() is not None:
        return False

    session.add(User(
        id=seed_user_id(username),
        username=username,
        password_hash=hash_password(password),
    ))
    await session.commit()
    logger.info("Seeded user %r", username)
    return True
