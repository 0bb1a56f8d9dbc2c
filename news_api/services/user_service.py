"""
User service: read-only lookups for the User table.

Users are owned by the platform's account system; this API only lists
them and checks that a comment author exists.
"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.models import User


def _user_to_dict(user: User) -> dict:
    return {
        "username": user.username,
        "name": user.name,
        "avatar_url": user.avatar_url,
    }


async def get_users(db: AsyncSession) -> list[dict]:
    """Return all users ordered by username."""
    q = select(User).order_by(User.username)
    result = await db.execute(q)
    return [_user_to_dict(u) for u in result.scalars().all()]


async def get_user(db: AsyncSession, username: str) -> dict | None:
    """Return the user called *username*, or None when there is none."""
    result = await db.execute(select(User).where(User.username == username))
    user = result.scalar_one_or_none()
    if user is None:
        return None
    return _user_to_dict(user)


async def user_exists(db: AsyncSession, username: str) -> bool:
    q = select(User.username).where(User.username == username)
    return (await db.execute(q)).scalar_one_or_none() is not None
