import logging

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncSession

from news_api.database import Base
from news_api.models import Article, Comment, Topic, User

logger = logging.getLogger(__name__)

# Insert order respects the foreign keys.
_TABLES = (
    ("topics", Topic),
    ("users", User),
    ("articles", Article),
    ("comments", Comment),
)


async def reset_schema(conn: AsyncConnection) -> None:
    """Drop and recreate every table known to ``Base.metadata``."""
    await conn.run_sync(Base.metadata.drop_all)
    await conn.run_sync(Base.metadata.create_all)


async def seed(session: AsyncSession, data: dict[str, list[dict]]) -> None:
    """
    Insert *data* (keyed by table name) into an empty schema.

    Each table is written with a single executemany ``INSERT`` so rows get
    their generated ids in list order.  The caller commits.
    """
    for key, model in _TABLES:
        rows = data.get(key, [])
        if rows:
            await session.execute(insert(model), rows)
        logger.info("Seeded %d %s", len(rows), key)


async def has_seed_rows(session: AsyncSession) -> bool:
    """True when any seeded table already holds rows."""
    for _, model in _TABLES:
        count = (await session.execute(select(func.count()).select_from(model))).scalar_one()
        if count:
            return True
    return False
