from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.models import Topic


async def get_topics(db: AsyncSession) -> list[dict]:
    """Return every topic ordered by slug."""
    result = await db.execute(select(Topic).order_by(Topic.slug))
    return [{"slug": t.slug, "description": t.description} for t in result.scalars().all()]
