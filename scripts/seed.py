"""Recreate the schema and load the fixture dataset into DATABASE_URL."""
import argparse
import asyncio
import logging
import time

from news_api.config import settings
from news_api.database import Base, async_session, engine
from news_api.seed_data import TEST_DATA
from news_api.seeding import has_seed_rows, reset_schema, seed

logger = logging.getLogger("seed")


async def run(reset: bool = True) -> None:
    start = time.perf_counter()

    async with engine.begin() as conn:
        if reset:
            await reset_schema(conn)
        else:
            await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        if not reset and await has_seed_rows(session):
            logger.warning("Tables already hold data; nothing seeded (drop --no-reset to start over)")
        else:
            await seed(session, TEST_DATA)
            await session.commit()

    await engine.dispose()
    logger.info("Seeding complete in %.2fs", time.perf_counter() - start)


def main():
    parser = argparse.ArgumentParser(description="Seed the news database")
    parser.add_argument(
        "--no-reset",
        action="store_true",
        help="Keep existing tables; seed only if they are empty",
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(levelname)s %(name)s: %(message)s")
    asyncio.run(run(reset=not args.no_reset))


if __name__ == "__main__":
    main()
