import argparse
import asyncio
import logging
import sys

from pymongo.errors import ConnectionFailure

from trivia_api.core import config
from trivia_api.core.database import close_db, init_db
from trivia_api.core.exceptions import StoreUnavailable
from trivia_api.core.store import EntityStore
from trivia_api.models.person import Person
from trivia_api.scripts.sample_data import SAMPLE_PEOPLE

logger = logging.getLogger(__name__)


async def run() -> int:
    await init_db()
    try:
        people = [Person(**item) for item in SAMPLE_PEOPLE]
        return await EntityStore().replace_people(people)
    finally:
        close_db()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Replace all people with the demo leaderboard")
    parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL)
    try:
        seeded = asyncio.run(run())
    except (StoreUnavailable, ConnectionFailure) as e:
        logger.error(f"Error seeding database: {e}")
        sys.exit(1)
    logger.info(f"Seeded database with {seeded} people")


if __name__ == "__main__":
    main()
