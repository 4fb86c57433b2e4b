import logging

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from trivia_api.core import config
from trivia_api.models.person import Person
from trivia_api.models.question import Question

logger = logging.getLogger(__name__)

client = None
db = None


async def init_db(motor_client=None):
    """Connect to MongoDB and register the document models.

    ``motor_client`` lets callers hand in an already built client (tests pass
    an in-memory one); otherwise a client for ``MONGODB_URI`` is created.
    """
    global client, db
    client = motor_client or AsyncIOMotorClient(
        config.MONGODB_URI,
        serverSelectionTimeoutMS=int(config.STORE_TIMEOUT_SECONDS * 1000),
    )
    db = client[config.DATABASE_NAME]
    await init_beanie(
        database=db,
        document_models=[
            Person,
            Question,
        ],
    )
    logger.info("Connected to MongoDB database %s", config.DATABASE_NAME)


def close_db():
    global client, db
    if client is not None:
        client.close()
    client = None
    db = None
