import argparse
import asyncio
import json
import logging
import sys

from pydantic import ValidationError
from pymongo.errors import ConnectionFailure

from trivia_api.core import config
from trivia_api.core.database import close_db, init_db
from trivia_api.core.exceptions import StoreUnavailable
from trivia_api.core.store import EntityStore
from trivia_api.scripts.sample_data import SAMPLE_QUESTIONS
from trivia_api.services.question import QuestionService

logger = logging.getLogger(__name__)


def load_questions(path):
    if path is None:
        return SAMPLE_QUESTIONS
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of questions")
    return data


async def run(path=None) -> int:
    items = load_questions(path)
    await init_db()
    try:
        return await QuestionService(EntityStore()).import_questions(items)
    finally:
        close_db()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Replace the question set with sample or file-provided questions")
    parser.add_argument("--file", help="JSON array of {question, options, correctAnswer}")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL)
    try:
        imported = asyncio.run(run(args.file))
    except (OSError, ValueError, ValidationError, StoreUnavailable, ConnectionFailure) as e:
        logger.error(f"Error importing questions: {e}")
        sys.exit(1)
    logger.info(f"Successfully imported {imported} questions")


if __name__ == "__main__":
    main()
