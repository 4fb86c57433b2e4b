import asyncio
import functools
import logging
from datetime import datetime, timezone
from typing import List, Optional

from beanie import PydanticObjectId, UpdateResponse
from beanie.odm.operators.update.general import Inc, Set
from bson.errors import InvalidId
from pymongo.errors import ConnectionFailure, ExecutionTimeout, WTimeoutError

from trivia_api.core import config
from trivia_api.core.exceptions import (
    InvalidRequest,
    PersonNotFound,
    QuestionNotFound,
    StoreUnavailable,
)
from trivia_api.models.person import GenderEnum, Person
from trivia_api.models.question import Question

logger = logging.getLogger(__name__)

SORT_FIELDS = ("name", "age", "score")
SORT_ORDERS = ("asc", "desc")

# Errors after which the operation is known not to have been applied, or the
# caller gave up waiting; both are reported as retryable.
_UNAVAILABLE_ERRORS = (asyncio.TimeoutError, ConnectionFailure, ExecutionTimeout, WTimeoutError)


def store_operation(action: str):
    """Bound a store call by the configured timeout and translate driver failures."""

    def decorator(fn):
        @functools.wraps(fn)
        async def wrapper(self, *args, **kwargs):
            try:
                return await asyncio.wait_for(fn(self, *args, **kwargs), timeout=self.timeout)
            except _UNAVAILABLE_ERRORS as e:
                logger.error(f"Failed to {action}: {e!r}")
                raise StoreUnavailable() from e

        return wrapper

    return decorator


def _object_id(value, not_found):
    try:
        return PydanticObjectId(value)
    except (InvalidId, TypeError):
        raise not_found()


class EntityStore:
    """Reads and writes Person and Question documents.

    Every call goes to the database; nothing is cached. Score changes are a
    single ``$inc`` so concurrent awards are never lost.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = config.STORE_TIMEOUT_SECONDS if timeout is None else timeout

    # People

    @store_operation("fetch person")
    async def get_person(self, person_id) -> Person:
        person = await Person.get(_object_id(person_id, PersonNotFound))
        if not person:
            raise PersonNotFound()
        return person

    @store_operation("increment score")
    async def increment_score(self, person_id, delta: int) -> Person:
        if delta <= 0:
            raise ValueError("Score delta must be positive")
        oid = _object_id(person_id, PersonNotFound)
        person = await Person.find_one(Person.id == oid).update(
            Inc({Person.score: delta}),
            Set({Person.updated_at: datetime.now(timezone.utc)}),
            response_type=UpdateResponse.NEW_DOCUMENT,
        )
        if not person:
            raise PersonNotFound()
        return person

    @store_operation("list people")
    async def list_people(
        self,
        gender: Optional[str] = None,
        sort_by: str = "score",
        sort_order: str = "desc",
    ) -> List[Person]:
        if sort_by not in SORT_FIELDS:
            raise InvalidRequest(f"sortBy must be one of: {', '.join(SORT_FIELDS)}")
        if sort_order not in SORT_ORDERS:
            raise InvalidRequest(f"sortOrder must be one of: {', '.join(SORT_ORDERS)}")

        if gender:
            try:
                gender = GenderEnum(gender)
            except ValueError:
                raise InvalidRequest(f"Unknown gender: {gender}")
            query = Person.find(Person.gender == gender.value)
        else:
            query = Person.find_all()

        direction = "-" if sort_order == "desc" else "+"
        return await query.sort(f"{direction}{sort_by}", "+_id").to_list()

    @store_operation("create person")
    async def create_person(self, person: Person) -> Person:
        person.score = 0
        await person.insert()
        return person

    @store_operation("update person")
    async def update_profile(self, person_id, changes: dict) -> Person:
        """Apply profile field changes. ``score`` is never written here."""
        oid = _object_id(person_id, PersonNotFound)
        changes = {k: v for k, v in changes.items() if k in ("name", "age", "gender", "avatar")}
        changes["updated_at"] = datetime.now(timezone.utc)
        person = await Person.find_one(Person.id == oid).update(
            Set(changes),
            response_type=UpdateResponse.NEW_DOCUMENT,
        )
        if not person:
            raise PersonNotFound()
        return person

    @store_operation("delete person")
    async def delete_person(self, person_id) -> Person:
        oid = _object_id(person_id, PersonNotFound)
        person = await Person.get(oid)
        if not person:
            raise PersonNotFound()
        result = await Person.find_one(Person.id == oid).delete()
        if not result or result.deleted_count == 0:
            raise PersonNotFound()
        return person

    @store_operation("replace people")
    async def replace_people(self, people: List[Person]) -> int:
        await Person.delete_all()
        if people:
            await Person.insert_many(people)
        return len(people)

    # Questions

    @store_operation("fetch question")
    async def get_question_by_id(self, question_id) -> Question:
        question = await Question.get(_object_id(question_id, QuestionNotFound))
        if not question:
            raise QuestionNotFound()
        return question

    @store_operation("count questions")
    async def count_questions(self) -> int:
        return await Question.count()

    @store_operation("fetch question")
    async def get_question_at_offset(self, offset: int) -> Question:
        if offset < 0:
            raise QuestionNotFound()
        found = await Question.find_all().sort("+_id").skip(offset).limit(1).to_list()
        if not found:
            raise QuestionNotFound()
        return found[0]

    @store_operation("replace questions")
    async def replace_questions(self, questions: List[Question]) -> int:
        await Question.delete_all()
        if questions:
            await Question.insert_many(questions)
        return len(questions)


def get_store() -> EntityStore:
    return EntityStore()
