import asyncio

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from trivia_api.core import config
from trivia_api.core.database import init_db
from trivia_api.core.store import EntityStore
from trivia_api.models.person import Person
from trivia_api.models.question import Question


# Common test fixtures
@pytest_asyncio.fixture
async def db():
    """Fresh in-memory MongoDB with the document models registered."""
    await init_db(AsyncMongoMockClient())
    yield


@pytest.fixture
def store(db) -> EntityStore:
    return EntityStore()


@pytest_asyncio.fixture
async def france_question(db) -> Question:
    question = Question(
        question="What is the capital of France?",
        options=["London", "Berlin", "Paris", "Madrid"],
        correct_answer="Paris",
    )
    await question.insert()
    return question


@pytest_asyncio.fixture
async def ann(db) -> Person:
    person = Person(name="Ann", age=30, gender="female")
    await person.insert()
    return person


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(config, "UPLOAD_DIR", str(path))
    return path


@pytest.fixture
def app(db, upload_dir):
    from main import make_app

    return make_app()


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def interleaving_person_io(monkeypatch):
    """Yield to the event loop after every Person read and before every write.

    The in-memory database runs each call without suspending, so concurrent
    tasks would otherwise run one after another. Counts the patched calls.
    """
    calls = {"get": 0, "save": 0}
    real_get = Person.get
    real_save = Person.save

    async def get(cls, *args, **kwargs):
        calls["get"] += 1
        person = await real_get(*args, **kwargs)
        await asyncio.sleep(0)
        return person

    async def save(self, *args, **kwargs):
        calls["save"] += 1
        await asyncio.sleep(0)
        return await real_save(self, *args, **kwargs)

    monkeypatch.setattr(Person, "get", classmethod(get))
    monkeypatch.setattr(Person, "save", save)
    return calls
