"""
Tests for random question selection and answer verification.
"""

import asyncio

import pytest
from beanie import PydanticObjectId
from pydantic import ValidationError

from trivia_api.core.exceptions import (
    InvalidRequest,
    NoQuestionsAvailable,
    PersonNotFound,
    QuestionNotFound,
)
from trivia_api.models.person import Person
from trivia_api.models.question import Question
from trivia_api.services.question import AWARD_POINTS, QuestionService


class UntouchableStore:
    """Store double that fails the test on any access."""

    def __getattr__(self, name):
        raise AssertionError(f"store.{name} accessed")


@pytest.fixture
def service(store) -> QuestionService:
    return QuestionService(store)


def answer(question, person, text):
    return {"questionId": str(question.id), "answer": text, "userId": str(person.id)}


class TestRandomQuestion:
    async def test_returns_question_without_answer(self, service, france_question):
        result = await service.get_random_question()
        assert result.id == str(france_question.id)
        assert result.options == ["London", "Berlin", "Paris", "Madrid"]
        assert "correct_answer" not in result.model_dump()

    async def test_empty_set(self, service, db):
        with pytest.raises(NoQuestionsAvailable):
            await service.get_random_question()

    async def test_uses_drawn_offset(self, service, db, monkeypatch):
        questions = [Question(question=f"Q{i}", options=["a", "b"], correct_answer="a") for i in range(4)]
        for question in questions:
            await question.insert()

        monkeypatch.setattr("trivia_api.services.question.random.randrange", lambda n: n - 1)
        result = await service.get_random_question()
        assert result.id == str(questions[-1].id)

    async def test_set_shrinking_between_count_and_fetch(self, service, store, france_question, monkeypatch):
        async def vanished(offset):
            raise QuestionNotFound()

        monkeypatch.setattr(store, "get_question_at_offset", vanished)
        with pytest.raises(NoQuestionsAvailable):
            await service.get_random_question()

    async def test_selection_does_not_mutate(self, service, france_question, ann):
        for _ in range(5):
            await service.get_random_question()

        assert await Question.count() == 1
        stored = await Question.get(france_question.id)
        assert stored.options == france_question.options
        assert stored.correct_answer == "Paris"
        assert (await Person.get(ann.id)).score == 0


class TestCheckAnswer:
    async def test_end_to_end_scenario(self, service, france_question, ann):
        first = await service.check_answer(answer(france_question, ann, "Paris"))
        assert first.correct is True
        assert first.updated_score == 100

        second = await service.check_answer(answer(france_question, ann, "Paris"))
        assert second.correct is True
        assert second.updated_score == 200

        wrong = await service.check_answer(answer(france_question, ann, "Berlin"))
        assert wrong.correct is False
        assert wrong.updated_score is None
        assert (await Person.get(ann.id)).score == 200

    @pytest.mark.parametrize("text", ["paris", "PARIS", "Paris ", " Paris", "Paris\n"])
    async def test_comparison_is_exact(self, service, france_question, ann, text):
        result = await service.check_answer(answer(france_question, ann, text))
        assert result.correct is False
        assert (await Person.get(ann.id)).score == 0

    async def test_correct_answer_for_unknown_person(self, service, france_question):
        payload = {"questionId": str(france_question.id), "answer": "Paris", "userId": str(PydanticObjectId())}
        with pytest.raises(PersonNotFound):
            await service.check_answer(payload)

    async def test_wrong_answer_for_unknown_person(self, service, france_question):
        payload = {"questionId": str(france_question.id), "answer": "Berlin", "userId": str(PydanticObjectId())}
        result = await service.check_answer(payload)
        assert result.correct is False

    async def test_unknown_question(self, service, ann):
        payload = {"questionId": str(PydanticObjectId()), "answer": "Paris", "userId": str(ann.id)}
        with pytest.raises(QuestionNotFound):
            await service.check_answer(payload)
        assert (await Person.get(ann.id)).score == 0

    async def test_concurrent_correct_answers(self, service, france_question, ann, interleaving_person_io):
        results = await asyncio.gather(
            *(service.check_answer(answer(france_question, ann, "Paris")) for _ in range(20))
        )
        assert all(r.correct for r in results)
        assert interleaving_person_io == {"get": 0, "save": 0}
        assert (await Person.find_one(Person.id == ann.id)).score == 20 * AWARD_POINTS
        assert sorted(r.updated_score for r in results) == [AWARD_POINTS * i for i in range(1, 21)]

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            [],
            "Paris",
            {},
            {"answer": "Paris", "userId": "64b7f0c2a1b2c3d4e5f60718"},
            {"questionId": "64b7f0c2a1b2c3d4e5f60717", "userId": "64b7f0c2a1b2c3d4e5f60718"},
            {"questionId": "64b7f0c2a1b2c3d4e5f60717", "answer": "Paris"},
            {"questionId": "64b7f0c2a1b2c3d4e5f60717", "answer": "", "userId": "64b7f0c2a1b2c3d4e5f60718"},
            {"questionId": "64b7f0c2a1b2c3d4e5f60717", "answer": 7, "userId": "64b7f0c2a1b2c3d4e5f60718"},
            {"questionId": "nope", "answer": "Paris", "userId": "64b7f0c2a1b2c3d4e5f60718"},
            {"questionId": "64b7f0c2a1b2c3d4e5f60717", "answer": "Paris", "userId": ""},
        ],
    )
    async def test_invalid_request_before_store_access(self, payload):
        service = QuestionService(UntouchableStore())
        with pytest.raises(InvalidRequest):
            await service.check_answer(payload)


class TestImportQuestions:
    async def test_import_replaces_questions(self, service, france_question):
        imported = await service.import_questions(
            [
                {"question": "2 + 2?", "options": ["3", "4"], "correctAnswer": "4"},
                {"question": "Red planet?", "options": ["Mars", "Venus"], "correctAnswer": "Mars"},
            ]
        )
        assert imported == 2
        assert await Question.count() == 2
        assert await Question.get(france_question.id) is None

    @pytest.mark.parametrize(
        "item",
        [
            {"question": "2 + 2?", "options": ["3", "4"], "correctAnswer": "5"},
            {"question": "2 + 2?", "options": ["4"], "correctAnswer": "4"},
            {"question": "2 + 2?", "options": ["4", "4"], "correctAnswer": "4"},
            {"question": "", "options": ["3", "4"], "correctAnswer": "4"},
        ],
    )
    async def test_invalid_question_aborts_import(self, service, france_question, item):
        with pytest.raises(ValidationError):
            await service.import_questions([item])
        assert await Question.get(france_question.id) is not None
