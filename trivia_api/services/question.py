import logging
import random
from typing import Iterable

from fastapi import Depends

from trivia_api.core.exceptions import NoQuestionsAvailable, QuestionNotFound
from trivia_api.core.store import EntityStore, get_store
from trivia_api.schemas.req.question import CheckAnswerRequest, QuestionImport
from trivia_api.schemas.res.question import CheckAnswerResponse, QuestionResponse

logger = logging.getLogger(__name__)

# Points credited for one correct answer
AWARD_POINTS = 100


class QuestionService:
    def __init__(self, store: EntityStore = Depends(get_store)):
        self.store = store

    async def get_random_question(self) -> QuestionResponse:
        """Pick one question uniformly at random. Read only; repeats are expected."""
        count = await self.store.count_questions()
        if count == 0:
            raise NoQuestionsAvailable()

        offset = random.randrange(count)
        try:
            question = await self.store.get_question_at_offset(offset)
        except QuestionNotFound:
            # the set shrank between the count and the fetch
            logger.warning(f"No question at offset {offset} of {count}")
            raise NoQuestionsAvailable()

        return QuestionResponse(
            id=str(question.id),
            question=question.question,
            options=question.options,
        )

    async def check_answer(self, payload) -> CheckAnswerResponse:
        """Verify an answer and award points to the person on a match.

        The person is only resolved after the answer is known to be correct,
        so a correct answer for an unknown person is PersonNotFound rather
        than a wrong answer.
        """
        req = CheckAnswerRequest.from_payload(payload)

        question = await self.store.get_question_by_id(req.question_id)
        if question.correct_answer != req.answer:
            return CheckAnswerResponse(correct=False, message="Wrong answer, try again!")

        person = await self.store.increment_score(req.user_id, AWARD_POINTS)
        logger.info(f"Awarded {AWARD_POINTS} points to {person.id} for question {question.id}")
        return CheckAnswerResponse(
            correct=True,
            message="Correct answer!",
            updated_score=person.score,
        )

    async def import_questions(self, items: Iterable[dict]) -> int:
        """Replace the question set. Every item is validated before anything is written."""
        questions = [QuestionImport.model_validate(item).to_document() for item in items]
        imported = await self.store.replace_questions(questions)
        logger.info(f"Imported {imported} questions")
        return imported
