from datetime import datetime
from typing import List

from beanie import Document
from pydantic import Field

from trivia_api.models.person import utc_now


class Question(Document):
    """Trivia question.

    ``correct_answer`` is guaranteed to be one of ``options`` by
    ``QuestionImport`` when the question is written; reads do not re-check it.
    """

    question: str
    options: List[str]
    correct_answer: str
    created_at: datetime = Field(default_factory=utc_now)

    class Settings:
        name = "questions"
