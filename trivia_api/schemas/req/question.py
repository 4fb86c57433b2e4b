from typing import Any, List

from beanie import PydanticObjectId
from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, model_validator

from trivia_api.core.exceptions import InvalidRequest
from trivia_api.models.question import Question


class CheckAnswerRequest(BaseModel):
    """Submitted answer for one question on behalf of one person"""

    model_config = ConfigDict(populate_by_name=True)

    question_id: PydanticObjectId = Field(alias="questionId")
    answer: StrictStr = Field(min_length=1)
    user_id: PydanticObjectId = Field(alias="userId")

    @classmethod
    def from_payload(cls, payload: Any) -> "CheckAnswerRequest":
        """Validate a raw request body, reporting every problem as InvalidRequest."""
        if isinstance(payload, cls):
            return payload
        if not isinstance(payload, dict):
            raise InvalidRequest("Request body must be a JSON object")
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
            raise InvalidRequest(f"Missing or malformed fields: {', '.join(fields)}") from e


class QuestionImport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(min_length=1)
    options: List[str] = Field(min_length=2)
    correct_answer: str = Field(alias="correctAnswer")

    @model_validator(mode="after")
    def check_options(self):
        if len(set(self.options)) != len(self.options):
            raise ValueError("Question options must be distinct")
        if self.correct_answer not in self.options:
            raise ValueError("Correct answer must be one of the options")
        return self

    def to_document(self) -> Question:
        return Question(
            question=self.question,
            options=list(self.options),
            correct_answer=self.correct_answer,
        )
