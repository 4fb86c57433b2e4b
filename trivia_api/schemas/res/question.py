from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class QuestionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    question: str
    options: List[str]


class CheckAnswerResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    correct: bool
    message: str
    updated_score: Optional[int] = Field(default=None, alias="updatedScore")
