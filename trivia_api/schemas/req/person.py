from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from trivia_api.models.person import GenderEnum


class PersonCreateReq(BaseModel):
    name: str = Field(min_length=1)
    age: int = Field(gt=0)
    gender: GenderEnum


class PersonUpdateReq(BaseModel):
    """Profile edit. Score is not part of a profile and any value sent for it is dropped."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(default=None, min_length=1)
    age: Optional[int] = Field(default=None, gt=0)
    gender: Optional[GenderEnum] = None
