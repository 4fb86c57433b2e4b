from datetime import datetime, timezone
from enum import Enum

from beanie import Document
from pydantic import Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GenderEnum(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Person(Document):
    name: str
    age: int
    gender: GenderEnum
    avatar: str = ""  # "/uploads/<file>" for local uploads, or an external URL
    score: int = 0  # changed only through EntityStore.increment_score
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    class Settings:
        name = "people"
