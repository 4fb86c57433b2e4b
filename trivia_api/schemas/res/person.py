from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from trivia_api.models.person import GenderEnum, Person


class PersonResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    age: int
    gender: GenderEnum
    avatar: str
    score: int
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_document(cls, person: Person) -> "PersonResponse":
        return cls(
            id=str(person.id),
            name=person.name,
            age=person.age,
            gender=person.gender,
            avatar=person.avatar,
            score=person.score,
            created_at=person.created_at,
            updated_at=person.updated_at,
        )
