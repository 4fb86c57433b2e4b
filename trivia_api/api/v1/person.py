from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from trivia_api.models.person import GenderEnum
from trivia_api.schemas.req.person import PersonCreateReq, PersonUpdateReq
from trivia_api.schemas.res.person import PersonResponse
from trivia_api.services.person import PersonService

person_router = APIRouter()


@person_router.get("", response_model=List[PersonResponse])
async def list_people(
    gender: Optional[str] = None,
    sort_by: str = Query("score", alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder"),
    person_service: PersonService = Depends(PersonService),
):
    """Leaderboard listing, highest score first by default"""
    return await person_service.list_people(gender, sort_by, sort_order)


@person_router.post("", response_model=PersonResponse, status_code=201)
async def create_person(
    name: str = Form(..., min_length=1),
    age: int = Form(..., gt=0),
    gender: GenderEnum = Form(...),
    avatar: Optional[UploadFile] = File(None),
    person_service: PersonService = Depends(PersonService),
):
    req = PersonCreateReq(name=name, age=age, gender=gender)
    return await person_service.create_person(req, avatar)


@person_router.get("/{person_id}", response_model=PersonResponse)
async def get_person(person_id: str, person_service: PersonService = Depends(PersonService)):
    return await person_service.get_person(person_id)


@person_router.put("/{person_id}", response_model=PersonResponse)
async def update_person(
    person_id: str,
    req: PersonUpdateReq,
    person_service: PersonService = Depends(PersonService),
):
    return await person_service.update_person(person_id, req)


@person_router.patch("/{person_id}/avatar", response_model=PersonResponse)
async def update_avatar(
    person_id: str,
    avatar: UploadFile = File(...),
    person_service: PersonService = Depends(PersonService),
):
    return await person_service.update_avatar(person_id, avatar)


@person_router.delete("/{person_id}")
async def delete_person(person_id: str, person_service: PersonService = Depends(PersonService)):
    return await person_service.delete_person(person_id)


@person_router.post("/{person_id}/increase-score", response_model=PersonResponse)
async def increase_score(person_id: str, person_service: PersonService = Depends(PersonService)):
    return await person_service.increase_score(person_id)
