import logging
import os
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends, UploadFile

from trivia_api.core import config
from trivia_api.core.store import EntityStore, get_store
from trivia_api.models.person import Person
from trivia_api.schemas.req.person import PersonCreateReq, PersonUpdateReq
from trivia_api.schemas.res.person import PersonResponse
from trivia_api.services.question import AWARD_POINTS

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads/"


class PersonService:
    def __init__(self, store: EntityStore = Depends(get_store)):
        self.store = store

    async def list_people(
        self,
        gender: Optional[str] = None,
        sort_by: str = "score",
        sort_order: str = "desc",
    ) -> List[PersonResponse]:
        people = await self.store.list_people(gender, sort_by, sort_order)
        return [PersonResponse.from_document(p) for p in people]

    async def get_person(self, person_id: str) -> PersonResponse:
        person = await self.store.get_person(person_id)
        return PersonResponse.from_document(person)

    async def create_person(self, req: PersonCreateReq, avatar: Optional[UploadFile] = None) -> PersonResponse:
        """Create a profile. A new person always starts with a zero score."""
        avatar_path = await self._save_avatar(avatar) if avatar else ""
        person = Person(
            name=req.name,
            age=req.age,
            gender=req.gender,
            avatar=avatar_path,
        )
        try:
            person = await self.store.create_person(person)
        except Exception:
            self._remove_avatar(avatar_path)
            raise
        return PersonResponse.from_document(person)

    async def update_person(self, person_id: str, req: PersonUpdateReq) -> PersonResponse:
        changes = req.model_dump(exclude_none=True, mode="json")
        person = await self.store.update_profile(person_id, changes)
        return PersonResponse.from_document(person)

    async def update_avatar(self, person_id: str, avatar: UploadFile) -> PersonResponse:
        """Replace the avatar, removing the previous upload"""
        current = await self.store.get_person(person_id)
        avatar_path = await self._save_avatar(avatar)
        try:
            person = await self.store.update_profile(person_id, {"avatar": avatar_path})
        except Exception:
            self._remove_avatar(avatar_path)
            raise
        self._remove_avatar(current.avatar)
        return PersonResponse.from_document(person)

    async def delete_person(self, person_id: str) -> dict:
        person = await self.store.delete_person(person_id)
        self._remove_avatar(person.avatar)
        return {"message": "Person deleted successfully"}

    async def increase_score(self, person_id: str) -> PersonResponse:
        person = await self.store.increment_score(person_id, AWARD_POINTS)
        return PersonResponse.from_document(person)

    async def _save_avatar(self, file: UploadFile) -> str:
        os.makedirs(config.UPLOAD_DIR, exist_ok=True)

        timestamp = int(datetime.now(timezone.utc).timestamp() * 1000)
        _, extension = os.path.splitext(file.filename or "")
        new_file_name = f"{timestamp}_{uuid.uuid4().hex}{extension.lower()}"
        new_file_path = os.path.join(config.UPLOAD_DIR, new_file_name)

        content = await file.read()
        with open(new_file_path, "wb") as buffer:
            buffer.write(content)

        return UPLOAD_URL_PREFIX + new_file_name

    def _remove_avatar(self, avatar: str):
        # external URLs are left alone
        if not avatar or not avatar.startswith(UPLOAD_URL_PREFIX):
            return
        file_path = os.path.join(config.UPLOAD_DIR, os.path.basename(avatar))
        if os.path.exists(file_path):
            try:
                os.remove(file_path)
            except OSError as e:
                logger.error(f"Error removing old file: {e}")
