from fastapi import APIRouter

from trivia_api.api.v1.person import person_router
from trivia_api.api.v1.proxy import proxy_router
from trivia_api.api.v1.question import question_router

api_router = APIRouter(prefix="/api")
api_router.include_router(person_router, prefix="/people", tags=["people"])
api_router.include_router(question_router, prefix="/questions", tags=["questions"])
api_router.include_router(proxy_router, prefix="/proxy", tags=["proxy"])
