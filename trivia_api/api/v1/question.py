from fastapi import APIRouter, Depends

from trivia_api.schemas.req.question import CheckAnswerRequest
from trivia_api.schemas.res.question import CheckAnswerResponse, QuestionResponse
from trivia_api.services.question import QuestionService

question_router = APIRouter()


@question_router.get("/random", response_model=QuestionResponse)
async def get_random_question(question_service: QuestionService = Depends(QuestionService)):
    return await question_service.get_random_question()


@question_router.post(
    "/check-answer",
    response_model=CheckAnswerResponse,
    response_model_exclude_none=True,
)
async def check_answer(
    req: CheckAnswerRequest,
    question_service: QuestionService = Depends(QuestionService),
):
    """Missing or malformed fields are reported as a single InvalidRequest"""
    return await question_service.check_answer(req)
