"""Question answering endpoint."""

from fastapi import APIRouter, Depends

from .....core.services.answer_service import AnswerService
from ..deps import get_answer_service
from ..models import AskRequest, AskResponse, ErrorResponse

router = APIRouter(tags=["ask"])


@router.post(
    "/ask",
    response_model=AskResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing text or question"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def ask_question(
    request: AskRequest,
    service: AnswerService = Depends(get_answer_service),
) -> AskResponse:
    """Answer a question using only the supplied text.

    Validation and pipeline errors propagate to the app-level exception
    handlers, which render them as ``{"error": ...}`` bodies.
    """
    answer = await service.answer(request.text, request.question)
    return AskResponse(answer=answer.text)
