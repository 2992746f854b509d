from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from loguru import logger

from althy.api.schemas.assistant import PromptRequest, PromptResponse
from althy.api.schemas.plan import ErrorResponse
from althy.services import assistant
from althy.services.llm.errors import LLMCallError, LLMNotConfiguredError

router = APIRouter(prefix="/api/openai", tags=["assistant"])


@router.post(
    "",
    response_model=PromptResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
        status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
    },
)
async def generate(req: PromptRequest) -> PromptResponse | JSONResponse:
    """Answer a free-form prompt with the assistant model."""
    if not req.prompt:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Prompt is required."})

    try:
        reply = await assistant.generate_response(req.prompt)
    except LLMNotConfiguredError as e:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"error": str(e)})
    except LLMCallError as e:
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(e)})

    logger.info("Assistant prompt answered", prompt_length=len(req.prompt))
    return PromptResponse(response=reply)
