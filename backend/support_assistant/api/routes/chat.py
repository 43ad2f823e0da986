from fastapi import APIRouter, Depends

from support_assistant.core.exceptions import (
    AssistantHTTPException,
    KnowledgeBaseHTTPException,
    KnowledgeBaseUnavailableError,
)
from support_assistant.core.logging import get_logger
from support_assistant.dependencies import get_assistant_service
from support_assistant.schemas.chat import AssistantReply, AssistantRequest
from support_assistant.services.chat.service import AssistantService

router = APIRouter()
logger = get_logger(__name__)

@router.post("/assistant", response_model=AssistantReply)
async def chat_assistant(
    request: AssistantRequest,
    service: AssistantService = Depends(get_assistant_service),
):
    """
    Assistant reply for one user query.

    Serves a stored FAQ answer when the best match is confident enough,
    otherwise asks the generative model, and always records the reply.
    """
    try:
        response = await service.answer(request)
        return response.to_reply()
    except KnowledgeBaseUnavailableError as e:
        logger.error(f"Knowledge base unavailable: {e}")
        raise KnowledgeBaseHTTPException()
    except Exception as e:
        logger.exception(f"Chat assistant error: {e}")
        raise AssistantHTTPException()
