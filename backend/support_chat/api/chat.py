"""Support chat route: POST /api/chat."""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from support_chat.prompts import MESSAGE_REQUIRED
from support_chat.schemas.chat import ChatRequest, ChatResponse, ErrorResponse
from support_chat.services.chat import ChatReplyService, get_chat_service

router = APIRouter()


@router.post(
    "",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse, "description": "Missing or empty message"}},
)
async def chat_endpoint(
    request: Request,
    service: ChatReplyService = Depends(get_chat_service),
) -> ChatResponse | JSONResponse:
    """
    Reply to the website chat widget.
    Body: `{"message": "...", "conversationHistory": [{"sender": "user", "text": "..."}]}`.
    Returns 400 only when the body is not JSON or `message` is missing/empty; provider
    problems still return 200 with a fallback reply.
    """
    try:
        body = ChatRequest.model_validate(await request.json())
    except (ValueError, ValidationError):
        return JSONResponse(status_code=400, content={"error": MESSAGE_REQUIRED})

    reply = await service.reply(body.message, body.conversation_history)
    return ChatResponse(reply=reply)
