"""Chat session endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from taxbot.schemas.chat import ChatMessageRequest, ChatReplyResponse, ChatSessionResponse
from taxbot.services.bot_service import BotService
from taxbot.services.conversation_manager import SessionNotFoundError

router = APIRouter()

# Shared in-memory service; sessions live as long as the process.
bot_service = BotService()


def get_bot_service() -> BotService:
    return bot_service


@router.post("/sessions", response_model=ChatSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(service: BotService = Depends(get_bot_service)) -> ChatSessionResponse:
    """Open a conversation; the transcript starts with the greeting."""
    session = service.start_conversation()
    return ChatSessionResponse.from_session(session)


@router.get("/sessions/{session_id}", response_model=ChatSessionResponse)
async def read_session(session_id: str, service: BotService = Depends(get_bot_service)) -> ChatSessionResponse:
    try:
        session = service.get_conversation(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return ChatSessionResponse.from_session(session)


@router.post("/sessions/{session_id}/messages", response_model=ChatReplyResponse)
async def post_message(
    session_id: str,
    payload: ChatMessageRequest,
    service: BotService = Depends(get_bot_service),
) -> ChatReplyResponse:
    """Submit one user message and return the bot reply with the transcript."""
    try:
        session, reply = service.handle_message(session_id, payload.message)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    snapshot = ChatSessionResponse.from_session(session)
    return ChatReplyResponse(**snapshot.model_dump(), reply=reply.text if reply is not None else None)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str, service: BotService = Depends(get_bot_service)) -> Response:
    try:
        service.end_conversation(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
