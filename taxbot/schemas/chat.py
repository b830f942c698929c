"""Schemas for chat session endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from taxbot.models.message import Message
from taxbot.models.state import ConversationState
from taxbot.services.conversation_manager import ChatSession


class ChatMessageRequest(BaseModel):
    """Request body for posting a user message."""

    message: str = Field(..., description="Raw user utterance", examples=["Please calculate my taxes"])


class ChatMessageOut(BaseModel):
    """One transcript entry."""

    sender: Literal["user", "bot"]
    text: str

    @classmethod
    def from_message(cls, message: Message) -> "ChatMessageOut":
        return cls(sender=message.sender, text=message.text)


class ChatSessionResponse(BaseModel):
    """Snapshot of a chat session."""

    session_id: str
    state: ConversationState
    messages: list[ChatMessageOut]

    @classmethod
    def from_session(cls, session: ChatSession) -> "ChatSessionResponse":
        return cls(
            session_id=session.session_id,
            state=session.state,
            messages=[ChatMessageOut.from_message(message) for message in session.messages],
        )


class ChatReplyResponse(ChatSessionResponse):
    """Session snapshot plus the reply to the submitted message.

    ``reply`` is null when the submitted message was blank.
    """

    reply: str | None = None
