"""Bot service facade used by the API layer."""

from __future__ import annotations

import logging

from taxbot.models.message import Message
from taxbot.services.conversation_manager import ChatSession, ConversationManager

logger = logging.getLogger(__name__)


class BotService:
    """Thin facade that forwards chat operations to ConversationManager."""

    def __init__(self, conversation_manager: ConversationManager | None = None) -> None:
        self.conversation_manager = conversation_manager or ConversationManager()

    def start_conversation(self) -> ChatSession:
        session = self.conversation_manager.create_session()
        logger.info("Started chat session %s", session.session_id)
        return session

    def handle_message(self, session_id: str, message: str) -> tuple[ChatSession, Message | None]:
        """Route one user message to its session and return the bot reply, if any."""
        session = self.conversation_manager.get_session(session_id)
        reply = session.submit(message)
        if reply is None:
            logger.debug("Ignored blank message for session %s", session_id)
        return session, reply

    def get_conversation(self, session_id: str) -> ChatSession:
        return self.conversation_manager.get_session(session_id)

    def end_conversation(self, session_id: str) -> None:
        self.conversation_manager.end_session(session_id)
        logger.info("Ended chat session %s", session_id)
