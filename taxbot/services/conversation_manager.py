"""Chat sessions and their in-memory registry."""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict

from taxbot.core.settings import settings
from taxbot.models.message import Message
from taxbot.models.state import ConversationState
from taxbot.services.flow_manager import FlowManager

logger = logging.getLogger(__name__)


class SessionNotFoundError(LookupError):
    """Raised when a session id is not registered."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Chat session '{session_id}' not found.")
        self.session_id = session_id


class ChatSession:
    """Transcript and state of one conversation, driven by a FlowManager."""

    def __init__(self, flow_manager: FlowManager, session_id: str | None = None) -> None:
        self.session_id = session_id or uuid.uuid4().hex
        self.flow_manager = flow_manager
        self.state = ConversationState.IDLE
        self._messages: list[Message] = []

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def started(self) -> bool:
        return bool(self._messages)

    def start(self) -> Message:
        """Post the greeting once and wait for a tax request."""
        if self.started:
            return self._messages[0]
        greeting = self.flow_manager.greeting()
        self.state = greeting.next_state
        return self._append(Message(sender="bot", text=greeting.text))

    def submit(self, text: str) -> Message | None:
        """Record a user utterance and the bot reply to it.

        Blank input is ignored: nothing is recorded and ``None`` is returned.
        """
        if not text.strip():
            return None
        if not self.started:
            self.start()

        self._append(Message(sender="user", text=text))
        reply = self.flow_manager.respond(self.state, text)
        self.state = reply.next_state
        return self._append(Message(sender="bot", text=reply.text))

    def _append(self, message: Message) -> Message:
        self._messages.append(message)
        return message


class ConversationManager:
    """Tracks chat sessions in RAM, keyed by session id.

    At most ``max_sessions`` are kept; creating one more evicts the session
    that was used least recently.
    """

    def __init__(self, flow_manager: FlowManager | None = None, max_sessions: int | None = None) -> None:
        self.flow_manager = flow_manager or FlowManager()
        self.max_sessions = settings.max_sessions if max_sessions is None else max_sessions
        if self.max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        self._sessions: OrderedDict[str, ChatSession] = OrderedDict()

    def create_session(self) -> ChatSession:
        """Create and start a new session."""
        while len(self._sessions) >= self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("Evicted least recently used chat session %s", evicted_id)
        session = ChatSession(flow_manager=self.flow_manager)
        session.start()
        self._sessions[session.session_id] = session
        return session

    def get_session(self, session_id: str) -> ChatSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        self._sessions.move_to_end(session_id)
        return session

    def end_session(self, session_id: str) -> None:
        """Forget a session and its transcript."""
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)

    def __len__(self) -> int:
        return len(self._sessions)
