"""Domain models package."""

from taxbot.models.message import Message, Sender
from taxbot.models.state import ConversationState

__all__ = [
    "ConversationState",
    "Message",
    "Sender",
]
