"""Conversation states."""

from enum import Enum


class ConversationState(str, Enum):
    """Stage of a conversation that selects the active reply branch."""

    IDLE = "idle"
    AWAITING_TAX_REQUEST = "awaiting_tax_request"
    AWAITING_TAX_DETAILS = "awaiting_tax_details"
    AWAITING_ANYTHING_ELSE = "awaiting_anything_else"
