"""Conversation flow for the tax assistant: state transitions and canned replies."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from taxbot.core.settings import settings
from taxbot.models.state import ConversationState
from taxbot.services.intent_engine import IntentEngine
from taxbot.services.tax_calculator import TaxCalculator, TaxEstimate
from taxbot.services.tax_details_parser import TaxDetails, TaxDetailsError, parse_tax_details

logger = logging.getLogger(__name__)

DETAILS_EXAMPLE = '"hours: 40, rate: 35, state: NY, county: Kings, city: NYC"'
DETAILS_PROMPT = f"Sure! Please include your information like so, {DETAILS_EXAMPLE}."
DETAILS_RETRY_PROMPT = f"Please include your information like so, {DETAILS_EXAMPLE}."
INSTRUCTIONS_PROMPT = 'I can help you calculate taxes. Please type "please calculate my taxes" to begin.'
FAREWELL = "Thanks, have a nice day!"
COME_BACK_PROMPT = "Okay! Let me know if you would like me to calculate taxes again."


@dataclass(frozen=True, slots=True)
class BotReply:
    """Reply text together with the state the conversation moves to."""

    text: str
    next_state: ConversationState


class FlowManager:
    """Maps (state, utterance) to the bot reply and the next state.

    The manager keeps no per-conversation data: callers own the state and
    store whatever ``respond`` returns.
    """

    def __init__(
        self,
        intent_engine: IntentEngine | None = None,
        tax_calculator: TaxCalculator | None = None,
        bot_name: str | None = None,
    ) -> None:
        self.intent_engine = intent_engine or IntentEngine()
        self.tax_calculator = tax_calculator or TaxCalculator()
        self.bot_name = bot_name or settings.bot_name

    def greeting(self) -> BotReply:
        """Opening message of every conversation."""
        return BotReply(
            text=f"Hello, my name is {self.bot_name}. How can I help you?",
            next_state=ConversationState.AWAITING_TAX_REQUEST,
        )

    def respond(self, state: ConversationState | str, message: str) -> BotReply:
        """Handle one user utterance in the given state."""
        try:
            current_state = ConversationState(state)
        except ValueError:
            logger.warning("Unknown conversation state %r, falling back to default reply", state)
            current_state = ConversationState.IDLE

        if current_state is ConversationState.AWAITING_TAX_REQUEST:
            reply = self._handle_tax_request(message)
        elif current_state is ConversationState.AWAITING_TAX_DETAILS:
            reply = self._handle_tax_details(message)
        elif current_state is ConversationState.AWAITING_ANYTHING_ELSE:
            reply = self._handle_anything_else(message)
        else:
            reply = BotReply(text=COME_BACK_PROMPT, next_state=ConversationState.AWAITING_ANYTHING_ELSE)

        if reply.next_state is not current_state:
            logger.info("Conversation state %s -> %s", current_state.value, reply.next_state.value)
        return reply

    def _handle_tax_request(self, message: str) -> BotReply:
        intents = self.intent_engine.detect_intents(message)
        if IntentEngine.TAX_REQUEST in intents:
            return BotReply(text=DETAILS_PROMPT, next_state=ConversationState.AWAITING_TAX_DETAILS)
        if IntentEngine.DECLINE in intents:
            return BotReply(text=FAREWELL, next_state=ConversationState.AWAITING_ANYTHING_ELSE)
        return BotReply(text=INSTRUCTIONS_PROMPT, next_state=ConversationState.AWAITING_TAX_REQUEST)

    def _handle_tax_details(self, message: str) -> BotReply:
        try:
            details = parse_tax_details(message)
        except TaxDetailsError as exc:
            logger.info("Could not read tax details: %s", exc)
            return BotReply(text=DETAILS_RETRY_PROMPT, next_state=ConversationState.AWAITING_TAX_DETAILS)

        estimate = self.tax_calculator.estimate(hours=details.hours, rate=details.rate)
        return BotReply(
            text=self._format_estimate(details, estimate),
            next_state=ConversationState.AWAITING_ANYTHING_ELSE,
        )

    def _handle_anything_else(self, message: str) -> BotReply:
        intents = self.intent_engine.detect_intents(message)
        if IntentEngine.DECLINE in intents:
            return BotReply(text=FAREWELL, next_state=ConversationState.AWAITING_TAX_REQUEST)
        if IntentEngine.TAX_REQUEST in intents:
            return BotReply(text=DETAILS_PROMPT, next_state=ConversationState.AWAITING_TAX_DETAILS)
        return BotReply(text=COME_BACK_PROMPT, next_state=ConversationState.AWAITING_TAX_REQUEST)

    def _format_estimate(self, details: TaxDetails, estimate: TaxEstimate) -> str:
        lines = [
            f"Estimated taxes for {details.city}, {details.county} County, {details.state}:",
            f"Gross Pay: ${estimate.gross_pay:.2f}",
            f"Taxes: ${estimate.taxes:.2f}",
            f"Net Pay: ${estimate.net_pay:.2f}",
            "(Note: this is an estimate.)",
            "",
            "Would you like help with anything else?",
        ]
        return "\n".join(lines)
