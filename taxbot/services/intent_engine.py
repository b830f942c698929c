"""Keyword-based intent detection for chat utterances."""

import re


class IntentEngine:
    """Detects user intents by case-insensitive substring matching."""

    TAX_REQUEST = "tax_request"
    DECLINE = "decline"

    def __init__(self) -> None:
        self._intent_keywords: dict[str, tuple[str, ...]] = {
            self.TAX_REQUEST: ("tax",),
            self.DECLINE: ("no",),
        }

    def detect_intents(self, message: str) -> set[str]:
        """Return every intent with at least one keyword found in the message.

        Keywords match anywhere in the text, so "taxes" is a tax request and
        "I know" counts as a decline. Callers decide which intent wins.
        """
        normalized_message = self._normalize_text(message)
        return {
            intent
            for intent, keywords in self._intent_keywords.items()
            if any(keyword in normalized_message for keyword in keywords)
        }

    def _normalize_text(self, message: str) -> str:
        lowered = message.lower().strip()
        return re.sub(r"\s+", " ", lowered)
