"""Chat message model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Sender = Literal["user", "bot"]


@dataclass(frozen=True, slots=True)
class Message:
    """One entry of a conversation transcript."""

    sender: Sender
    text: str
