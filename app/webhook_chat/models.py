"""
Canonical data shapes, shared truth for typing between layers.

Typical contents:
- Session (session_id, endpoint, configured).
- ConversationEntry (role, content).
- ExchangeState (waiting, pending_input).

Testing: Trivial; mostly types.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ConversationEntry:
    role: MessageRole
    content: str


@dataclass
class Session:
    session_id: str
    endpoint: str = ""
    configured: bool = False

    def triple(self) -> tuple[bool, str, str]:
        """The (configured, endpoint, session_id) value the probe reacts to."""
        return (self.configured, self.endpoint, self.session_id)

    def is_ready(self) -> bool:
        return self.configured and bool(self.endpoint)


@dataclass
class ExchangeState:
    waiting: bool = False
    pending_input: str = ""
