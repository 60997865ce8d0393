"""
Purpose: Conversation transcript storage, in-memory only.
The sequence is append-only while a session lives and cleared on reset or
reconfiguration. Entries are frozen, so readers get a tuple snapshot.

Testing: simple state tests.
"""

from __future__ import annotations
from ..models import ConversationEntry, MessageRole


class InMemoryConversationStore:
    def __init__(self) -> None:
        self._entries: list[ConversationEntry] = []

    def get(self) -> tuple[ConversationEntry, ...]:
        return tuple(self._entries)

    def append(self, role: MessageRole, content: str) -> ConversationEntry:
        entry = ConversationEntry(role=role, content=content)
        self._entries.append(entry)
        return entry

    def reset(self) -> None:
        self._entries = []

    def __len__(self) -> int:
        return len(self._entries)
