"""
Purpose: Session lifecycle. Owns the session identifier and the configured
endpoint; knows nothing about HTTP.

Subscribers are told whenever the (configured, endpoint, session_id) triple
settles on a new fully configured value. That is how the init probe fires on
configure and again after a reset, without the UI having to remember to do it.
"""

from __future__ import annotations
import logging
import uuid
from typing import Callable, Optional

from .interfaces import IdFactory
from .models import Session
from .persistence.conversation_store import InMemoryConversationStore

logger = logging.getLogger(__name__)

SessionListener = Callable[[str, str], None]


def new_session_id() -> str:
    return str(uuid.uuid4())


class SessionManager:
    def __init__(
        self,
        id_factory: Optional[IdFactory] = None,
        conversation: Optional[InMemoryConversationStore] = None,
    ):
        self._new_id: IdFactory = id_factory or new_session_id
        self.conversation = (
            conversation if conversation is not None else InMemoryConversationStore()
        )
        self.session = Session(session_id=self._new_id())
        self._listeners: list[SessionListener] = []
        self._last_notified: Optional[tuple[bool, str, str]] = None

    @property
    def session_id(self) -> str:
        return self.session.session_id

    @property
    def endpoint(self) -> str:
        return self.session.endpoint

    @property
    def configured(self) -> bool:
        return self.session.configured

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register listener(endpoint, session_id). Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def configure(self, endpoint: str) -> bool:
        """Accept a non-empty endpoint and start a fresh session against it."""
        endpoint = (endpoint or "").strip()
        if not endpoint:
            logger.info("Rejected empty webhook endpoint")
            return False
        self.session = Session(
            session_id=self._new_id(), endpoint=endpoint, configured=True
        )
        self.conversation.reset()
        logger.info("Configured webhook %s (session %s)", endpoint, self.session_id)
        self._notify()
        return True

    def reset(self) -> None:
        """New session id, same endpoint and configured state."""
        self.session = Session(
            session_id=self._new_id(),
            endpoint=self.session.endpoint,
            configured=self.session.configured,
        )
        self.conversation.reset()
        logger.info("Session reset (session %s)", self.session_id)
        self._notify()

    def reconfigure(self) -> None:
        """Forget the endpoint and go back to the unconfigured state."""
        self.session = Session(session_id=self._new_id())
        self.conversation.reset()
        logger.info("Session returned to configuration (session %s)", self.session_id)
        self._notify()

    def _notify(self) -> None:
        triple = self.session.triple()
        if not self.session.is_ready() or triple == self._last_notified:
            return
        self._last_notified = triple
        for listener in list(self._listeners):
            listener(self.session.endpoint, self.session.session_id)
