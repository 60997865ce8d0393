"""
Purpose: The single orchestration point for a chat session. Owns the session
manager, the conversation and the exchange client, and wires the init probe
to session changes. Prevents the UI from knowing how HTTP or ids work.

Key responsibilities:
- configure / reset / reconfigure (session lifecycle).
- send (one user turn, always answered by exactly one assistant entry).
- Expose read-only view state: history, session id, waiting.

Testing: Pure unit tests with fakes: fake WebhookTransport, fixed id factory,
synchronous dispatcher. Verify lifecycle, probe firing and error absorption.
"""

from __future__ import annotations
from typing import Optional

from .config import Settings
from .errors import SessionNotConfiguredError
from .exchange import MessageExchangeClient
from .interfaces import Dispatcher, IdFactory, WebhookTransport
from .models import ConversationEntry
from .services.webhook_http import RequestsWebhookTransport
from .session import SessionManager


class ChatController:
    def __init__(
        self,
        transport: WebhookTransport,
        *,
        id_factory: Optional[IdFactory] = None,
        dispatcher: Optional[Dispatcher] = None,
    ):
        self.sessions = SessionManager(id_factory=id_factory)
        self.exchange = MessageExchangeClient(
            transport, self.sessions.conversation, dispatcher=dispatcher
        )
        self.sessions.subscribe(self.exchange.send_init_probe)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChatController":
        return cls(RequestsWebhookTransport(timeout=settings.timeout))

    def is_configured(self) -> bool:
        """True once an endpoint has been accepted; gates the conversation view."""
        return self.sessions.configured

    @property
    def endpoint(self) -> str:
        return self.sessions.endpoint

    @property
    def session_id(self) -> str:
        return self.sessions.session_id

    @property
    def waiting(self) -> bool:
        return self.exchange.waiting

    def get_history(self) -> tuple[ConversationEntry, ...]:
        return self.sessions.conversation.get()

    def configure(self, endpoint: str) -> bool:
        """Accept the webhook and start a session; the probe fires via subscription."""
        return self.sessions.configure(endpoint)

    def reset(self) -> None:
        """New conversation against the same webhook."""
        self.sessions.reset()
        self.exchange.clear_input()

    def reconfigure(self) -> None:
        """Drop the webhook and go back to the configuration form."""
        self.sessions.reconfigure()
        self.exchange.clear_input()

    def send(self, user_text: str) -> Optional[ConversationEntry]:
        if not self.sessions.configured:
            raise SessionNotConfiguredError("Configure a webhook before sending messages.")
        return self.exchange.send(
            self.sessions.endpoint, self.sessions.session_id, user_text
        )
