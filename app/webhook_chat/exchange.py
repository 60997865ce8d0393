"""
Purpose: Message exchange with the configured webhook.
Turns one user message into exactly two conversation entries (the echo and
the reply) and swallows every transport/reply failure into a fixed error
entry. Also sends the silent init probe.

Key responsibilities:
- Optimistic echo: the user entry lands before any network activity.
- Waiting flag held for the whole exchange and released on every exit path.
- Probe is dispatched, not awaited; its outcome never touches the transcript.

Testing: Fake transport + synchronous dispatcher. Verify entry ordering,
the waiting flag after failures, and probe isolation.
"""

from __future__ import annotations
import logging
import threading
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from .config import ERROR_REPLY, FALLBACK_REPLY, INIT_SENTINEL
from .errors import WebhookChatError
from .interfaces import Dispatcher, WebhookTransport
from .models import ConversationEntry, ExchangeState, MessageRole
from .persistence.conversation_store import InMemoryConversationStore
from .utils.reply_json import extract_message

logger = logging.getLogger(__name__)


def background_dispatch(fn: Callable[[], None]) -> None:
    """Run fn on a daemon thread so the Streamlit script run is not held up."""
    thread = threading.Thread(target=fn, daemon=True)
    thread.start()


class MessageExchangeClient:
    def __init__(
        self,
        transport: WebhookTransport,
        conversation: InMemoryConversationStore,
        dispatcher: Optional[Dispatcher] = None,
    ):
        self.transport = transport
        self.conversation = conversation
        self.dispatcher: Dispatcher = dispatcher or background_dispatch
        self.state = ExchangeState()

    @property
    def waiting(self) -> bool:
        return self.state.waiting

    @contextmanager
    def _waiting(self) -> Iterator[None]:
        self.state.waiting = True
        try:
            yield
        finally:
            self.state.waiting = False

    def send_init_probe(self, endpoint: str, session_id: str) -> None:
        """Fire-and-forget POST of the session-start sentinel."""

        def probe() -> None:
            try:
                self.transport.post(endpoint, session_id, INIT_SENTINEL)
                logger.debug("Init probe delivered (session %s)", session_id)
            except Exception as e:
                logger.debug("Init probe failed (session %s): %s", session_id, e)

        try:
            self.dispatcher(probe)
        except Exception as e:
            logger.debug("Init probe could not be dispatched: %s", e)

    def send(
        self, endpoint: str, session_id: str, user_text: str
    ) -> Optional[ConversationEntry]:
        """
        One exchange: echo, clear input, wait, POST, append the reply (or the
        fixed error text). Returns the assistant entry, or None when the text
        is blank or another exchange is still in flight.
        """
        if not (user_text or "").strip():
            return None
        if self.state.waiting:
            logger.warning("Send ignored, exchange in flight (session %s)", session_id)
            return None

        self.conversation.append(MessageRole.USER, user_text)
        self.state.pending_input = ""

        with self._waiting():
            try:
                data = self.transport.post(endpoint, session_id, user_text)
                content = extract_message(data) or FALLBACK_REPLY
            except WebhookChatError as e:
                logger.warning("Exchange failed (session %s): %s", session_id, e)
                content = ERROR_REPLY
            except Exception:
                logger.exception("Unexpected exchange failure (session %s)", session_id)
                content = ERROR_REPLY
            return self.conversation.append(MessageRole.ASSISTANT, content)

    def clear_input(self) -> None:
        self.state.pending_input = ""
