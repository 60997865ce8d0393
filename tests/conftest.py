"""pytest configuration and shared fakes.

The fakes stand in for the webhook (a recording transport), for uuid4 (a
counter) and for the background thread (runs the probe inline).
"""

import sys
from pathlib import Path

import pytest

# app/ holds the webhook_chat package and the Streamlit script
app_dir = Path(__file__).parent.parent / "app"
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from webhook_chat.config import INIT_SENTINEL
from webhook_chat.controller import ChatController
from webhook_chat.errors import WebhookRequestError


class RecordingTransport:
    """Answers every user message with `reply`; records every POST."""

    def __init__(self, reply=None, error=None, probe_error=None):
        self.reply = [{"message": "pong"}] if reply is None else reply
        self.error = error
        self.probe_error = probe_error
        self.calls = []

    def post(self, endpoint, session_id, message):
        self.calls.append((endpoint, session_id, message))
        if message == INIT_SENTINEL:
            if self.probe_error is not None:
                raise self.probe_error
            return [{"message": "probe ok"}]
        if self.error is not None:
            raise self.error
        return self.reply

    def probes(self):
        return [c for c in self.calls if c[2] == INIT_SENTINEL]

    def messages(self):
        return [c for c in self.calls if c[2] != INIT_SENTINEL]


class SequentialIds:
    def __init__(self, prefix="session"):
        self.prefix = prefix
        self.issued = []

    def __call__(self):
        value = f"{self.prefix}-{len(self.issued) + 1}"
        self.issued.append(value)
        return value


def run_inline(fn):
    fn()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def failing_transport():
    return RecordingTransport(
        error=WebhookRequestError("Webhook answered with HTTP 500", status_code=500)
    )


@pytest.fixture
def ids():
    return SequentialIds()


@pytest.fixture
def make_controller(ids):
    def _make(transport):
        return ChatController(transport, id_factory=ids, dispatcher=run_inline)

    return _make


@pytest.fixture
def controller(make_controller, transport):
    return make_controller(transport)
