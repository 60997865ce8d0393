"""Streamlit page, driven through streamlit.testing with a fake webhook."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from conftest import RecordingTransport, SequentialIds, run_inline
from webhook_chat.config import ERROR_REPLY, INIT_SENTINEL
from webhook_chat.controller import ChatController
from webhook_chat.errors import WebhookRequestError

APP_PATH = str(Path(__file__).parent.parent / "app" / "app.py")


@pytest.fixture
def page(monkeypatch):
    monkeypatch.delenv("WEBHOOK_CHAT_DEFAULT_URL", raising=False)

    def _page(transport):
        controller = ChatController(
            transport, id_factory=SequentialIds(), dispatcher=run_inline
        )
        at = AppTest.from_file(APP_PATH, default_timeout=10)
        at.session_state["controller"] = controller
        return at, controller

    return _page


def submit_webhook(at, url):
    at.text_input[0].input(url)
    at.button[0].click()
    at.run()


def test_unconfigured_shows_only_the_form(page):
    at, controller = page(RecordingTransport())
    at.run()

    assert not at.exception
    assert at.title[0].value == "Test Flows"
    assert at.text_input[0].label == "URL del Webhook"
    assert len(at.chat_input) == 0
    assert not controller.is_configured()


def test_blank_url_keeps_the_form(page):
    at, controller = page(RecordingTransport())
    at.run()

    submit_webhook(at, "   ")

    assert not controller.is_configured()
    assert at.warning[0].value == "Introduce la URL del webhook para continuar."
    assert len(at.chat_input) == 0


def test_configure_opens_empty_chat_and_probes(page):
    transport = RecordingTransport()
    at, controller = page(transport)
    at.run()

    submit_webhook(at, "https://hooks.test/flow")

    assert not at.exception
    assert controller.is_configured()
    assert at.subheader[0].value == "Escribe tu primer mensaje..."
    assert f"Session ID: {controller.session_id}" in [c.value for c in at.caption]
    assert len(at.chat_input) == 1
    assert transport.calls == [
        ("https://hooks.test/flow", controller.session_id, INIT_SENTINEL)
    ]


def test_chat_round_trip_renders_both_entries(page):
    at, controller = page(RecordingTransport(reply=[{"message": "**pong**"}]))
    at.run()
    submit_webhook(at, "https://hooks.test/flow")

    at.chat_input[0].set_value("ping").run()

    assert not at.exception
    assert [e.content for e in controller.get_history()] == ["ping", "**pong**"]
    assert len(at.chat_message) == 2
    assert at.chat_message[1].markdown[0].value == "**pong**"


def test_failed_exchange_shows_error_entry(page):
    at, controller = page(RecordingTransport(error=WebhookRequestError("HTTP 500", 500)))
    at.run()
    submit_webhook(at, "https://hooks.test/flow")

    at.chat_input[0].set_value("hello").run()

    assert not at.exception
    assert controller.get_history()[-1].content == ERROR_REPLY
    assert controller.waiting is False


def test_reconfigure_button_returns_to_form(page):
    at, controller = page(RecordingTransport())
    at.run()
    submit_webhook(at, "https://hooks.test/flow")

    reconfigure = [b for b in at.button if "Configurar" in b.label][0]
    reconfigure.click().run()

    assert not controller.is_configured()
    assert len(at.chat_input) == 0


def test_reset_button_starts_new_conversation(page):
    transport = RecordingTransport()
    at, controller = page(transport)
    at.run()
    submit_webhook(at, "https://hooks.test/flow")
    at.chat_input[0].set_value("ping").run()
    old_id = controller.session_id

    reset = [b for b in at.button if "Reiniciar Chat" in b.label][0]
    reset.click().run()

    assert controller.is_configured()
    assert controller.get_history() == ()
    assert controller.session_id != old_id
    assert len(transport.probes()) == 2
    assert at.subheader[0].value == "Escribe tu primer mensaje..."
