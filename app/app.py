"""
UI layer
Purpose: Streamlit-only glue. Renders the webhook form or the chat view,
collects user input, and delegates all work to the controller. Keeps UI
concerns (layout/state widgets) separate from the exchange logic so that
logic can be unit tested without Streamlit.
"""

import logging

import streamlit as st

from webhook_chat.config import Settings, configure_logging
from webhook_chat.controller import ChatController
from webhook_chat.models import MessageRole

settings = Settings.from_env()
configure_logging(settings)
logger = logging.getLogger("webhook_chat.app")

# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="Test Flows",
    page_icon="💬",
    layout="centered",
)

# ---------------------------
# UI constants
# ---------------------------
TITLE = "Test Flows"
FORM_HINT = "Configura el webhook para comenzar"
URL_LABEL = "URL del Webhook"
URL_PLACEHOLDER = "https://ejemplo.com/webhook"
START_LABEL = "Iniciar Chat"
EMPTY_URL_WARNING = "Introduce la URL del webhook para continuar."
RESET_LABEL = "Reiniciar Chat"
RECONFIGURE_LABEL = "Configurar"
EMPTY_CHAT = "Escribe tu primer mensaje..."
INPUT_PLACEHOLDER = "Escribe tu mensaje..."
INPUT_HINT = "Presiona Enter para enviar, Shift+Enter para nueva línea"
WAITING_LABEL = "Esperando respuesta…"

# ---------------------------
# Session state init
# ---------------------------
st_session = st.session_state
st_session.setdefault("controller", None)
if st_session.controller is None:
    st_session.controller = ChatController.from_settings(settings)


# ---------------------------
# Helpers
# ---------------------------
def get_controller() -> ChatController:
    """Return the controller object."""
    return st_session.controller


def on_reset_chat():
    """Same webhook, fresh session id and empty transcript."""
    get_controller().reset()


def on_reconfigure():
    """Back to the webhook form."""
    get_controller().reconfigure()


def render_entry(role: str, content: str) -> None:
    """Assistant replies are markdown; user messages are shown verbatim."""
    with st.chat_message(role):
        if role == MessageRole.ASSISTANT.value:
            st.markdown(content)
        else:
            st.text(content)


# ---------------------------
# Configuration form
# ---------------------------
controller = get_controller()

if not controller.is_configured():
    st.title(TITLE)
    st.caption(FORM_HINT)
    with st.form("webhook_form"):
        webhook_url = st.text_input(
            URL_LABEL,
            value=settings.default_url,
            placeholder=URL_PLACEHOLDER,
        )
        submitted = st.form_submit_button(START_LABEL)
    if submitted:
        if controller.configure(webhook_url):
            st.rerun()
        else:
            st.warning(EMPTY_URL_WARNING)
    st.stop()

# ---------------------------
# Header
# ---------------------------
title_col, reset_col, config_col = st.columns([3, 1, 1])
with title_col:
    st.title(TITLE)
with reset_col:
    st.button("🔄 " + RESET_LABEL, on_click=on_reset_chat)
with config_col:
    st.button("⚙️ " + RECONFIGURE_LABEL, on_click=on_reconfigure)

# ---------------------------
# Transcript
# ---------------------------
history = controller.get_history()
if not history:
    st.subheader(EMPTY_CHAT)
    st.caption(f"Session ID: {controller.session_id}")
else:
    for entry in history:
        render_entry(entry.role.value, entry.content)

# ---------------------------
# Input
# ---------------------------
raw = st.chat_input(INPUT_PLACEHOLDER, disabled=controller.waiting)
st.caption(INPUT_HINT)

if raw is not None and raw.strip():
    render_entry(MessageRole.USER.value, raw)
    with st.chat_message(MessageRole.ASSISTANT.value):
        with st.spinner(WAITING_LABEL):
            try:
                controller.send(raw)
            except Exception as e:
                logger.exception("Chat flow failed")
                st.toast(f"Chat flow failed: {e}", icon="⚠️")
    st.rerun()
