"""Utilities for pulling the assistant message out of a webhook reply body."""

from __future__ import annotations
from typing import Any, Optional

from ..errors import WebhookReplyError


def first_element(data: Any) -> Any:
    """
    Return the first element of a decoded reply.
    - A JSON array yields its item 0.
    - A JSON object keyed "0" is read the same way (index lookup on an object).
    Anything else raises WebhookReplyError.
    """
    if isinstance(data, list):
        if not data:
            raise WebhookReplyError("Reply array is empty.")
        return data[0]
    if isinstance(data, dict) and "0" in data:
        return data["0"]
    raise WebhookReplyError(f"Expected a JSON array, got {type(data).__name__}.")


def extract_message(data: Any) -> Optional[str]:
    """
    Strict on shape, lenient on content: the first element must be an object,
    but a missing or empty `message` returns None so the caller can fall back.
    """
    head = first_element(data)
    if not isinstance(head, dict):
        raise WebhookReplyError(
            f"Expected an object as first element, got {type(head).__name__}."
        )
    message = head.get("message")
    if not message:
        return None
    return message if isinstance(message, str) else str(message)
