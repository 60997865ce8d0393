"""
Purpose: Thin client wrapper around the user's webhook.
One place for headers, payload encoding, status checks and body decoding.

No retries and no auth: a failed POST is terminal for that exchange.

Testing: Patch `requests.post`; assert headers/body and that errors map to
WebhookRequestError / WebhookReplyError.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Optional

import requests

from ..config import SESSION_HEADER
from ..errors import WebhookReplyError, WebhookRequestError

logger = logging.getLogger(__name__)


class RequestsWebhookTransport:
    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def _build_headers(self, session_id: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            SESSION_HEADER: session_id,
        }

    def _decode_json(self, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise WebhookReplyError(
                f"Webhook returned a non-JSON body (status {response.status_code})"
            ) from exc

    def post(self, endpoint: str, session_id: str, message: str) -> Any:
        """POST `{"message": message}` and return the decoded JSON body."""
        try:
            response = requests.post(
                endpoint,
                headers=self._build_headers(session_id),
                data=json.dumps({"message": message}),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise WebhookRequestError(f"Webhook request failed: {exc}") from exc

        if not 200 <= response.status_code < 300:
            raise WebhookRequestError(
                f"Webhook answered with HTTP {response.status_code}",
                status_code=response.status_code,
            )

        data = self._decode_json(response)
        logger.debug("Webhook reply for session %s: %r", session_id, data)
        return data
