"""
Exception hierarchy. The transport raises; the exchange client absorbs
request/reply failures into the conversation. Only SessionNotConfiguredError
is meant to reach callers, and only on misuse.
"""


class WebhookChatError(Exception):
    """Base class for every error raised by this package."""


class WebhookRequestError(WebhookChatError):
    """The POST could not be delivered or the webhook answered with an error status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class WebhookReplyError(WebhookChatError):
    """The webhook answered, but the body is not JSON or not the expected shape."""


class SessionNotConfiguredError(WebhookChatError):
    """A message exchange was attempted before an endpoint was configured."""
