"""
Abstractions for pluggable services. The controller and exchange client depend
on these, not on `requests` or threads, so tests can swap in fakes.

Common protocols:
- WebhookTransport.post(endpoint, session_id, message) -> decoded JSON body
- IdFactory() -> fresh session identifier
- Dispatcher(fn) -> runs fn now or later, never raises into the caller

Testing: Use a recording transport and a synchronous dispatcher.
"""

from __future__ import annotations
from typing import Any, Callable, Protocol


class WebhookTransport(Protocol):
    def post(self, endpoint: str, session_id: str, message: str) -> Any: ...


class IdFactory(Protocol):
    def __call__(self) -> str: ...


class Dispatcher(Protocol):
    def __call__(self, fn: Callable[[], None]) -> None: ...
