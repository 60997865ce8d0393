"""Chat with an arbitrary HTTP webhook: session lifecycle and message exchange."""

__version__ = "0.1.0"
