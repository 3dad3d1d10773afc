"""Errors raised while handling a chat exchange.

Each carries the HTTP status it maps to; the handlers in ``app.main`` turn
them into ``{"error": ...}`` JSON bodies.
"""
from typing import Any, Dict, Optional


class ChatError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class ConfigurationError(ChatError):
    """Upstream endpoint URL and/or API key are not set."""

    status_code = 500


class ValidationError(ChatError):
    """The chat request is missing its message."""

    status_code = 400


class UpstreamTransportError(ChatError):
    """The upstream API answered with a non-success status. Never retried."""

    status_code = 502

    def __init__(self, status: int, details: Optional[str]):
        super().__init__("Upstream error")
        self.status = status
        self.details = details

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message, "status": self.status, "details": self.details}
