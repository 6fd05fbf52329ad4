from __future__ import annotations

from typing import Any


class WatsonDiscoveryError(Exception):
    """Base for errors raised by the Watson Discovery node."""


class ConfigurationError(WatsonDiscoveryError):
    """Raised when node settings fail validation. Lists every offending field."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class TransportError(WatsonDiscoveryError):
    """Raised when Watson Discovery answers with a non-200 status."""

    def __init__(self, message: str, status_code: int, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ResponseShapeError(WatsonDiscoveryError):
    """Raised when a 200 response body does not match the expected shape."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details
