"""Domain-specific exceptions."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    HTTP = "http"
    NETWORK = "network"
    CLIPBOARD = "clipboard"


class IconFinderError(Exception):
    kind: ErrorKind


class AuthError(IconFinderError):
    kind = ErrorKind.AUTH

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "Invalid API key. Please check your Streamline API credentials."
        )


class RateLimitError(IconFinderError):
    kind = ErrorKind.RATE_LIMIT

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "Rate limit exceeded. Please wait a moment before searching again."
        )


class HttpError(IconFinderError):
    kind = ErrorKind.HTTP

    def __init__(self, status_code: int, reason: str = "", message: str | None = None) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(message or f"API request failed: {status_code} {reason}".rstrip())


class NetworkError(IconFinderError):
    """Connectivity-class failure; keeps the attempted URL for diagnosis."""

    kind = ErrorKind.NETWORK

    def __init__(self, url: str, detail: str | None = None) -> None:
        self.url = url
        self.detail = detail
        text = "Network error: the icon catalog could not be reached"
        if detail:
            text = f"{text} ({detail})"
        super().__init__(f"{text}. URL attempted: {url}")


class ClipboardError(IconFinderError):
    """Both clipboard write tiers failed."""

    kind = ErrorKind.CLIPBOARD


class ClipboardUnsupported(RuntimeError):
    """Raised by a clipboard backend lacking the requested capability."""


__all__ = [
    "AuthError",
    "ClipboardError",
    "ClipboardUnsupported",
    "ErrorKind",
    "HttpError",
    "IconFinderError",
    "NetworkError",
    "RateLimitError",
]
