"""Custom exceptions for the resilient fetch module."""

from __future__ import annotations

from .base import FailureKind, FetchAttempt


class FetchError(Exception):
    """A fetch operation failed without a usable response."""

    def __init__(
        self,
        message: str,
        kind: FailureKind,
        attempts: list[FetchAttempt] | None = None,
    ):
        self.kind = kind
        self.attempts = attempts or []
        super().__init__(message)


class RequestTimeout(FetchError):
    """The outbound request was cancelled by its timeout."""

    def __init__(self, message: str, attempts: list[FetchAttempt] | None = None):
        super().__init__(message, FailureKind.TIMEOUT, attempts)


class NetworkError(FetchError):
    """DNS, connection or other transport-level failure."""

    def __init__(self, message: str, attempts: list[FetchAttempt] | None = None):
        super().__init__(message, FailureKind.NETWORK_ERROR, attempts)


class RetriesExhausted(FetchError):
    """No attempt was able to return or raise."""

    def __init__(self, message: str, attempts: list[FetchAttempt] | None = None):
        super().__init__(message, FailureKind.EXHAUSTED_RETRIES, attempts)
