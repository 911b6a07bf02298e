"""Base types for the resilient fetch module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Union

RequestHeaderSet = Mapping[str, str]


class FailureKind(str, Enum):
    """Why a fetch did not produce a usable response."""

    TIMEOUT = "timeout"
    RATE_LIMITED = "rate_limited"
    FORBIDDEN = "forbidden"
    NETWORK_ERROR = "network_error"
    INVALID_BODY = "invalid_body"
    EXHAUSTED_RETRIES = "exhausted_retries"


class AttemptOutcome(str, Enum):
    SUCCESS = "success"
    RETRYABLE_STATUS = "retryable_status"
    EXCEPTION = "exception"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class FetchAttempt:
    """One HTTP attempt within a single fetch operation."""

    index: int
    delay_ms: int
    outcome: AttemptOutcome
    status_code: int | None = None


@dataclass(frozen=True)
class FetchSuccess:
    """The origin answered with an HTTP response (any status)."""

    status_code: int
    reason: str
    body: str
    url: str
    attempts: tuple[FetchAttempt, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class FetchFailure:
    """The fetch ended without a response from the origin."""

    kind: FailureKind
    message: str
    attempts: tuple[FetchAttempt, ...] = field(default_factory=tuple)


FetchOutcome = Union[FetchSuccess, FetchFailure]
