"""Resilient fetch module: header synthesis and retrying storefront GETs."""

from .base import FailureKind, FetchAttempt, FetchFailure, FetchOutcome, FetchSuccess
from .exceptions import FetchError, NetworkError, RequestTimeout, RetriesExhausted
from .headers import synthesize_headers, user_agent_of
from .retrying_fetcher import RetryingFetcher, fetch_with_retry

__all__ = [
    "RetryingFetcher",
    "fetch_with_retry",
    "synthesize_headers",
    "user_agent_of",
    "FailureKind",
    "FetchAttempt",
    "FetchFailure",
    "FetchOutcome",
    "FetchSuccess",
    "FetchError",
    "NetworkError",
    "RequestTimeout",
    "RetriesExhausted",
]
