"""RetryingFetcher: bounded-retry GET with backoff, jitter and header rotation."""

from __future__ import annotations

import random
import time
from typing import Callable

from curl_cffi import requests as curl_requests
from curl_cffi.requests.exceptions import RequestException, Timeout
from loguru import logger

from .base import (
    AttemptOutcome,
    FetchAttempt,
    FetchFailure,
    FetchOutcome,
    FetchSuccess,
    RequestHeaderSet,
)
from .exceptions import FetchError, NetworkError, RequestTimeout, RetriesExhausted
from .headers import synthesize_headers, user_agent_of

DEFAULT_MAX_RETRIES = 3
DEFAULT_TIMEOUT = 15.0

BACKOFF_BASE_MS = 1000
BACKOFF_CAP_MS = 5000
JITTER_MIN_MS = 500
JITTER_MAX_MS = 1500
RATE_LIMIT_WAIT_MS = 3000


def backoff_delay_ms(attempt: int) -> int:
    """Delay before *attempt*; zero for the first attempt."""
    if attempt <= 1:
        return 0
    return min(BACKOFF_BASE_MS * 2 ** (attempt - 1), BACKOFF_CAP_MS)


class RetryingFetcher:
    """Fetcher that retries transport errors, 429 and 403 responses.

    Every attempt is paced by a random jitter; retries additionally wait an
    exponential backoff. A 429 waits longer before the next attempt while a
    403 swaps in a freshly synthesized header set. On the last attempt a 429
    or 403 is returned as-is.
    """

    def __init__(
        self,
        max_retries: int = DEFAULT_MAX_RETRIES,
        timeout: float = DEFAULT_TIMEOUT,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.max_retries = max_retries
        self.timeout = timeout
        self.rng = rng or random.Random()
        self.sleep = sleep

    def fetch(self, url: str, headers: RequestHeaderSet | None = None) -> FetchSuccess:
        """Fetch *url* and return the first usable response. Raises FetchError on failure."""
        if headers is None:
            headers = synthesize_headers(self.rng)
        attempts: list[FetchAttempt] = []
        carried_wait_ms = 0

        for attempt in range(1, self.max_retries + 1):
            logger.info(f"Attempt {attempt}/{self.max_retries} for {url}")
            is_last = attempt == self.max_retries
            delay_ms = carried_wait_ms
            carried_wait_ms = 0

            backoff_ms = backoff_delay_ms(attempt)
            if backoff_ms:
                logger.info(f"Waiting {backoff_ms}ms before retry")
                self._pause(backoff_ms)
                delay_ms += backoff_ms

            jitter_ms = self.rng.randint(JITTER_MIN_MS, JITTER_MAX_MS)
            self._pause(jitter_ms)
            delay_ms += jitter_ms

            try:
                # A float timeout bounds the whole transfer, not each read.
                response = curl_requests.get(url, headers=dict(headers), timeout=self.timeout)
            except RequestException as exc:
                logger.warning(f"Attempt {attempt} failed for {url}: {exc}")
                attempts.append(FetchAttempt(attempt, delay_ms, AttemptOutcome.EXCEPTION))
                if is_last:
                    raise self._transport_error(exc, attempts) from exc
                continue

            status = response.status_code
            if status in (403, 429) and not is_last:
                attempts.append(
                    FetchAttempt(attempt, delay_ms, AttemptOutcome.RETRYABLE_STATUS, status)
                )
                if status == 429:
                    logger.warning(
                        f"Rate limited (429) on attempt {attempt}, "
                        f"waiting {RATE_LIMIT_WAIT_MS}ms before retry"
                    )
                    self._pause(RATE_LIMIT_WAIT_MS)
                    carried_wait_ms = RATE_LIMIT_WAIT_MS
                else:
                    logger.warning(f"403 Forbidden on attempt {attempt}, rotating headers")
                    headers = synthesize_headers(
                        self.rng, exclude_user_agent=user_agent_of(headers)
                    )
                continue

            outcome = (
                AttemptOutcome.EXHAUSTED if status in (403, 429) else AttemptOutcome.SUCCESS
            )
            attempts.append(FetchAttempt(attempt, delay_ms, outcome, status))
            return FetchSuccess(
                status_code=status,
                reason=response.reason or "",
                body=response.text,
                url=url,
                attempts=tuple(attempts),
            )

        raise RetriesExhausted("All retry attempts failed", attempts)

    def fetch_outcome(
        self, url: str, headers: RequestHeaderSet | None = None
    ) -> FetchOutcome:
        """Like fetch(), but failures come back as a FetchFailure instead of raising."""
        try:
            return self.fetch(url, headers)
        except FetchError as exc:
            logger.error(f"Fetch failed for {url}: {exc}")
            return FetchFailure(kind=exc.kind, message=str(exc), attempts=tuple(exc.attempts))

    def _pause(self, delay_ms: int) -> None:
        self.sleep(delay_ms / 1000)

    def _transport_error(
        self, exc: RequestException, attempts: list[FetchAttempt]
    ) -> FetchError:
        # curl error 28 is not always mapped to Timeout by older curl_cffi releases
        if isinstance(exc, Timeout) or "timed out" in str(exc).lower():
            return RequestTimeout(f"Request timed out after {self.timeout}s: {exc}", attempts)
        return NetworkError(f"Network error: {exc}", attempts)


def fetch_with_retry(
    url: str,
    initial_headers: RequestHeaderSet | None = None,
    max_retries: int = DEFAULT_MAX_RETRIES,
    timeout_ms: int = int(DEFAULT_TIMEOUT * 1000),
    rng: random.Random | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> FetchOutcome:
    """Fetch *url* with a one-off RetryingFetcher and return the outcome."""
    fetcher = RetryingFetcher(
        max_retries=max_retries, timeout=timeout_ms / 1000, rng=rng, sleep=sleep
    )
    return fetcher.fetch_outcome(url, initial_headers)
