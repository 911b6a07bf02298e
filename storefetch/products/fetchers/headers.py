"""Browser-like request headers with a randomly chosen user agent."""

from __future__ import annotations

import random
from types import MappingProxyType

from .base import RequestHeaderSet

USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:120.0) Gecko/20100101 Firefox/120.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.1 Safari/605.1.15",
]

# Top-level navigation request.
BASE_HEADERS = {
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate",
    "DNT": "1",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
    "Cache-Control": "max-age=0",
}

_rng = random.Random()


def synthesize_headers(
    rng: random.Random | None = None,
    exclude_user_agent: str | None = None,
) -> RequestHeaderSet:
    """Return a new read-only header set with a user agent picked from USER_AGENTS.

    Pass the previous set's user agent as *exclude_user_agent* to guarantee
    the new identity differs from it.
    """
    rng = rng or _rng
    pool = [ua for ua in USER_AGENTS if ua != exclude_user_agent] or USER_AGENTS
    return MappingProxyType({"User-Agent": rng.choice(pool), **BASE_HEADERS})


def user_agent_of(headers: RequestHeaderSet) -> str | None:
    """Return the User-Agent value of *headers*, matching the name case-insensitively."""
    for name, value in headers.items():
        if name.lower() == "user-agent":
            return value
    return None
