"""
Services for looking up a storefront product by its page URL.
"""

from django.conf import settings
from loguru import logger

from .classification import ProductLookup, classify_outcome
from .fetchers import RetryingFetcher
from .url_canonical import canonicalize_product_url


def build_fetcher() -> RetryingFetcher:
    """Build a RetryingFetcher from ``settings.PRODUCT_FETCH``."""
    config = getattr(settings, "PRODUCT_FETCH", {})
    return RetryingFetcher(
        max_retries=config.get("MAX_RETRIES", 3),
        timeout=config.get("TIMEOUT", 15.0),
    )


def lookup_product(product_url: str, fetcher: RetryingFetcher | None = None) -> ProductLookup:
    """
    Fetch and normalize the product behind a storefront product page URL.

    Args:
        product_url: Product page URL as submitted by the caller
        fetcher: Fetcher to use; a fresh one per call when omitted

    Returns:
        ProductLookup with either ``data`` or ``error``/``details`` set
    """
    urls = canonicalize_product_url(product_url)
    logger.info(f"Fetching product data from: {urls.json_url}")

    fetcher = fetcher or build_fetcher()
    outcome = fetcher.fetch_outcome(urls.json_url)
    return classify_outcome(outcome, urls.clean_url)
