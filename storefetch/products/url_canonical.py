"""Product URL canonicalization using w3lib.

A storefront exposes the structured form of a product page at the same path
with a ``.json`` suffix:

- Strips surrounding whitespace
- Strips the query string and fragment
- Strips an existing trailing ``.json``
- Appends ``.json``
"""

from dataclasses import dataclass

from w3lib.url import url_query_cleaner

JSON_SUFFIX = ".json"


@dataclass(frozen=True)
class ProductUrls:
    """The URL reported back to callers and the resource URL actually fetched."""

    clean_url: str
    json_url: str


def _strip_json_suffix(url: str) -> str:
    if url.endswith(JSON_SUFFIX):
        return url[: -len(JSON_SUFFIX)]
    return url


def canonicalize_product_url(product_url: str) -> ProductUrls:
    """Build the canonical ``.json`` resource URL for a product page URL.

    Args:
        product_url: The product page URL as submitted.

    Returns:
        ProductUrls with ``clean_url`` (trimmed, ``.json`` removed, query
        kept) and ``json_url`` (query and fragment removed, ``.json`` added).
    """
    clean_url = _strip_json_suffix(product_url.strip())

    # An empty parameter list with remove=False keeps no query parameters.
    base_url = url_query_cleaner(clean_url, ())
    return ProductUrls(
        clean_url=clean_url,
        json_url=_strip_json_suffix(base_url) + JSON_SUFFIX,
    )
