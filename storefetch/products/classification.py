"""Turn a terminal fetch outcome into the structured result returned to callers."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field

from loguru import logger

from products.fetchers.base import FailureKind, FetchFailure, FetchOutcome, FetchSuccess


@dataclass
class ProductResult:
    """Normalized product payload. Every field is always present."""

    title: str = ""
    description: str = ""
    vendor: str = ""
    product_type: str = ""
    tags: list[str] = field(default_factory=list)
    handle: str = ""
    url: str = ""


@dataclass
class ProductLookup:
    """Outbound envelope: ``{success, data?, error?, details?}``."""

    success: bool
    data: ProductResult | None = None
    error: str | None = None
    details: str | None = None
    kind: str | None = None

    def to_dict(self) -> dict:
        payload: dict = {"success": self.success}
        if self.data is not None:
            payload["data"] = asdict(self.data)
        if self.error is not None:
            payload["error"] = self.error
        if self.details is not None:
            payload["details"] = self.details
        return payload

    @classmethod
    def failure(cls, kind: str, error: str, details: str) -> ProductLookup:
        return cls(success=False, error=error, details=details, kind=kind)


INVALID_BODY_ERROR = "Invalid response from store"
INVALID_BODY_DETAILS = (
    "The store did not return valid JSON. It might be a regular HTML page."
)

INVALID_STRUCTURE_ERROR = "Invalid product data structure"
INVALID_STRUCTURE_DETAILS = (
    "The JSON response from the store does not contain expected product information."
)

STATUS_ERRORS = {
    403: (
        FailureKind.FORBIDDEN.value,
        "Access Forbidden - Store may have restricted product data access",
        "The store has blocked access to product JSON data. This may be due to "
        "store privacy settings or anti-bot protection.",
    ),
    404: (
        "not_found",
        "Product Not Found",
        "The product URL does not exist or the product may have been removed.",
    ),
    429: (
        FailureKind.RATE_LIMITED.value,
        "Rate Limited",
        "Too many requests. The store is temporarily blocking requests.",
    ),
}

FETCH_FAILED_ERROR = "Failed to fetch product data from store URL"
TIMEOUT_ERROR = "Request Timeout"
TIMEOUT_DETAILS = "The request to fetch product data took too long and timed out."


def _text(value) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _tags(value) -> list[str]:
    # Product .json documents carry tags as one comma-separated string.
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    if isinstance(value, (list, tuple)):
        return [_text(tag) for tag in value if tag is not None]
    return []


def project_product(product: dict, clean_url: str) -> ProductResult:
    """Project a raw provider ``product`` object onto ProductResult."""
    return ProductResult(
        title=_text(product.get("title")),
        description=_text(product.get("body_html") or product.get("description")),
        vendor=_text(product.get("vendor")),
        product_type=_text(product.get("product_type")),
        tags=_tags(product.get("tags")),
        handle=_text(product.get("handle")),
        url=clean_url,
    )


def classify_response(response: FetchSuccess, clean_url: str) -> ProductLookup:
    """Classify an HTTP response from the origin. Never raises."""
    try:
        data = json.loads(response.body)
    except (TypeError, ValueError):
        logger.warning(
            f"Non-JSON body from {response.url} (status={response.status_code})"
        )
        return ProductLookup.failure(
            FailureKind.INVALID_BODY.value, INVALID_BODY_ERROR, INVALID_BODY_DETAILS
        )

    if not response.ok:
        logger.error(
            f"Store fetch failed for {response.url}: "
            f"{response.status_code} {response.reason}"
        )
        kind, error, details = STATUS_ERRORS.get(
            response.status_code,
            (
                "http_error",
                f"HTTP {response.status_code}: {response.reason}",
                "Product JSON endpoint not accessible. Server responded with: "
                f"{response.status_code}",
            ),
        )
        return ProductLookup.failure(kind, error, details)

    product = data.get("product") if isinstance(data, dict) else None
    if not isinstance(product, dict):
        logger.error(f"Invalid product data structure from {response.url}")
        return ProductLookup.failure(
            "invalid_product_structure", INVALID_STRUCTURE_ERROR, INVALID_STRUCTURE_DETAILS
        )

    result = project_product(product, clean_url)
    logger.info(f"Fetched product data for: {result.title}")
    return ProductLookup(success=True, data=result)


def classify_failure(failure: FetchFailure) -> ProductLookup:
    """Classify a fetch that ended without a response."""
    if failure.kind == FailureKind.TIMEOUT:
        return ProductLookup.failure(failure.kind.value, TIMEOUT_ERROR, TIMEOUT_DETAILS)
    return ProductLookup.failure(
        failure.kind.value,
        FETCH_FAILED_ERROR,
        failure.message
        or "Network error or timeout occurred while fetching product data.",
    )


def classify_outcome(outcome: FetchOutcome, clean_url: str) -> ProductLookup:
    if isinstance(outcome, FetchFailure):
        return classify_failure(outcome)
    return classify_response(outcome, clean_url)
