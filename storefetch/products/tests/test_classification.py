"""Tests for turning fetch outcomes into ProductLookup envelopes."""

import json

import pytest

from products.classification import (
    ProductLookup,
    ProductResult,
    classify_failure,
    classify_outcome,
    classify_response,
    project_product,
)
from products.fetchers.base import FailureKind, FetchFailure, FetchSuccess

CLEAN_URL = "https://store.com/products/x"


def _response(status_code=200, body="{}", reason="OK"):
    return FetchSuccess(
        status_code=status_code,
        reason=reason,
        body=body,
        url=CLEAN_URL + ".json",
    )


# ---------------------------------------------------------------------------
# Successful responses
# ---------------------------------------------------------------------------
class TestClassifySuccess:
    def test_minimal_product_fills_defaults(self):
        body = json.dumps({"product": {"title": "T", "vendor": "V"}})

        lookup = classify_response(_response(body=body), CLEAN_URL)

        assert lookup.success is True
        assert lookup.data == ProductResult(
            title="T",
            vendor="V",
            description="",
            product_type="",
            tags=[],
            handle="",
            url=CLEAN_URL,
        )
        assert lookup.to_dict() == {
            "success": True,
            "data": {
                "title": "T",
                "description": "",
                "vendor": "V",
                "product_type": "",
                "tags": [],
                "handle": "",
                "url": CLEAN_URL,
            },
        }

    def test_full_product(self):
        product = {
            "title": "Linen Shirt",
            "body_html": "<p>Breathable</p>",
            "vendor": "Acme",
            "product_type": "Shirts",
            "tags": ["summer", "linen"],
            "handle": "linen-shirt",
        }

        result = project_product(product, CLEAN_URL)

        assert result.description == "<p>Breathable</p>"
        assert result.tags == ["summer", "linen"]
        assert result.handle == "linen-shirt"

    def test_description_falls_back_when_body_html_missing(self):
        result = project_product({"description": "plain"}, CLEAN_URL)
        assert result.description == "plain"

    def test_comma_separated_tags_are_split(self):
        result = project_product({"tags": "summer, linen,, sale"}, CLEAN_URL)
        assert result.tags == ["summer", "linen", "sale"]

    def test_null_fields_become_empty(self):
        result = project_product(
            {"title": None, "vendor": None, "tags": None, "handle": None}, CLEAN_URL
        )
        assert result.title == ""
        assert result.vendor == ""
        assert result.tags == []
        assert result.handle == ""

    def test_missing_product_key_is_invalid_structure(self):
        lookup = classify_response(_response(body='{"products": []}'), CLEAN_URL)

        assert lookup.success is False
        assert lookup.error == "Invalid product data structure"
        assert lookup.kind == "invalid_product_structure"

    @pytest.mark.parametrize("body", ['{"product": "x"}', '{"product": null}', "[]", "null"])
    def test_unexpected_shape_is_invalid_structure(self, body):
        lookup = classify_response(_response(body=body), CLEAN_URL)

        assert lookup.success is False
        assert lookup.error == "Invalid product data structure"


# ---------------------------------------------------------------------------
# Error responses
# ---------------------------------------------------------------------------
class TestClassifyErrors:
    def test_html_body_is_invalid_body(self):
        lookup = classify_response(_response(body="<html><body>Shop</body></html>"), CLEAN_URL)

        assert lookup.success is False
        assert lookup.kind == FailureKind.INVALID_BODY.value
        assert lookup.error == "Invalid response from store"
        assert "HTML" in lookup.details

    def test_html_body_wins_over_error_status(self):
        lookup = classify_response(_response(403, "<html>denied</html>", "Forbidden"), CLEAN_URL)
        assert lookup.kind == FailureKind.INVALID_BODY.value

    def test_not_found(self):
        lookup = classify_response(_response(404, '{"errors": "Not Found"}', "Not Found"), CLEAN_URL)

        assert lookup.success is False
        assert lookup.error == "Product Not Found"
        assert "removed" in lookup.details

    def test_forbidden(self):
        lookup = classify_response(_response(403, "{}", "Forbidden"), CLEAN_URL)

        assert lookup.kind == FailureKind.FORBIDDEN.value
        assert lookup.error.startswith("Access Forbidden")

    def test_rate_limited(self):
        lookup = classify_response(_response(429, "{}", "Too Many Requests"), CLEAN_URL)

        assert lookup.kind == FailureKind.RATE_LIMITED.value
        assert lookup.error == "Rate Limited"

    def test_other_status_is_generic(self):
        lookup = classify_response(_response(502, "{}", "Bad Gateway"), CLEAN_URL)

        assert lookup.error == "HTTP 502: Bad Gateway"
        assert "502" in lookup.details

    def test_error_envelope_has_no_data(self):
        lookup = classify_response(_response(404, "{}", "Not Found"), CLEAN_URL)

        assert "data" not in lookup.to_dict()
        assert "kind" not in lookup.to_dict()


# ---------------------------------------------------------------------------
# Fetch failures
# ---------------------------------------------------------------------------
class TestClassifyFailure:
    def test_timeout(self):
        lookup = classify_failure(FetchFailure(FailureKind.TIMEOUT, "Request timed out"))

        assert lookup.error == "Request Timeout"
        assert "timed out" in lookup.details

    def test_network_error_keeps_message(self):
        lookup = classify_failure(
            FetchFailure(FailureKind.NETWORK_ERROR, "Network error: connection refused")
        )

        assert lookup.error == "Failed to fetch product data from store URL"
        assert lookup.details == "Network error: connection refused"

    def test_classify_outcome_dispatches(self):
        failure = FetchFailure(FailureKind.EXHAUSTED_RETRIES, "All retry attempts failed")

        assert classify_outcome(failure, CLEAN_URL).kind == "exhausted_retries"
        assert classify_outcome(_response(body='{"product": {}}'), CLEAN_URL).success is True

    def test_failure_helper(self):
        lookup = ProductLookup.failure("x", "err", "why")
        assert lookup.to_dict() == {"success": False, "error": "err", "details": "why"}
