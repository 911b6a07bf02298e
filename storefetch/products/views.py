from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from products.services import lookup_product


class ProductLookupRequest(BaseModel):
    """Inbound request body."""

    model_config = ConfigDict(str_strip_whitespace=True)

    productUrl: str = Field(..., min_length=1)


@csrf_exempt
@require_http_methods(["POST", "OPTIONS"])
def fetch_product(request):
    """Look up a storefront product. Classifiable failures still answer 200."""
    # CORS preflight; the headers themselves come from the middleware.
    if request.method == "OPTIONS":
        return HttpResponse(status=204)

    try:
        payload = ProductLookupRequest.model_validate_json(request.body or b"{}")
    except ValidationError as exc:
        logger.error(f"Missing productUrl in request body: {exc.error_count()} error(s)")
        return JsonResponse(
            {
                "success": False,
                "error": "Missing productUrl in request body",
                "details": "A product URL is required to fetch product data.",
            },
            status=400,
        )

    try:
        lookup = lookup_product(payload.productUrl)
    except Exception as exc:
        logger.exception(f"Product lookup failed for {payload.productUrl}: {exc}")
        return JsonResponse(
            {"success": False, "error": "Internal server error", "details": str(exc)},
            status=500,
        )

    return JsonResponse(lookup.to_dict())
