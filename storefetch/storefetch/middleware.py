CORS_HEADERS = {
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def cors_headers(get_response):
    def middleware(request):
        response = get_response(request)

        # Every response is readable cross-origin; preflights also advertise
        # the allowed methods and request headers.
        response["Access-Control-Allow-Origin"] = "*"
        if request.method == "OPTIONS":
            for header, value in CORS_HEADERS.items():
                response[header] = value
        return response
    return middleware
