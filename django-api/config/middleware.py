"""Bind per-request context to every structlog event."""

import uuid

from config.logging import add_context, clear_context


class RequestContextMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        clear_context()
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        add_context(request_id=request_id, method=request.method, path=request.path)
        try:
            response = self.get_response(request)
        finally:
            clear_context()
        response["X-Request-ID"] = request_id
        return response
