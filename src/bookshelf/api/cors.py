"""Permissive cross-origin policy applied to every response."""

from collections.abc import Awaitable, Callable

from fastapi import Request, Response, status

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Headers": (
        "Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, "
        "Authorization, accept, origin, Cache-Control, X-Requested-With"
    ),
    "Access-Control-Allow-Methods": "POST, OPTIONS, GET, PUT, DELETE",
}


async def cors_policy(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Answer preflight requests directly and tag all other responses."""
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_204_NO_CONTENT, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response
