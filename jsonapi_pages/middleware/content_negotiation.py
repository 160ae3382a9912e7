"""JSON:API content negotiation middleware."""

from typing import Any

import structlog

from jsonapi_pages.core.errors import JSONAPIErrorBuilder
from jsonapi_pages.core.responses import JSONAPI_MEDIA_TYPE, JSONAPIResponse
from jsonapi_pages.utils.content_negotiation import parse_accept_header

logger = structlog.get_logger(__name__)

# Accept-params that do not count as media type modifiers.
_ACCEPT_PARAMS = {"q"}


def is_acceptable(accept: str) -> bool:
    """Return True if a response in the JSON:API media type satisfies ``accept``."""
    if not accept.strip():
        return True
    ranges = parse_accept_header(accept)
    jsonapi_ranges = [item for item in ranges if item["media_type"] == JSONAPI_MEDIA_TYPE]
    if jsonapi_ranges:
        return any(
            not set(item.get("other_params", {})) - _ACCEPT_PARAMS for item in jsonapi_ranges
        )
    return any(item["media_type"] == "*/*" for item in ranges)


class ContentNegotiationMiddleware:
    """Reject requests whose Accept header excludes the JSON:API media type."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Validate the Accept header before passing to downstream app."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        headers = {k.decode("latin-1").lower(): v.decode("latin-1") for k, v in scope.get("headers", [])}
        accept = headers.get("accept", "")

        if not is_acceptable(accept):
            logger.info("not_acceptable", path=scope.get("path"), accept=accept)
            error = JSONAPIErrorBuilder().error_object(status="406", title="Not Acceptable")
            response = JSONAPIResponse({"errors": [error]}, status_code=406)
            await response(scope, receive, send)
            return

        await self.app(scope, receive, send)
