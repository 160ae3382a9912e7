"""JSON:API error handling middleware."""

from typing import Any

import structlog

from jsonapi_pages.core.errors import JSONAPIError, JSONAPIErrorBuilder
from jsonapi_pages.core.responses import JSONAPIResponse

logger = structlog.get_logger(__name__)


class ErrorHandlerMiddleware:
    """Convert exceptions into JSON:API error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.error_builder = JSONAPIErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize JSON:API error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return
        try:
            await self.app(scope, receive, send)
        except JSONAPIError as exc:
            logger.info(
                "jsonapi_error",
                path=scope.get("path"),
                status=exc.status,
                error=type(exc).__name__,
                detail=exc.detail,
            )
            error = self.error_builder.from_exception(exc)
            response = JSONAPIResponse(
                self.error_builder.error_document([error]),
                status_code=int(exc.status),
            )
            await response(scope, receive, send)
        except Exception as exc:  # noqa: BLE001 - last-resort handler
            logger.exception("unhandled_error", path=scope.get("path"))
            error = self.error_builder.error_object(
                status="500",
                title="Internal Server Error",
                detail=str(exc),
            )
            response = JSONAPIResponse(
                self.error_builder.error_document([error]),
                status_code=500,
            )
            await response(scope, receive, send)
