"""JSON:API error taxonomy and error object builders."""

from typing import Any


class JSONAPIError(Exception):
    """Base error carrying the JSON:API status and title it maps to."""

    status: str = "500"
    title: str = "Internal Server Error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.title)
        self.detail = detail


class MalformedURLError(JSONAPIError, ValueError):
    """Raised when a base URL cannot be parsed into an absolute URL."""

    status = "400"
    title = "Malformed URL"

    def __init__(self, url: Any, reason: str | None = None) -> None:
        detail = f"Cannot build links from {url!r}"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(detail)
        self.url = url
        self.reason = reason


class ResourceNotFoundError(JSONAPIError, LookupError):
    """Raised when a single resource lookup has no match."""

    status = "404"
    title = "Not Found"

    def __init__(self, resource_type: str, resource_id: Any) -> None:
        super().__init__(f"No {resource_type} resource with id {resource_id!r}.")
        self.resource_type = resource_type
        self.resource_id = resource_id


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def from_exception(self, exc: JSONAPIError) -> dict[str, Any]:
        """Return the error object describing a JSON:API error."""
        return self.error_object(
            status=exc.status,
            code=type(exc).__name__,
            title=exc.title,
            detail=exc.detail,
        )

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API document with an errors array."""
        return {"errors": errors}
