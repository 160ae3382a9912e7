"""Response classes carrying the JSON:API media type."""

from starlette.responses import JSONResponse

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class JSONAPIResponse(JSONResponse):
    """JSON response served as ``application/vnd.api+json``."""

    media_type = JSONAPI_MEDIA_TYPE
