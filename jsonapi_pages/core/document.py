"""JSON:API document construction."""

from typing import Any, Iterable, Mapping


class JSONAPIDocumentBuilder:
    """Build JSON:API v1.1 documents from serialized data."""

    def build_single(
        self,
        resource: Mapping[str, Any] | None,
        *,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document for a single resource object."""
        document: dict[str, Any] = {"data": dict(resource) if resource is not None else None}
        if meta:
            document["meta"] = dict(meta)
        if links:
            document["links"] = dict(links)
        return document

    def build_collection(
        self,
        resources: Iterable[Mapping[str, Any]],
        *,
        links: Mapping[str, Any] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document for a collection of resources.

        An empty collection still renders ``data`` as an empty list.
        """
        document: dict[str, Any] = {"data": [dict(item) for item in resources]}
        if meta:
            document["meta"] = dict(meta)
        if links:
            document["links"] = dict(links)
        return document

    def build_error(self, errors: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API error document from error objects."""
        return {"errors": [dict(error) for error in errors]}
