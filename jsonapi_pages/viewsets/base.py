"""Read-only viewset for paginated JSON:API collections."""

from typing import Any

import structlog
from fastapi import Request

from jsonapi_pages.config import get_settings
from jsonapi_pages.core.document import JSONAPIDocumentBuilder
from jsonapi_pages.pagination.base import PaginationBase
from jsonapi_pages.pagination.page_number import PageNumberPagination
from jsonapi_pages.schemas.pagination import CollectionOptions, PaginationLinks, PaginationMeta
from jsonapi_pages.utils.query_params import parse_query_params

logger = structlog.get_logger(__name__)


class JSONAPIViewSet:
    """Base class providing JSON:API list and retrieve actions.

    Pagination is composed in through ``pagination_class`` rather than
    inherited; any object exposing ``count()`` and ``slice()`` can back
    ``data_layer``.
    """

    serializer_class: type | None = None
    data_layer: Any = None
    pagination_class: type[PaginationBase] | None = PageNumberPagination
    document_builder_class: type = JSONAPIDocumentBuilder
    allowed_actions: list[str] = ["list", "retrieve"]

    def get_serializer(self) -> Any:
        """Instantiate the serializer."""
        if not self.serializer_class:
            raise ValueError("serializer_class must be set.")
        return self.serializer_class()

    def get_document_builder(self) -> JSONAPIDocumentBuilder:
        """Instantiate the document builder."""
        return self.document_builder_class()

    def get_paginator(self) -> PaginationBase | None:
        """Instantiate the paginator.

        Page sizes not fixed on a ``PageNumberPagination`` subclass come from
        settings.
        """
        pagination_class = self.pagination_class
        if pagination_class is None:
            return None
        if issubclass(pagination_class, PageNumberPagination):
            settings = get_settings()
            max_page_size = pagination_class.max_page_size
            return pagination_class(
                default_page_size=pagination_class.default_page_size or settings.default_page_size,
                max_page_size=max_page_size if max_page_size is not None else settings.max_page_size,
            )
        return pagination_class()

    def get_query_params(self, request: Request) -> dict[str, Any]:
        """Parse and normalize JSON:API query parameters."""
        params = parse_query_params(request.query_params)
        if self.serializer_class:
            params["resource_type"] = self.serializer_class.Meta.type_
        return params

    def get_base_url(self, request: Request) -> str:
        """Return the URL navigation links are rooted at."""
        return str(request.url)

    async def before_list(self, request: Request, *args: Any, **kwargs: Any) -> dict[str, Any] | None:
        """Hook called before list action. Override to add pre-processing logic."""
        return None

    async def perform_list(
        self, request: Request, params: dict[str, Any], *args: Any, **kwargs: Any
    ) -> dict[str, Any]:
        """Perform the list action. Override to customize list behavior."""
        serializer = self.get_serializer()
        base_url = self.get_base_url(request)
        paginator = self.get_paginator()
        if paginator is not None:
            page = await paginator.paginate(self.data_layer, params["page"], base_url=base_url)
            logger.debug(
                "collection_paginated",
                resource_type=params.get("resource_type"),
                total=page.metadata.total_count,
                page_number=page.metadata.page_number,
                items=len(page.items),
            )
            return serializer.serialize(page.items, page.options)

        total = await self.data_layer.count()
        items = await self.data_layer.slice(0, total) if total else []
        options = CollectionOptions(
            meta=PaginationMeta(total=total, pages=1 if total else 0),
            links=PaginationLinks(self_=base_url),
        )
        return serializer.serialize(items, options)

    async def after_list(
        self, request: Request, document: dict[str, Any], *args: Any, **kwargs: Any
    ) -> dict[str, Any]:
        """Hook called after list action. Override to add post-processing logic."""
        return document

    async def list(self, request: Request, *args: Any, **kwargs: Any) -> Any:
        """Handle GET collection requests."""
        before_result = await self.before_list(request, *args, **kwargs)
        if before_result is not None:
            return before_result

        params = self.get_query_params(request)
        document = await self.perform_list(request, params, *args, **kwargs)

        document = await self.after_list(request, document, *args, **kwargs)
        return document

    async def before_retrieve(
        self, request: Request, resource_id: str, *args: Any, **kwargs: Any
    ) -> dict[str, Any] | None:
        """Hook called before retrieve action. Override to add pre-processing logic."""
        return None

    async def perform_retrieve(
        self, request: Request, resource_id: str, params: dict[str, Any], *args: Any, **kwargs: Any
    ) -> dict[str, Any]:
        """Perform the retrieve action. Override to customize retrieve behavior."""
        instance = await self.data_layer.retrieve(resource_id=resource_id)
        serializer = self.get_serializer()
        return self.get_document_builder().build_single(
            serializer.to_resource(instance),
            links={"self": str(request.url)},
        )

    async def after_retrieve(
        self, request: Request, resource_id: str, document: dict[str, Any], *args: Any, **kwargs: Any
    ) -> dict[str, Any]:
        """Hook called after retrieve action. Override to add post-processing logic."""
        return document

    async def retrieve(self, request: Request, resource_id: str, *args: Any, **kwargs: Any) -> Any:
        """Handle GET single resource requests."""
        before_result = await self.before_retrieve(request, resource_id, *args, **kwargs)
        if before_result is not None:
            return before_result

        params = self.get_query_params(request)
        document = await self.perform_retrieve(request, resource_id, params, *args, **kwargs)

        document = await self.after_retrieve(request, resource_id, document, *args, **kwargs)
        return document
