"""Router scaffolding aligned with JSON:API routes."""

from typing import Any, Callable

from fastapi import APIRouter, Depends
from fastapi import Request

from jsonapi_pages.core.responses import JSONAPIResponse

DEFAULT_ACTIONS = ["list", "retrieve"]


class JSONAPIRouter(APIRouter):
    """APIRouter wrapper for read-only JSON:API viewsets."""

    def register_viewset(
        self,
        prefix: str,
        viewset: Any | Callable[..., Any],
        *,
        dependencies: list[Any] | None = None,
    ) -> None:
        """Register JSON:API routes for a viewset instance or factory function.

        Args:
            prefix: URL prefix for all routes (e.g., "/articles")
            viewset: Viewset instance or factory function that returns a viewset instance.
                    If a factory function is provided, it will be called per request with
                    dependency injection support.
            dependencies: Additional FastAPI dependencies to inject for all routes.

        Examples:
            # Register with a viewset instance (no dependency injection)
            class ArticleViewSet(JSONAPIViewSet):
                serializer_class = ArticleSerializer
                data_layer = InMemoryDataLayer(articles)

            viewset = ArticleViewSet()
            router.register_viewset("/articles", viewset)

            # Register with a factory function (with dependency injection)
            def get_article_viewset(session: AsyncSession = Depends(get_session)) -> ArticleViewSet:
                viewset = ArticleViewSet()
                viewset.data_layer = SQLAlchemyDataLayer(model=Article, session=session)
                return viewset

            router.register_viewset("/articles", get_article_viewset)
        """
        is_factory = (
            callable(viewset)
            and not isinstance(viewset, type)
            and not hasattr(viewset, "list")
            and not hasattr(viewset, "retrieve")
        )

        if is_factory:
            provider = viewset
            allowed_actions = DEFAULT_ACTIONS
            return_type = getattr(viewset, "__annotations__", {}).get("return")
            if return_type is not None and hasattr(return_type, "allowed_actions"):
                allowed_actions = return_type.allowed_actions
        else:
            def provider() -> Any:
                return viewset

            allowed_actions = getattr(viewset, "allowed_actions", DEFAULT_ACTIONS)

        if "list" in allowed_actions:
            async def list_endpoint(request: Request, viewset_instance: Any = Depends(provider)) -> Any:
                return await viewset_instance.list(request)

            self.add_jsonapi_route(
                prefix,
                list_endpoint,
                methods=["GET"],
                name=f"{prefix}_list",
                dependencies=dependencies,
            )

        if "retrieve" in allowed_actions:
            async def retrieve_endpoint(
                request: Request,
                resource_id: str,
                viewset_instance: Any = Depends(provider),
            ) -> Any:
                return await viewset_instance.retrieve(request, resource_id)

            self.add_jsonapi_route(
                f"{prefix}/{{resource_id}}",
                retrieve_endpoint,
                methods=["GET"],
                name=f"{prefix}_retrieve",
                dependencies=dependencies,
            )

    def register_view(
        self,
        path: str,
        view: Callable[..., Any],
        *,
        methods: list[str] | None = None,
        name: str | None = None,
        dependencies: list[Any] | None = None,
    ) -> None:
        """Register a single view function with optional dependencies.

        Args:
            path: URL path for the route (e.g., "/articles")
            view: View function to register. May use FastAPI's Depends().
            methods: HTTP methods for the route (defaults to ["GET"] if not provided)
            name: Route name for OpenAPI documentation
            dependencies: List of FastAPI dependencies to inject
        """
        if methods is None:
            methods = ["GET"]
        self.add_jsonapi_route(path, view, methods=methods, name=name, dependencies=dependencies)

    def add_jsonapi_route(
        self,
        path: str,
        endpoint: Callable[..., Any],
        *,
        methods: list[str],
        name: str | None = None,
        dependencies: list[Any] | None = None,
    ) -> None:
        """Add a route with JSON:API defaults (content type, responses)."""
        self.add_api_route(
            path,
            endpoint,
            methods=methods,
            name=name,
            dependencies=dependencies or None,
            response_class=JSONAPIResponse,
        )
