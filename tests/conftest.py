"""Pytest configuration and fixtures for jsonapi_pages tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from jsonapi_pages.config import get_settings
from jsonapi_pages.memory import InMemoryDataLayer
from jsonapi_pages.middleware import ContentNegotiationMiddleware, ErrorHandlerMiddleware
from jsonapi_pages.routers import JSONAPIRouter
from jsonapi_pages.serializers import JSONAPISerializer
from jsonapi_pages.viewsets import JSONAPIViewSet

JSONAPI = "application/vnd.api+json"


class ArticleSerializer(JSONAPISerializer):
    class Meta:
        type_ = "articles"
        fields = ["id", "title", "slug"]


class ArticleViewSet(JSONAPIViewSet):
    serializer_class = ArticleSerializer

    def __init__(self, data_layer) -> None:
        self.data_layer = data_layer


def make_articles(count: int) -> list[dict]:
    return [
        {"id": n, "title": f"Sample article {n}", "slug": f"sample-article-{n}"}
        for n in range(1, count + 1)
    ]


def build_app(viewset: JSONAPIViewSet) -> FastAPI:
    app = FastAPI()
    app.add_middleware(ContentNegotiationMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)
    router = JSONAPIRouter()
    router.register_viewset("/articles", viewset)
    app.include_router(router)
    return app


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so env changes in one test do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def articles():
    """Three sample articles."""
    return make_articles(3)


@pytest.fixture
def client(articles):
    """Client for an app listing the sample articles."""
    viewset = ArticleViewSet(InMemoryDataLayer(articles, resource_type="articles"))
    with TestClient(build_app(viewset)) as test_client:
        yield test_client


@pytest.fixture
def make_client():
    """Return a factory building a client for an arbitrary viewset."""
    clients = []

    def factory(viewset: JSONAPIViewSet) -> TestClient:
        test_client = TestClient(build_app(viewset))
        clients.append(test_client)
        return test_client

    yield factory
    for test_client in clients:
        test_client.close()
