"""Example FastAPI app serving a paginated JSON:API articles collection.

Run with:
    uvicorn examples.jsonapi_example_app:app --reload

Then browse e.g. /api/v1/articles?page[number]=2&page[size]=5
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

from fastapi import Depends, FastAPI
from sqlalchemy import Column, DateTime, Integer, String, Text, select
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from jsonapi_pages.config import get_settings
from jsonapi_pages.log import configure_logging
from jsonapi_pages.middleware import ContentNegotiationMiddleware, ErrorHandlerMiddleware
from jsonapi_pages.routers import JSONAPIRouter
from jsonapi_pages.serializers import JSONAPISerializer
from jsonapi_pages.sqlalchemy import SQLAlchemyDataLayer
from jsonapi_pages.viewsets import JSONAPIViewSet

DATABASE_URL = "sqlite+aiosqlite:///./jsonapi_example.db"

settings = get_settings()
configure_logging(settings.log_level, settings.log_json)

engine = create_async_engine(DATABASE_URL)
async_session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    slug = Column(String, nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), nullable=False)


class ArticleSerializer(JSONAPISerializer):
    class Meta:
        type_ = "articles"
        model = Article
        fields = ["id", "title", "content", "slug", "created_at"]


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        yield session


async def seed_example_data(session: AsyncSession) -> None:
    """Insert sample articles if the table is empty."""
    result = await session.execute(select(Article.id).limit(1))
    if result.first() is not None:
        return

    now = datetime.now(timezone.utc)
    session.add_all(
        Article(
            title=f"Sample article {n}",
            content="Sample content",
            slug=f"sample-article-{n}",
            created_at=now - timedelta(hours=n),
        )
        for n in range(1, 43)
    )
    await session.commit()


class ArticleViewSet(JSONAPIViewSet):
    serializer_class = ArticleSerializer

    def __init__(self, session: AsyncSession) -> None:
        # Most recent first, id as tie-breaker.
        self.data_layer = SQLAlchemyDataLayer(
            model=Article,
            session=session,
            order_by=[Article.created_at.desc(), Article.id.desc()],
        )


app = FastAPI(
    title=settings.app_name,
    description="Example API showcasing JSON:API page-number pagination.",
    version="0.1.0",
)
app.add_middleware(ContentNegotiationMiddleware)
app.add_middleware(ErrorHandlerMiddleware)
router = JSONAPIRouter(prefix="/api/v1")


def get_article_viewset(session: AsyncSession = Depends(get_session)) -> ArticleViewSet:
    """Dependency factory for ArticleViewSet."""
    return ArticleViewSet(session)


@app.on_event("startup")
async def on_startup() -> None:
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    async with async_session() as session:
        await seed_example_data(session)


router.register_viewset("/articles", get_article_viewset)

app.include_router(router)
