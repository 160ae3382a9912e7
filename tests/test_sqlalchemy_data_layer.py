"""Tests for the SQLAlchemy collection provider."""

from datetime import datetime, timedelta

import pytest
from sqlalchemy import Column, DateTime, Integer, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from jsonapi_pages.core.errors import ResourceNotFoundError
from jsonapi_pages.pagination import PageNumberPagination
from jsonapi_pages.sqlalchemy import SQLAlchemyDataLayer

Base = declarative_base()


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False)


@pytest.fixture
def db_session():
    """In-memory SQLite session seeded with seven articles."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = SessionLocal()
    start = datetime(2024, 1, 1)
    session.add_all(
        Article(id=n, title=f"Article {n}", created_at=start + timedelta(days=n % 4))
        for n in range(1, 8)
    )
    session.commit()
    try:
        yield session
    finally:
        session.close()


@pytest.mark.asyncio
async def test_count_and_slice_by_primary_key(db_session):
    data_layer = SQLAlchemyDataLayer(model=Article, session=db_session)

    assert await data_layer.count() == 7
    assert [a.id for a in await data_layer.slice(0, 3)] == [1, 2, 3]
    assert [a.id for a in await data_layer.slice(6, 3)] == [7]
    assert await data_layer.slice(10, 3) == []


@pytest.mark.asyncio
async def test_custom_ordering(db_session):
    data_layer = SQLAlchemyDataLayer(
        model=Article,
        session=db_session,
        order_by=[Article.created_at.desc(), Article.id.desc()],
    )

    assert [a.id for a in await data_layer.slice(0, 7)] == [7, 3, 6, 2, 5, 1, 4]


@pytest.mark.asyncio
async def test_retrieve(db_session):
    data_layer = SQLAlchemyDataLayer(model=Article, session=db_session)

    assert (await data_layer.retrieve(resource_id="3")).title == "Article 3"
    with pytest.raises(ResourceNotFoundError):
        await data_layer.retrieve(resource_id="99")
    with pytest.raises(ResourceNotFoundError):
        await data_layer.retrieve(resource_id="abc")


@pytest.mark.asyncio
async def test_paginating_a_table(db_session):
    data_layer = SQLAlchemyDataLayer(model=Article, session=db_session)

    page = await PageNumberPagination().paginate(
        data_layer,
        {"number": "3", "size": "3"},
        base_url="http://example.com/articles?sort=id",
    )

    assert [a.id for a in page.items] == [7]
    assert page.meta == {"total": 7, "pages": 3}
    assert "next" not in page.links
    assert page.links["prev"] == "http://example.com/articles?sort=id&page[number]=2&page[size]=3"


@pytest.mark.asyncio
async def test_slice_beyond_sql_integer_range(db_session):
    data_layer = SQLAlchemyDataLayer(model=Article, session=db_session)

    assert await data_layer.slice(10**19, 20) == []
    assert await data_layer.slice(2**63 - 1, 20) == []
    assert [a.id for a in await data_layer.slice(5, 10**19)] == [6, 7]


@pytest.mark.asyncio
async def test_paginating_to_an_astronomical_page(db_session):
    data_layer = SQLAlchemyDataLayer(model=Article, session=db_session)

    page = await PageNumberPagination().paginate(
        data_layer,
        {"number": str(10**19), "size": "20"},
        base_url="http://example.com/articles",
    )

    assert page.items == []
    assert page.meta == {"total": 7, "pages": 1}
    assert "next" not in page.links
