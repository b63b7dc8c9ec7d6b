"""Example FastAPI app paginating a SQLAlchemy query with page links.

Run with:
    uvicorn examples.pagination_example_app:app --reload

Then open:
    http://127.0.0.1:8000/api/v1/authors/1/articles?page=2&sort=title
"""
from __future__ import annotations

from typing import Iterator

from fastapi import APIRouter, Depends, FastAPI
from sqlalchemy import Column, ForeignKey, Integer, String, create_engine, select
from sqlalchemy.orm import Session, declarative_base, relationship, sessionmaker

from fastapi_pagebuilder import PaginationBuilder
from fastapi_pagebuilder.config import PaginationSettings, get_settings
from fastapi_pagebuilder.dependencies import get_pagination_builder, get_request_reader
from fastapi_pagebuilder.logging import setup_logging
from fastapi_pagebuilder.middleware import PaginationErrorMiddleware
from fastapi_pagebuilder.sqlalchemy import SQLAlchemyQuerySource
from fastapi_pagebuilder.starlette import StarletteRequestReader

DATABASE_URL = "sqlite:///./pagination_example.db"

engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

Base = declarative_base()


class Author(Base):
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    articles = relationship("Article", back_populates="author")


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    author_id = Column(Integer, ForeignKey("authors.id"))
    author = relationship("Author", back_populates="articles")


def get_session() -> Iterator[Session]:
    with SessionLocal() as session:
        yield session


def seed_example_data(session: Session) -> None:
    """Insert one author with a few dozen articles if empty."""
    if session.execute(select(Author.id).limit(1)).first() is not None:
        return

    author = Author(name="Jane Doe")
    session.add(author)
    session.flush()
    session.add_all(
        Article(title=f"Article {number:02d}", author_id=author.id)
        for number in range(1, 48)
    )
    session.commit()


app = FastAPI(
    title="FastAPI Pagination Example",
    description="Example API showcasing page links and navigation windows.",
    version="0.1.0",
)
app.add_middleware(PaginationErrorMiddleware)
router = APIRouter(prefix="/api/v1")


@app.on_event("startup")
def on_startup() -> None:
    setup_logging()
    Base.metadata.create_all(engine)
    with SessionLocal() as session:
        seed_example_data(session)


@router.get("/authors/{author_id}/articles", name="author_articles")
def list_author_articles(
    author_id: int,
    session: Session = Depends(get_session),
    reader: StarletteRequestReader = Depends(get_request_reader),
    builder: PaginationBuilder = Depends(get_pagination_builder),
    settings: PaginationSettings = Depends(get_settings),
) -> dict:
    source = SQLAlchemyQuerySource(
        session,
        select(Article).where(Article.author_id == author_id).order_by(Article.id),
    )
    config = builder.paginate_request_query(
        reader,
        source,
        per_page=settings.per_page,
        reference_type=settings.reference_type,
    )
    view = config.view()
    return {
        "data": [{"id": article.id, "title": article.title} for article in source.scalars()],
        "meta": {"page": config.current_page, "pages": config.total_pages},
        "links": {
            "first": view.first.link,
            "prev": view.prev.link if view.prev else None,
            "next": view.next.link if view.next else None,
            "last": view.last.link if view.last else None,
            "pages": [page.model_dump() for page in view.pages],
        },
    }


app.include_router(router)
