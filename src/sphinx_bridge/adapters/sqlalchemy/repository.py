"""SQLAlchemy adapter – SqlAlchemySearchRepository."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

from sphinx_bridge.adapters.sqlalchemy.hydrator import SqlAlchemyHydrator
from sphinx_bridge.application.search import AnnotatedResultSet, SearchResponse, SearchService

TModel = TypeVar("TModel")


class SqlAlchemySearchRepository(Generic[TModel]):
    """Full-text search over one registered ORM model.

    Usage::

        repo = SqlAlchemySearchRepository(session, Article, service)
        page = repo.search("sphinx", {"page": 2, "mode": "any"}, Article.published.is_(True))
    """

    def __init__(
        self,
        session: Session,
        model: type[TModel],
        service: SearchService,
    ) -> None:
        self._session = session
        self._model = model
        self._service = service

    def ask(self, query: str, sphinx: Mapping[str, Any] | None = None) -> SearchResponse:
        return self._service.ask(self._model, query, sphinx)

    def search(
        self,
        query: str,
        sphinx: Mapping[str, Any] | None = None,
        *criteria: Any,
        load_options: Sequence[Any] = (),
    ) -> AnnotatedResultSet[TModel]:
        hydrator = SqlAlchemyHydrator(
            self._session,
            self._model,
            *criteria,
            load_options=load_options,
        )
        return self._service.find(self._model, query, hydrator, sphinx)


__all__ = ["SqlAlchemySearchRepository"]
