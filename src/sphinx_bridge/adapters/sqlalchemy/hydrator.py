"""SQLAlchemy adapter – SqlAlchemyHydrator."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sphinx_bridge.kernel.errors import HydrationError

TModel = TypeVar("TModel")


class SqlAlchemyHydrator(Generic[TModel]):
    """Load *model* rows whose identifier is in the matched id list.

    Extra ``WHERE`` *criteria* and loader *load_options* (``selectinload``
    and friends) are applied to the same statement. Rows filtered out by the
    criteria are simply absent from the result.
    """

    def __init__(
        self,
        session: Session,
        model: type[TModel],
        *criteria: Any,
        load_options: Sequence[Any] = (),
        id_attr: str = "id",
    ) -> None:
        self._session = session
        self._model = model
        self._criteria = criteria
        self._load_options = tuple(load_options)
        self._id_column = getattr(model, id_attr)

    def __call__(self, ids: list[Any]) -> list[TModel]:
        if not ids:
            return []
        stmt = select(self._model).where(self._id_column.in_(ids), *self._criteria)
        if self._load_options:
            stmt = stmt.options(*self._load_options)
        try:
            return list(self._session.scalars(stmt).unique().all())
        except SQLAlchemyError as exc:
            raise HydrationError(
                f"Failed to load {self._model.__name__} rows: {exc}",
                identifiers=list(ids),
                cause=exc,
            ) from exc


__all__ = ["SqlAlchemyHydrator"]
