"""SQLAlchemy adapter – record hydration and per-model search repository."""
from sphinx_bridge.adapters.sqlalchemy.hydrator import SqlAlchemyHydrator
from sphinx_bridge.adapters.sqlalchemy.repository import SqlAlchemySearchRepository

__all__ = ["SqlAlchemyHydrator", "SqlAlchemySearchRepository"]
