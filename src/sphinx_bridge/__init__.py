"""
sphinx_bridge – delegate ORM full-text queries to a Sphinx ``searchd`` daemon.

Import path convention::

    from sphinx_bridge.kernel.errors import InvalidOptionError
    from sphinx_bridge.application.search import SearchRegistry, SearchService
    from sphinx_bridge.adapters.sqlalchemy import SqlAlchemySearchRepository
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
