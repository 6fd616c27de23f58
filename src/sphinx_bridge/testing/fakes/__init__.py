"""Testing fakes – in-memory doubles for external collaborators."""
from sphinx_bridge.testing.fakes.search_client import FakeSearchClient

__all__ = ["FakeSearchClient"]
