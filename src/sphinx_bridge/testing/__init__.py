"""Testing support – fakes for the search daemon client."""
from sphinx_bridge.testing.fakes import FakeSearchClient

__all__ = ["FakeSearchClient"]
