"""Observability – structured logging helpers."""
from sphinx_bridge.observability.logging.factory import JsonLoggerFactory
from sphinx_bridge.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
