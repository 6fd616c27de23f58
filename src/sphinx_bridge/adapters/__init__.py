"""Adapters – persistence integrations."""
