"""Renderers turning a ``QueryResult`` into markdown and JSON views."""
