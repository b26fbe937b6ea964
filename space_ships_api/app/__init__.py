"""
Application package initializer.

The API manages a single resource, ships.  Code is split into the
usual layers: ``schemas`` (payloads), ``services`` (filtering,
pagination, validation and rating), ``repositories`` (storage) and
``api/v1/endpoints`` (HTTP binding).
"""

from .main import app  # noqa: F401
