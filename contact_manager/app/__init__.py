"""
Application package initializer.

The application is split into ``core`` (configuration, logging, the
contact store, sessions and templates), ``schemas`` (pydantic models),
``services`` (validation and contact operations) and ``api`` (the
routes that render HTML pages).
"""

from .main import app  # noqa: F401
