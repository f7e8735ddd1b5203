"""
Server package exposing the FastAPI app and its factory.
"""

from .app import app, create_app  # noqa: F401
