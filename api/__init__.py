"""
Turnstile web package.

Provides the FastAPI application factory for the Turnstile members site.
"""

from .app import create_app

__all__ = ["create_app"]
