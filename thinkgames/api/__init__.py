"""
API Layer - HTTP interface for orchestrators.

The service layer is framework-agnostic; create_app() wraps it in FastAPI.
"""

from .service import APIService
from .app import create_app

__all__ = ["APIService", "create_app"]
