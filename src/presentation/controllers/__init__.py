"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers are responsible for
input validation, error handling, and mapping between API DTOs
and application layer use cases.
"""

from .datasource_controller import router as datasource_router

__all__ = ["datasource_router"]
