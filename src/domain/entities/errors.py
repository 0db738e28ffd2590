"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class SelectionError(DomainError):
    """Raised when an operation needs a metric that was never selected."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class SourcePatternError(DomainError):
    """Raised when an aggregate source label cannot be parsed."""

    def __init__(self, source: str, details: Optional[Dict[str, Any]] = None):
        self.source = source
        message = (
            f"Source '{source}' does not match "
            "'<aggregate>, every <interval> ... (Aggr: <id>)'"
        )
        super().__init__(message, details)


class DatastoreError(DomainError):
    """Raised when the historical datastore cannot serve a request."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.url = url
        self.status_code = status_code
        super().__init__(message, details)


class DatastoreResponseError(DatastoreError):
    """Raised when the datastore answers with an unexpected payload shape."""

    pass
