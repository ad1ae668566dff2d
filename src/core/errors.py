from __future__ import annotations


class CollectorError(Exception):
    """Base error for the content collector."""


class ValidationError(CollectorError):
    """Raised when configuration or tool input is invalid."""


class QueryError(CollectorError):
    """Raised when a GitHub query (GraphQL or REST) fails or returns an unusable payload."""
