"""Middleware module for the pre-trip inspection API."""

from .logging import CORRELATION_HEADER, RequestResponseLoggingMiddleware

__all__ = [
    "CORRELATION_HEADER",
    "RequestResponseLoggingMiddleware"
]
