"""
Middleware for the verse card API.
"""

from .security import RequestLoggingMiddleware, SecurityHeadersMiddleware, setup_security

__all__ = ["RequestLoggingMiddleware", "SecurityHeadersMiddleware", "setup_security"]
