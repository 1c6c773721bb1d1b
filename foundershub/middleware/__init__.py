"""HTTP middleware."""
from foundershub.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
