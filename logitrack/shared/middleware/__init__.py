# logitrack/shared/middleware/__init__.py

from logitrack.shared.middleware.exception_middleware import AsyncExceptionMiddleware
from logitrack.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
]
