"""Custom middleware components."""

from cookbook.core.middleware.logging import LoggingMiddleware
from cookbook.core.middleware.request_id import RequestIDMiddleware


__all__ = [
    "LoggingMiddleware",
    "RequestIDMiddleware",
]
