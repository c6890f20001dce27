from .logging import LoggingMiddleware, logging_middleware

__all__ = ["LoggingMiddleware", "logging_middleware"]
