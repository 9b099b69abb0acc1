"""Middleware package for the dashboard API."""
from .logging_middleware import RequestLoggingMiddleware
from .error_handler import register_error_handlers

__all__ = ["RequestLoggingMiddleware", "register_error_handlers"]
