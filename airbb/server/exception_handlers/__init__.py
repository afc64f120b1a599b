"""
Exception handlers for the AirBB server.

This package contains custom exception handlers for different error types
and a setup function to register them with the FastAPI application.
"""

from .global_handler import airbb_error_handler, global_exception_handler, setup_exception_handlers

__all__ = ["airbb_error_handler", "global_exception_handler", "setup_exception_handlers"]
