"""
Core utilities and configuration for AirBB.

This package provides core functionality including logging configuration,
monitoring, the database layer and booking domain rules.
"""

from airbb.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
