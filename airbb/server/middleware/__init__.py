"""
Middleware modules for the AirBB server.
"""

from .request_monitoring import RequestMonitoringMiddleware

__all__ = ["RequestMonitoringMiddleware"]
