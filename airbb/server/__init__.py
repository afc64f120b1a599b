"""
AirBB Server Package.

This package contains the web server implementation for the AirBB booking service.
It includes the API definition, configuration, session state and exception handling.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Server configuration and constants.
    exception_handlers: Mapping of booking errors and unhandled exceptions to HTTP responses.
    middleware: Request timing and monitoring.
    services: Session state and booking workflows used by the routers.
"""
