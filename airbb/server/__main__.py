"""
Run the AirBB server with uvicorn.

Forwarded headers from a reverse proxy are trusted so redirects and the
session cookie use the client's scheme.
"""

import uvicorn

from .core.config import settings


def main() -> None:
    uvicorn.run(
        "airbb.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
        proxy_headers=True,
        forwarded_allow_ips="*",
    )


if __name__ == "__main__":
    main()
