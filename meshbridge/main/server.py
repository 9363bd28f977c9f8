"""
Server Entry Point - Main Layer

Runs the FastAPI application with uvicorn using the configured host/port.
"""

import uvicorn

from meshbridge.main.config import get_settings
from meshbridge.shared import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Main entry point for the HTTP server."""
    settings = get_settings()

    logger.info(
        "Starting meshbridge server",
        host=settings.ge.host,
        port=settings.ge.port,
        application=settings.registry.application,
    )

    uvicorn.run(
        "meshbridge.main.app:app",
        host=settings.ge.host,
        port=settings.ge.port,
        reload=settings.ge.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
