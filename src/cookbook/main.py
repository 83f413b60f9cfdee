"""Application entry point.

Usage:
    # Development with auto-reload
    uvicorn cookbook.main:app --reload

    # Or via the console script
    cookbook-serve
"""

from __future__ import annotations

import uvicorn

from cookbook.core.config import get_settings
from cookbook.factory import create_app


app = create_app()


def run() -> None:
    """Run the server with host and port from settings."""
    settings = get_settings()
    uvicorn.run(
        "cookbook.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    run()
