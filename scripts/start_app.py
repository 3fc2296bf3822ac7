#!/usr/bin/env python3
"""Start the Toolhub API, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from toolhub.config import Settings
from toolhub.util.logging import setup_logging
from toolhub.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    # Configured before the app module is imported so startup errors are traced
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Toolhub API",
            host=settings.host,
            port=settings.port,
            environment=settings.environment,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "toolhub.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            reload=settings.environment == "development" and settings.debug,
        )
        return 0

    except Exception as e:
        logfire.error(
            "Toolhub API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
