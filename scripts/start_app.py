#!/usr/bin/env python3
"""Start the account API, reporting startup failures to Logfire."""

import sys
import logfire
import uvicorn

from spoon.config import Settings
from spoon.util.logging import setup_logging
from spoon.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then hand over to uvicorn."""
    settings = Settings()

    # Logfire first so import-time errors in the app are captured
    configure_logfire(settings)
    setup_logging(settings)

    if settings.environment == "production" and (
        settings.auth.jwt_secret == "CHANGE_ME_IN_PRODUCTION"
    ):
        logfire.error("AUTH__JWT_SECRET is not set; refusing to start")
        return 1

    if not settings.storage.bucket:
        logfire.warn("STORAGE__BUCKET is not set; photo uploads will fail")

    try:
        logfire.info(
            "Starting account API",
            environment=settings.environment,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "spoon.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Account API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
