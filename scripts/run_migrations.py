#!/usr/bin/env python3
"""Apply Alembic migrations for the account schema."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from spoon.config import Settings
from spoon.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the database to ``revision``, logging the outcome to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    alembic_cfg = Config("alembic.ini")
    # migrations/env.py reads the URL from Settings; keep the ini in sync for tooling
    alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(alembic_cfg, revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the container doesn't start with a broken schema
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
