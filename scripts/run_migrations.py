#!/usr/bin/env python3
"""Apply KitShare database migrations with Logfire error tracking."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from kitshare.config import Settings
from kitshare.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the schema to ``revision`` and log any errors to Logfire."""
    settings = Settings()

    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations", revision=revision)

        # migrations/env.py takes the database URL from Settings
        alembic_cfg = Config("alembic.ini")

        command.upgrade(alembic_cfg, revision)

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # The container must not start against a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
