#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py           # upgrade to head
    python scripts/run_migrations.py base      # downgrade everything
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    alembic_cfg = Config("alembic.ini")

    try:
        with logfire.span("run_migrations", target=target):
            if target == "base":
                command.downgrade(alembic_cfg, "base")
            else:
                command.upgrade(alembic_cfg, target)

        logfire.info("Database migrations completed", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the deploy fails instead of starting on a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
