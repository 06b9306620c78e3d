#!/usr/bin/env python3
"""Bring the roster schema up to date.

Usage:
    python scripts/run_migrations.py [revision]

Upgrades to ``head`` unless a target revision is given. Failures are
reported to Logfire and re-raised so a deploy never starts the API on a
half-migrated database.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from roster.config import Settings
from roster.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the database to ``revision``."""
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

        logfire.info("Database schema is at {revision}", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
