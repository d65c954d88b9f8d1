#!/usr/bin/env python3
"""Apply alembic migrations to the configured database.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c2a9d7b40

Failures are reported to Logfire before the process exits non-zero, so a
deploy never starts the API against a half-migrated schema.
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from shareport.config import Settings
from shareport.util.logging import setup_logging
from shareport.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    """Upgrade the schema to the requested revision (default ``head``)."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option("script_location", str(ALEMBIC_INI.parent / "migrations"))

    with logfire.span("run_migrations", target=target):
        try:
            command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
