#!/usr/bin/env python3
"""Apply readproof schema migrations with Logfire error tracking."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from readproof.config import Settings
from readproof.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the comments/votes/read_receipts schema to a revision."""
    settings = Settings()

    configure_logfire(settings)

    try:
        logfire.info(
            "Applying schema migrations",
            revision=revision,
            environment=settings.environment,
        )

        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, revision)

        logfire.info("Schema migrations applied", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Schema migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the deploy stops instead of serving a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
