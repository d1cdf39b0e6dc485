"""Production start: apply migrations (retrying while the database comes up), then serve.

Usage:
    PYTHONPATH=backend/src python backend/scripts/start.py
    PYTHONPATH=backend/src python backend/scripts/start.py --port 8080
"""

import argparse
import logging
import os
import sys
import time
from collections.abc import Callable
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy.exc import OperationalError

from core.logging import configure_logging

logger = logging.getLogger("start")

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"
MAX_ATTEMPTS = 5
RETRY_DELAY_SECONDS = 5.0


def is_connection_refused(exc: BaseException) -> bool:
    """True when the error chain says the database refused the connection."""
    current: BaseException | None = exc
    while current is not None:
        if isinstance(current, ConnectionRefusedError) or "refused" in str(current).lower():
            return True
        current = current.__cause__ or current.__context__
    return False


def run_migrations(
    attempts: int = MAX_ATTEMPTS,
    delay: float = RETRY_DELAY_SECONDS,
    upgrade: Callable[[], None] | None = None,
) -> None:
    """
    Run ``alembic upgrade head``, retrying up to ``attempts`` times.

    Raises:
        SystemExit: If every attempt fails. Serving without the schema is not an option.
    """
    upgrade = upgrade or (lambda: command.upgrade(Config(str(ALEMBIC_INI)), "head"))
    for attempt in range(1, attempts + 1):
        try:
            upgrade()
        except (OperationalError, OSError) as e:
            refused = is_connection_refused(e)
            if attempt == attempts:
                logger.error("Migration failed after %s attempts: %s", attempts, e)
                if refused:
                    logger.error(
                        "Database refused the connection. Check that DATABASE_URL points "
                        "at an address reachable from this container (use the private URL).",
                    )
                raise SystemExit(1) from e
            logger.warning(
                "Migration attempt %s/%s failed. Retrying in %ss...", attempt, attempts, delay,
            )
            if refused:
                logger.warning("Connection refused: the database is not reachable yet.")
            time.sleep(delay)
        else:
            logger.info("Migrations applied")
            return


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Migrate the database and start the API.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")))
    parser.add_argument(
        "--skip-migrations", action="store_true",
        help="Start the server without running alembic upgrade",
    )
    args = parser.parse_args()

    configure_logging(os.getenv("LOG_LEVEL", "INFO"))
    if not args.skip_migrations:
        run_migrations()

    os.execvp(
        sys.executable,
        [
            sys.executable, "-m", "uvicorn", "api.main:app",
            "--host", args.host, "--port", str(args.port),
        ],
    )


if __name__ == "__main__":
    main()
