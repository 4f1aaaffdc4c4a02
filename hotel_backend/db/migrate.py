"""Create the properties table if needed and verify the store is reachable."""

from __future__ import annotations

import sys

from ..config import Settings
from ..exceptions import StoreUnavailable
from ..utils.logging import configure_logging, get_logger
from .database import Database
from .repo import SQLPropertyRepository

LOGGER = get_logger("db.migrate")


def migrate(database: Database) -> int:
    """Apply the schema and return the current property count."""

    database.create_schema()
    database.ping()
    LOGGER.info("Database connection established")
    count = SQLPropertyRepository(database).count()
    LOGGER.info("Current properties in database: %d", count)
    return count


def main() -> int:
    settings = Settings.from_env()
    configure_logging(level=settings.log_level)
    database = Database(settings.database_url, echo=settings.sql_echo)
    try:
        migrate(database)
    except StoreUnavailable as exc:
        LOGGER.error("Migration failed: %s", exc)
        LOGGER.error("Make sure DATABASE_URL is set correctly and the database is accessible")
        return 1
    finally:
        database.dispose()
    LOGGER.info("Database migration completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
