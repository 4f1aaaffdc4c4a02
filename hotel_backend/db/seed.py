"""Replace the contents of the properties table with the sample hotels."""

from __future__ import annotations

import sys
from typing import List

import pandas as pd

from ..config import Settings
from ..exceptions import PropertyError
from ..models.property import Property
from ..utils.logging import configure_logging, get_logger
from .database import Database
from .repo import SQLPropertyRepository
from .sample_data import SAMPLE_PROPERTIES

LOGGER = get_logger("db.seed")

SUMMARY_COLUMNS = ["name", "city", "adr", "occupancy", "revpar", "rooms"]


def seed(repository: SQLPropertyRepository) -> List[Property]:
    LOGGER.info("Clearing existing properties")
    repository.clear()

    created: List[Property] = []
    for row in SAMPLE_PROPERTIES:
        prop = repository.create({**row, "status": "ACTIVE"})
        LOGGER.info("seeded_property id=%s name=%s", prop.id, prop.name)
        created.append(prop)

    LOGGER.info("Seed complete count=%d", len(created))
    return created


def summary_table(properties: List[Property]) -> str:
    df = pd.DataFrame([prop.model_dump() for prop in properties], columns=SUMMARY_COLUMNS)
    return df.to_string(index=False)


def main() -> int:
    settings = Settings.from_env()
    configure_logging(level=settings.log_level)
    database = Database(settings.database_url, echo=settings.sql_echo)
    try:
        database.create_schema()
        repository = SQLPropertyRepository(database)
        seed(repository)
        LOGGER.info("Property summary\n%s", summary_table(repository.list()))
    except PropertyError as exc:
        LOGGER.error("Seeding failed: %s", exc)
        return 1
    finally:
        database.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
