"""Repository abstraction over the property store."""

from __future__ import annotations

import abc
from datetime import timezone
from typing import Any, List, Mapping, Union

from sqlalchemy import delete as sa_delete
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import NotFound, StoreUnavailable
from ..models.property import DESCRIPTIVE_FIELDS, MUTABLE_FIELDS, REQUIRED_FIELDS, Property, PropertyInput
from ..utils.logging import get_logger
from ..validation import validate
from .database import Database
from .orm import PropertyRow

LOGGER = get_logger("db.repo")

Fields = Union[PropertyInput, Mapping[str, Any]]


class PropertyRepository(abc.ABC):
    """Contract the API, scripts and dashboard depend on."""

    @abc.abstractmethod
    def list(self) -> List[Property]:
        """Every property, newest first."""

    @abc.abstractmethod
    def get(self, property_id: str) -> Property:
        ...

    @abc.abstractmethod
    def create(self, fields: Fields) -> Property:
        ...

    @abc.abstractmethod
    def update(self, property_id: str, fields: Fields) -> Property:
        """Replace the required fields; descriptive fields only when supplied."""

    @abc.abstractmethod
    def delete(self, property_id: str) -> None:
        ...


def _coerce(fields: Fields) -> PropertyInput:
    if isinstance(fields, PropertyInput):
        return fields
    return validate(fields).unwrap()


def _to_model(row: PropertyRow) -> Property:
    values = {name: getattr(row, name) for name in MUTABLE_FIELDS}
    values["amenities"] = list(values["amenities"] or [])
    created_at = row.created_at
    if created_at.tzinfo is None:
        # SQLite drops the offset; stored values are always UTC
        created_at = created_at.replace(tzinfo=timezone.utc)
    return Property(id=row.id, created_at=created_at, **values)


class SQLPropertyRepository(PropertyRepository):
    def __init__(self, database: Database) -> None:
        self.database = database

    def list(self) -> List[Property]:
        try:
            with self.database.session() as session:
                rows = session.scalars(select(PropertyRow).order_by(PropertyRow.created_at.desc())).all()
                items = [_to_model(row) for row in rows]
        except SQLAlchemyError as exc:
            LOGGER.error("list_failed error=%s", exc)
            raise StoreUnavailable(f"Failed to list properties: {exc}", exc) from exc
        LOGGER.debug("list_properties count=%d", len(items))
        return items

    def get(self, property_id: str) -> Property:
        try:
            with self.database.session() as session:
                row = session.get(PropertyRow, property_id)
                if row is None:
                    raise NotFound(property_id)
                return _to_model(row)
        except SQLAlchemyError as exc:
            raise StoreUnavailable(f"Failed to fetch property {property_id}: {exc}", exc) from exc

    def create(self, fields: Fields) -> Property:
        data = _coerce(fields)
        try:
            with self.database.session() as session:
                row = PropertyRow(**data.model_dump())
                session.add(row)
                session.flush()
                created = _to_model(row)
        except SQLAlchemyError as exc:
            LOGGER.error("create_failed name=%s error=%s", data.name, exc)
            raise StoreUnavailable(f"Failed to create property: {exc}", exc) from exc
        LOGGER.info("property_created id=%s name=%s", created.id, created.name)
        return created

    def update(self, property_id: str, fields: Fields) -> Property:
        data = _coerce(fields)
        try:
            with self.database.session() as session:
                row = session.get(PropertyRow, property_id)
                if row is None:
                    raise NotFound(property_id)
                values = data.model_dump()
                for name in REQUIRED_FIELDS:
                    setattr(row, name, values[name])
                # descriptive fields change only when the body names them
                for name in data.model_dump(exclude_unset=True):
                    if name in DESCRIPTIVE_FIELDS:
                        setattr(row, name, values[name])
                session.flush()
                updated = _to_model(row)
        except SQLAlchemyError as exc:
            LOGGER.error("update_failed id=%s error=%s", property_id, exc)
            raise StoreUnavailable(f"Failed to update property {property_id}: {exc}", exc) from exc
        LOGGER.info("property_updated id=%s", property_id)
        return updated

    def delete(self, property_id: str) -> None:
        try:
            with self.database.session() as session:
                row = session.get(PropertyRow, property_id)
                if row is None:
                    raise NotFound(property_id)
                session.delete(row)
        except SQLAlchemyError as exc:
            LOGGER.error("delete_failed id=%s error=%s", property_id, exc)
            raise StoreUnavailable(f"Failed to delete property {property_id}: {exc}", exc) from exc
        LOGGER.info("property_deleted id=%s", property_id)

    # ------------------------------------------------------------------
    # Maintenance helpers used by the seed and migrate scripts
    def count(self) -> int:
        try:
            with self.database.session() as session:
                return int(session.scalar(select(func.count()).select_from(PropertyRow)) or 0)
        except SQLAlchemyError as exc:
            raise StoreUnavailable(f"Failed to count properties: {exc}", exc) from exc

    def clear(self) -> int:
        try:
            with self.database.session() as session:
                result = session.execute(sa_delete(PropertyRow))
                removed = result.rowcount or 0
        except SQLAlchemyError as exc:
            raise StoreUnavailable(f"Failed to clear properties: {exc}", exc) from exc
        LOGGER.info("properties_cleared removed=%d", removed)
        return removed


__all__ = ["PropertyRepository", "SQLPropertyRepository"]
