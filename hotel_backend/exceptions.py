"""Error taxonomy for property operations.

Each error carries the HTTP status the API layer maps it to, so route handlers
never need to inspect error types themselves.
"""

from __future__ import annotations

from typing import List, Optional

from .models.property import FieldError


class PropertyError(Exception):
    status_code = 500
    error = "Internal server error"

    def to_payload(self) -> dict:
        return {"error": self.error}


class ValidationError(PropertyError):
    status_code = 400
    error = "Invalid property data"

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        fields = ", ".join(err.field for err in self.errors)
        super().__init__(f"invalid fields: {fields}")

    def to_payload(self) -> dict:
        return {"error": self.error, "details": [err.model_dump() for err in self.errors]}


class NotFound(PropertyError):
    status_code = 404
    error = "Property not found"

    def __init__(self, property_id: str):
        self.property_id = property_id
        super().__init__(f"property {property_id} not found")


class StoreUnavailable(PropertyError):
    status_code = 500
    error = "Database connection failed"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)

    def to_payload(self) -> dict:
        return {"error": self.error, "details": str(self)}


__all__ = ["PropertyError", "ValidationError", "NotFound", "StoreUnavailable"]
