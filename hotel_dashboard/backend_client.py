"""Helper client used by the Streamlit app to talk to the property API."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import requests
from requests import Response

from hotel_backend.config import Settings
from hotel_backend.exceptions import StoreUnavailable
from hotel_backend.models.property import FieldError, Property
from hotel_backend.services.data_source import LiveDataSource, PropertySnapshot, resolve_properties
from hotel_backend.utils.logging import get_logger

LOGGER = get_logger("dashboard.client")


class ApiError(Exception):
    """A write the API refused or could not complete."""

    def __init__(self, message: str, status_code: Optional[int] = None, errors: Optional[List[FieldError]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []

    def describe(self) -> str:
        if not self.errors:
            return str(self)
        fields = "; ".join(f"{err.field}: {err.message}" for err in self.errors)
        return f"{self} ({fields})"


class BackendClient:
    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None, timeout: float = 10) -> None:
        self.base_url = (base_url or Settings.from_env().api_base_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def ping(self) -> bool:
        try:
            resp = self.session.get(f"{self.base_url}/api/health", timeout=2)
            return resp.status_code == 200
        except requests.RequestException:
            return False

    # ------------------------------------------------------------------
    # Reads
    def list_properties(self) -> List[Property]:
        try:
            resp = self.session.get(f"{self.base_url}/api/properties", timeout=self.timeout)
        except requests.RequestException as exc:
            raise StoreUnavailable(f"API unreachable: {exc}", exc) from exc
        if resp.status_code != 200:
            raise StoreUnavailable(f"Failed to fetch properties: {self._error_message(resp)}")
        return [Property.model_validate(item) for item in resp.json()]

    def load_snapshot(self) -> PropertySnapshot:
        return resolve_properties(LiveDataSource(self.list_properties))

    # ------------------------------------------------------------------
    # Writes
    def create_property(self, fields: Mapping[str, Any]) -> Property:
        resp = self._send("post", "/api/properties", json=dict(fields))
        return Property.model_validate(resp.json())

    def update_property(self, property_id: str, fields: Mapping[str, Any]) -> Property:
        resp = self._send("put", f"/api/properties/{property_id}", json=dict(fields))
        return Property.model_validate(resp.json())

    def delete_property(self, property_id: str) -> str:
        resp = self._send("delete", f"/api/properties/{property_id}")
        return resp.json().get("message", "Property deleted")

    def _send(self, method: str, path: str, **kwargs) -> Response:
        try:
            resp = self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            LOGGER.warning("write_failed method=%s path=%s error=%s", method, path, exc)
            raise ApiError(f"API unreachable: {exc}") from exc
        if resp.status_code >= 400:
            payload = self._json(resp)
            details = payload.get("details")
            errors = [FieldError.model_validate(item) for item in details] if isinstance(details, list) else []
            LOGGER.warning("write_rejected method=%s path=%s status=%d", method, path, resp.status_code)
            raise ApiError(self._error_message(resp), status_code=resp.status_code, errors=errors)
        return resp

    @staticmethod
    def _json(resp: Response) -> Dict[str, Any]:
        try:
            data = resp.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    def _error_message(self, resp: Response) -> str:
        payload = self._json(resp)
        message = payload.get("error") or f"HTTP {resp.status_code}"
        details = payload.get("details")
        if isinstance(details, str) and details:
            return f"{message}: {details}"
        return message
