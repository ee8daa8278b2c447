from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import requests

from app.crm.modules.customers.errors import CustomersApiError
from app.crm.modules.customers.models import CustomerDraft

logger = logging.getLogger(__name__)


@dataclass
class CustomersApiClient:
    """Customers REST API. The web app keeps one instance (and its session) for the process lifetime."""

    base_url: str
    token: str = ""
    timeout_seconds: float = 10.0
    session: requests.Session = field(default_factory=requests.Session)

    def close(self) -> None:
        self.session.close()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def request_json(self, method: str, path: str, *, json: dict[str, Any] | None = None) -> Any:
        url = self.base_url.rstrip("/") + path
        logger.debug("customers api %s %s", method, url)
        try:
            r = self.session.request(method, url, json=json, headers=self._headers(), timeout=self.timeout_seconds)
        except requests.RequestException as e:
            raise CustomersApiError(str(e) or e.__class__.__name__) from e

        if r.status_code >= 400:
            try:
                body = r.json()
            except ValueError:
                body = None
            raise CustomersApiError(
                f"Request failed with status code {r.status_code}",
                status_code=r.status_code,
                payload=body if isinstance(body, dict) else None,
            )

        if not r.content:
            return {}
        try:
            return r.json()
        except ValueError as e:
            raise CustomersApiError(f"Invalid JSON from customers API ({path})", status_code=r.status_code) from e

    def create_customer(self, draft: CustomerDraft) -> dict[str, Any]:
        j = self.request_json("POST", "/customers", json=draft.to_payload())
        return j if isinstance(j, dict) else {}

    def list_customers(self) -> list[dict[str, Any]]:
        j = self.request_json("GET", "/customers")
        if isinstance(j, dict):
            j = j.get("data") or []
        return [row for row in j if isinstance(row, dict)] if isinstance(j, list) else []


def customers_api_from_config(config: dict) -> CustomersApiClient:
    return CustomersApiClient(
        base_url=(config.get("CUSTOMERS_API_URL") or "").strip(),
        token=(config.get("CUSTOMERS_API_TOKEN") or "").strip(),
        timeout_seconds=float(config.get("CUSTOMERS_API_TIMEOUT") or 10),
    )
