"""Managed data service boundary: create-only client.

The managed service owns record identity, timestamps, consistency,
authorization, and querying.  This side only ever issues creates: one
``create<Entity>`` GraphQL mutation per submission, no retries.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

_CREATE_MUTATION = """\
mutation Create{entity}($input: Create{entity}Input!) {{
  create{entity}(input: $input) {{
    id
  }}
}}"""


class DataServiceError(Exception):
    """A create request failed at the transport or service level."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DataService(Protocol):
    """The one operation consumed from the managed data service."""

    def create(self, entity_name: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Persist a new record and return it (at least its ``id``).

        Raises:
            DataServiceError: If the record could not be created.
        """
        ...


def build_create_request(entity_name: str, payload: dict[str, Any]) -> dict[str, Any]:
    """Build the GraphQL request body for creating one *entity_name* record."""
    return {
        "query": _CREATE_MUTATION.format(entity=entity_name),
        "operationName": f"Create{entity_name}",
        "variables": {"input": payload},
    }


class GraphQLDataService:
    """httpx client for the managed GraphQL endpoint.

    Auth headers are fixed at construction; the client selector builds a
    new instance whenever the credential mode changes.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        headers: dict[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._headers = {"Content-Type": "application/json", **(headers or {})}
        self._timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def create(self, entity_name: str, payload: dict[str, Any]) -> dict[str, Any]:
        body = build_create_request(entity_name, payload)
        try:
            with httpx.Client(
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = client.post(self._endpoint, json=body)
        except httpx.HTTPError as exc:
            logger.warning("Create %s failed: %s", entity_name, exc)
            raise DataServiceError(f"Request to data service failed: {exc}") from exc

        if response.is_error:
            logger.warning("Create %s rejected with HTTP %s", entity_name, response.status_code)
            msg = f"Data service returned HTTP {response.status_code}"
            raise DataServiceError(msg, status_code=response.status_code)

        try:
            document = response.json()
        except ValueError as exc:
            msg = "Data service returned a non-JSON response"
            raise DataServiceError(msg, status_code=response.status_code) from exc

        if not isinstance(document, dict):
            msg = "Data service returned an unexpected response body"
            raise DataServiceError(msg, status_code=response.status_code)

        errors = document.get("errors") or []
        if errors:
            messages = "; ".join(
                str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors
            )
            logger.warning("Create %s returned GraphQL errors: %s", entity_name, messages)
            raise DataServiceError(messages, status_code=response.status_code)

        data = document.get("data")
        record = data.get(f"create{entity_name}") if isinstance(data, dict) else None
        if not isinstance(record, dict):
            msg = f"Data service returned no record for create{entity_name}"
            raise DataServiceError(msg, status_code=response.status_code)
        logger.debug("Created %s %s", entity_name, record.get("id"))
        return record
