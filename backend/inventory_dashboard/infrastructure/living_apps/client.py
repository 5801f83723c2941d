"""Living Apps REST client — implements the RecordStore interface.

Talks to ``{base_url}/apps/{collection_id}/records[/{id}]`` using httpx.
The session identity comes from an injected CredentialProvider and is
sent as a Cookie header; no explicit authentication handshake happens.
"""

import logging
from typing import Any

import httpx

from inventory_dashboard.application.interfaces import CredentialProvider, RecordStore
from inventory_dashboard.domain.entities import Record
from inventory_dashboard.domain.exceptions import RemoteStoreError
from inventory_dashboard.infrastructure.living_apps.credentials import AnonymousCredentials
from inventory_dashboard.infrastructure.living_apps.urls import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)


class LivingAppsClient(RecordStore):
    """Infrastructure adapter — connects to the Living Apps record API.

    Accepts an injected ``httpx.AsyncClient`` so a single connection pool
    can be shared for the lifetime of the application (and so tests can
    plug in an ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        credentials: CredentialProvider | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._credentials = credentials or AnonymousCredentials()
        self._http_client = http_client
        self._timeout = timeout

    def _get_headers(self) -> dict[str, str]:
        """Standard headers: JSON content type plus the session cookie."""
        headers = {"Content-Type": "application/json"}
        cookies = self._credentials.cookies()
        if cookies:
            headers["Cookie"] = "; ".join(f"{k}={v}" for k, v in cookies.items())
        return headers

    def _records_path(self, collection_id: str, record_id: str | None = None) -> str:
        path = f"{self._base_url}/apps/{collection_id}/records"
        if record_id is not None:
            path = f"{path}/{record_id}"
        return path

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _call(
        self, method: str, url: str, payload: dict[str, Any] | None = None
    ) -> httpx.Response:
        """Issue one request; every failure surfaces as RemoteStoreError."""
        client = await self._get_client()
        should_close = self._http_client is None

        logger.debug("%s %s", method, url)
        try:
            response = await client.request(
                method,
                url,
                headers=self._get_headers(),
                json=payload,
            )
        except httpx.HTTPError as e:
            raise RemoteStoreError(f"{type(e).__name__}: {e}") from e
        finally:
            if should_close:
                await client.aclose()

        if not response.is_success:
            raise RemoteStoreError(response.text)
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """Decode a JSON body; an empty body decodes to None."""
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as e:
            raise RemoteStoreError(response.text) from e

    async def list(self, collection_id: str) -> list[Record]:
        response = await self._call("GET", self._records_path(collection_id))
        data = self._decode(response) or {}
        if not isinstance(data, dict):
            raise RemoteStoreError(response.text)
        return [
            Record.from_payload(record_id, bag or {})
            for record_id, bag in data.items()
        ]

    async def get(self, collection_id: str, record_id: str) -> Record:
        response = await self._call(
            "GET", self._records_path(collection_id, record_id)
        )
        data = self._decode(response)
        if not isinstance(data, dict):
            raise RemoteStoreError(response.text)
        # The single-record shape names its id key "id"
        return Record.from_payload(str(data.get("id", record_id)), data)

    async def create(self, collection_id: str, fields: dict[str, Any]) -> Any:
        response = await self._call(
            "POST", self._records_path(collection_id), {"fields": fields}
        )
        return self._decode(response)

    async def update(
        self, collection_id: str, record_id: str, fields: dict[str, Any]
    ) -> Any:
        response = await self._call(
            "PATCH", self._records_path(collection_id, record_id), {"fields": fields}
        )
        return self._decode(response)

    async def delete(self, collection_id: str, record_id: str) -> bool:
        await self._call("DELETE", self._records_path(collection_id, record_id))
        return True

    async def aclose(self) -> None:
        """Close the injected HTTP client, if any."""
        if self._http_client is not None:
            await self._http_client.aclose()
