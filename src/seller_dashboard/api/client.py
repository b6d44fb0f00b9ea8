"""Authenticated HTTP client for the seller API."""

import logging
import time
from typing import Any

import httpx

from seller_dashboard.api.errors import HttpError, NetworkError, SessionExpired
from seller_dashboard.config import Settings, get_settings
from seller_dashboard.observability import MetricsCollector, log_event, trace
from seller_dashboard.session import TokenStore

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Single point of outbound communication with the seller API.

    Two behaviours are attached to every call through httpx event hooks:

    - request augmentation: the token store is read when the request is
      sent and, if a token is present, ``Authorization: Bearer <token>``
      is set. Without a token the request goes out unauthenticated.
    - response normalization: a 401 clears the token store before the
      failure reaches the caller. Callers must not assume the token
      survives an error path.

    Calls are never retried and, unless ``request_timeout`` is set, never
    time out.
    """

    def __init__(
        self,
        token_store: TokenStore,
        settings: Settings | None = None,
        metrics: MetricsCollector | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            token_store: Session token storage shared with the navigation guard
            settings: Optional Settings instance. If None, uses get_settings().
            metrics: Optional collector receiving one record per settled request
            transport: Optional httpx transport (tests pass ``httpx.MockTransport``)
        """
        self.settings = settings or get_settings()
        self.token_store = token_store
        self.metrics = metrics
        self._client = httpx.AsyncClient(
            base_url=self.settings.seller_api_base_url,
            headers={"Accept": "application/json"},
            timeout=self.settings.request_timeout,
            event_hooks={
                "request": [self._attach_token],
                "response": [self._clear_token_on_401],
            },
            transport=transport,
        )
        logger.info(f"Initialized API client for {self.settings.seller_api_base_url}")

    async def _attach_token(self, request: httpx.Request) -> None:
        token = self.token_store.get()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    async def _clear_token_on_401(self, response: httpx.Response) -> None:
        if response.status_code == 401:
            logger.warning(f"401 from {response.request.method} {response.request.url.path}; clearing session token")
            self.token_store.clear()
            log_event(
                name="session_expired",
                level="WARNING",
                metadata={"path": response.request.url.path},
            )

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def _record(self, method: str, path: str, status: int | None, started: float, error: str | None = None) -> None:
        if self.metrics is not None:
            self.metrics.record_request(method, path, status, time.perf_counter() - started, error)

    @trace(name="api_request", trace_type="http")
    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        files: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Send a request and return the parsed response body.

        Args:
            method: HTTP verb
            path: Path relative to the API base URL
            json: Optional JSON body
            files: Optional multipart files (httpx ``files`` format)
            headers: Optional per-request header overrides

        Returns:
            Parsed JSON body, raw text for non-JSON bodies, None when empty

        Raises:
            SessionExpired: On 401 (the token store is already cleared)
            HttpError: On any other non-2xx status
            NetworkError: When no response was received
        """
        started = time.perf_counter()
        try:
            response = await self._client.request(method, path, json=json, files=files, headers=headers)
        except httpx.TransportError as e:
            logger.error(f"{method} {path} failed: {e!r}")
            self._record(method, path, None, started, error=repr(e))
            raise NetworkError(f"{method} {path} failed: {e}") from e

        body = self._parse_body(response)
        self._record(method, path, response.status_code, started)

        if response.is_success:
            logger.debug(f"{method} {path} -> {response.status_code}")
            return body

        logger.error(f"{method} {path} -> {response.status_code}: {body!r}")
        if response.status_code == 401:
            raise SessionExpired(body)
        raise HttpError(response.status_code, body)

    async def get(self, path: str, *, headers: dict[str, str] | None = None) -> Any:
        return await self.request("GET", path, headers=headers)

    async def post(
        self,
        path: str,
        json: Any = None,
        *,
        files: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("POST", path, json=json, files=files, headers=headers)

    async def patch(self, path: str, json: Any = None, *, headers: dict[str, str] | None = None) -> Any:
        return await self.request("PATCH", path, json=json, headers=headers)

    async def delete(self, path: str, *, headers: dict[str, str] | None = None) -> Any:
        return await self.request("DELETE", path, headers=headers)

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
