"""
Core HTTP client for the model API.

Handles authentication, URL building, request/response and error handling.
"""

import json
import logging
import urllib.parse
from collections.abc import Mapping
from typing import Any

import httpx

from model_api.core.types import ApiServiceConfig, FileData, HttpMethod

logger = logging.getLogger(__name__)


class ClientError(Exception):
    """Base error class for client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(ClientError):
    """The client is missing settings it needs to issue a request."""


class ValidationError(ClientError):
    """Validation error for missing or invalid call arguments (not API errors)."""


class APIError(ClientError):
    """Non-2xx response, with status code, reason phrase and body text."""

    def __init__(
        self,
        message: str,
        status: int = 0,
        status_text: str = "",
        body: str = "",
    ):
        super().__init__(message)
        self.status = status
        self.status_text = status_text
        self.body = body

    @classmethod
    def from_response(cls, response: httpx.Response) -> "APIError":
        """Build the error for a failed response."""
        body = response.text
        return cls(
            f"API Error: {response.status_code} {response.reason_phrase} - {body}",
            status=response.status_code,
            status_text=response.reason_phrase,
            body=body,
        )


class ApiService:
    """
    Low-level async HTTP client for the model API.

    Handles:
    - Authentication via "Token" authorization header
    - JSON requests, multipart uploads and file downloads
    - Mapping non-2xx responses to APIError

    Every call opens its own connection and makes exactly one attempt.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the API service.

        Args:
            base_url: API base URL, e.g. https://example.com/api
            token: Authentication token, sent as "Authorization: Token <token>"
            transport: Optional httpx transport (used by tests to fake the backend)

        """
        self.config = ApiServiceConfig(base_url=base_url, token=token)
        self._transport = transport

    @classmethod
    def from_config(
        cls,
        config: ApiServiceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ApiService":
        """Create a service from an ApiServiceConfig."""
        return cls(config.base_url, config.token, transport=transport)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def token(self) -> str:
        return self.config.token

    def _ensure_base_url(self) -> str:
        """Ensure the base URL is configured."""
        if not self.config.base_url:
            raise ConfigurationError(
                "ApiService: base_url is missing. Ensure it is provided when creating the ApiService instance."
            )
        return self.config.base_url

    def build_url(self, endpoint: str, query_params: Mapping[str, Any] | None = None) -> str:
        """
        Build the full URL for an endpoint.

        A trailing slash on the base URL and a leading slash on the endpoint
        are collapsed into one. Query params keep their insertion order.
        """
        base_url = self._ensure_base_url()
        url = f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"
        if query_params:
            url = f"{url}?{urllib.parse.urlencode(query_params)}"
        return url

    def _headers(self, content_type: str | None = None) -> dict[str, str]:
        headers = {"Authorization": f"Token {self.config.token}"}
        if content_type:
            headers["Content-Type"] = content_type
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self._transport, timeout=None)

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send one request and raise APIError unless the status is 2xx."""
        logger.debug("%s %s", method, url)
        async with self._client() as client:
            response = await client.request(method, url, **kwargs)

        if not response.is_success:
            raise APIError.from_response(response)
        return response

    # =========================================================================
    # Request primitives
    # =========================================================================

    async def request(
        self,
        method: HttpMethod,
        endpoint: str,
        body: Any = None,
        query_params: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Make a JSON request to the API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API path (e.g., /users/retrieve/1/)
            body: Request body, JSON-encoded when not None
            query_params: Optional query string parameters

        Returns:
            Parsed JSON response, or None for 204 No Content

        Raises:
            ConfigurationError: If base_url is empty
            APIError: On non-2xx responses

        """
        url = self.build_url(endpoint, query_params)
        content = json.dumps(body).encode("utf-8") if body is not None else None

        response = await self._send(
            method,
            url,
            headers=self._headers("application/json"),
            content=content,
        )
        if response.status_code == 204:
            return None
        return response.json()

    async def upload_request(
        self,
        endpoint: str,
        file: Any,
        json_data: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Upload a file as multipart/form-data.

        The form carries two parts: "file" and "__json__" (the JSON-encoded
        metadata). The Content-Type header, including the boundary, is left to
        httpx.
        """
        url = self.build_url(endpoint, query_params)

        response = await self._send(
            "POST",
            url,
            headers=self._headers(),
            data={"__json__": json.dumps(dict(json_data or {}))},
            files={"file": file},
        )
        if response.status_code == 204:
            return None
        return response.json()

    async def download_request(
        self,
        endpoint: str,
        query_params: Mapping[str, Any] | None = None,
    ) -> FileData:
        """Download a file, reading the whole body into memory."""
        url = self.build_url(endpoint, query_params)

        response = await self._send("GET", url, headers=self._headers())
        return FileData(
            data=response.content,
            content_type=response.headers.get("content-type", ""),
        )
