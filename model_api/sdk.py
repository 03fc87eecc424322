"""
Model SDK - High-level client with nice ergonomics.

Binds an ApiService and a model name so callers don't repeat them on every
call. Built on top of the service helpers; every method returns the same
(value, error) tuple as the helper it wraps.
"""

from collections.abc import Mapping
from typing import Any

import httpx

from model_api import services
from model_api.core.client import ApiService
from model_api.core.types import ApiServiceConfig, FileData, Result


class ModelClient:
    """
    High-level model API client.

    Example:
        client = ModelClient(base_url="https://example.com", token="...")

        users = client.resource("users")
        user, error = await users.retrieve(1)
        stats, error = await users.execute_static_action("get_statistics", {"year": 2024})

    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API base URL
            token: Authentication token
            transport: Optional httpx transport (used by tests)

        """
        self.api = ApiService(base_url, token, transport=transport)

    @classmethod
    def from_config(cls, config: ApiServiceConfig, **kwargs: Any) -> "ModelClient":
        """Create a client from an ApiServiceConfig."""
        return cls(config.base_url, config.token, **kwargs)

    @property
    def config(self) -> ApiServiceConfig:
        """Get the connection settings."""
        return self.api.config

    def resource(self, model_class: str) -> "ModelResource":
        """Get the operations for one backend model."""
        return ModelResource(self.api, model_class)


class ModelResource:
    """Operations for a single backend model."""

    def __init__(self, api: ApiService, model_class: str):
        self._api = api
        self.model_class = model_class

    def __repr__(self) -> str:
        return f"ModelResource({self.model_class!r})"

    async def list(
        self,
        body: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Result:
        """List records, optionally filtered by body."""
        return await services.list_service(self._api, self.model_class, body, query_params, **kwargs)

    async def retrieve(
        self,
        pk: int | str,
        query_params: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Result:
        """Retrieve one record."""
        return await services.retrieve_service(self._api, self.model_class, pk, query_params, **kwargs)

    async def save(
        self,
        body: Mapping[str, Any],
        query_params: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Result:
        """Create or update a record."""
        return await services.save_service(self._api, self.model_class, body, query_params, **kwargs)

    async def delete(
        self,
        pk: int | str,
        query_params: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Result:
        """Delete one record."""
        return await services.delete_service(self._api, self.model_class, pk, query_params, **kwargs)

    async def retrieve_file(
        self,
        pk: int | str,
        file_field: str = "file",
        query_params: Mapping[str, Any] | None = None,
    ) -> tuple[FileData | None, Exception | None]:
        """Download a record's file field."""
        return await services.retrieve_file_service(self._api, self.model_class, pk, file_field, query_params)

    async def upload_file(
        self,
        file: Any,
        json_data: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Result:
        """Upload a file with its record fields."""
        return await services.upload_file_service(
            self._api, self.model_class, file, json_data, query_params, **kwargs
        )

    async def execute_action(
        self,
        pk: int | str,
        action_name: str,
        parameters: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Result:
        """Run an action on one record."""
        return await services.execute_action_service(
            self._api, self.model_class, pk, action_name, parameters, query_params, **kwargs
        )

    async def execute_static_action(
        self,
        action_name: str,
        parameters: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Result:
        """Run a model-level action."""
        return await services.execute_static_action_service(
            self._api, self.model_class, action_name, parameters, query_params, **kwargs
        )
