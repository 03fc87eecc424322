"""
Model API - Async client for list/retrieve/save/delete/action REST backends.

Layers:
- core: ApiService transport, errors, types and safe_await
- services: one (value, error)-returning coroutine per backend route
- sdk: ModelClient with per-model resources
"""

from model_api.core import (
    APIError,
    ApiService,
    ApiServiceConfig,
    ClientError,
    ConfigurationError,
    FileData,
    ValidationError,
    safe_await,
)
from model_api.sdk import ModelClient, ModelResource
from model_api.services import (
    delete_service,
    execute_action_service,
    execute_static_action_service,
    list_service,
    retrieve_file_service,
    retrieve_service,
    save_service,
    upload_file_service,
)

__version__ = "0.1.0"
__all__ = [
    "APIError",
    "ApiService",
    "ApiServiceConfig",
    "ClientError",
    "ConfigurationError",
    "FileData",
    "ModelClient",
    "ModelResource",
    "ValidationError",
    "delete_service",
    "execute_action_service",
    "execute_static_action_service",
    "list_service",
    "retrieve_file_service",
    "retrieve_service",
    "safe_await",
    "save_service",
    "upload_file_service",
]
