"""
Core layer - Transport, errors and types.

This layer provides:
- ApiService, the authenticated async HTTP wrapper
- The error hierarchy raised by ApiService
- safe_await, which turns raised errors into (value, error) tuples
"""

from model_api.core.client import (
    APIError,
    ApiService,
    ClientError,
    ConfigurationError,
    ValidationError,
)
from model_api.core.result import safe_await
from model_api.core.types import ApiServiceConfig, FileData, HttpMethod, Result

__all__ = [
    "APIError",
    "ApiService",
    "ApiServiceConfig",
    "ClientError",
    "ConfigurationError",
    "FileData",
    "HttpMethod",
    "Result",
    "ValidationError",
    "safe_await",
]
