"""
Service helpers - one coroutine per backend route.

Every helper returns a (value, error) tuple and never raises. Routes follow
the backend convention:

    /{model}/list/
    /{model}/retrieve/{pk}/
    /{model}/retrieve-file/{pk}/?file-field={field}
    /{model}/save/
    /{model}/delete/{pk}/
    /{model}/actions/{action}/{pk}/

Example:
    api = ApiService(base_url="https://example.com", token="...")
    users, error = await list_service(api, "users", {"limit": 10})
    if error:
        ...

"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeVar

from model_api.core.client import ApiService, ValidationError
from model_api.core.result import safe_await
from model_api.core.types import FileData, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")

Parser = Callable[[Any], T]

# pk used for actions that do not target a single record
STATIC_ACTION_PK = 0


async def _parse(awaitable: Awaitable[Any], parser: Parser | None) -> Any:
    data = await awaitable
    if parser is None or data is None:
        return data
    return parser(data)


async def _run(service: str, awaitable: Awaitable[Any], parser: Parser | None = None) -> Result:
    """Await a request, log any failure and return the result tuple."""
    data, error = await safe_await(_parse(awaitable, parser))
    if error is not None:
        logger.error("%s failed: %s", service, error)
        return None, error
    return data, None


def _invalid(service: str, message: str) -> Result:
    error = ValidationError(message)
    logger.error("%s failed: %s", service, error)
    return None, error


# =============================================================================
# CRUD
# =============================================================================


async def list_service(
    api: ApiService,
    model_class: str,
    body: Mapping[str, Any] | None = None,
    query_params: Mapping[str, Any] | None = None,
    *,
    parser: Parser | None = None,
) -> Result:
    """
    Fetch a list of records for a model.

    Args:
        api: ApiService instance
        model_class: Backend model name (URL segment)
        body: Filters, pagination or other list options (defaults to {})
        query_params: Optional query string parameters
        parser: Optional callable applied to the decoded response

    Returns:
        (records, None) on success, (None, error) on failure

    """
    return await _run(
        "list_service",
        api.request("POST", f"/{model_class}/list/", dict(body or {}), query_params),
        parser,
    )


async def retrieve_service(
    api: ApiService,
    model_class: str,
    pk: int | str,
    query_params: Mapping[str, Any] | None = None,
    *,
    parser: Parser | None = None,
) -> Result:
    """
    Retrieve a single record by primary key.

    Args:
        api: ApiService instance
        model_class: Backend model name (URL segment)
        pk: Primary key of the record
        query_params: Optional query string parameters
            (e.g. {"foreign_key_fields": "true"})
        parser: Optional callable applied to the decoded response

    Returns:
        (record, None) on success, (None, error) on failure

    """
    return await _run(
        "retrieve_service",
        api.request("GET", f"/{model_class}/retrieve/{pk}/", query_params=query_params),
        parser,
    )


async def save_service(
    api: ApiService,
    model_class: str,
    body: Mapping[str, Any],
    query_params: Mapping[str, Any] | None = None,
    *,
    parser: Parser | None = None,
) -> Result:
    """Create or update a record. The backend decides which from the body."""
    return await _run(
        "save_service",
        api.request("POST", f"/{model_class}/save/", body, query_params),
        parser,
    )


async def delete_service(
    api: ApiService,
    model_class: str,
    pk: int | str,
    query_params: Mapping[str, Any] | None = None,
    *,
    parser: Parser | None = None,
) -> Result:
    """
    Delete a record by primary key.

    A 204 No Content response yields (None, None).
    """
    return await _run(
        "delete_service",
        api.request("DELETE", f"/{model_class}/delete/{pk}/", query_params=query_params),
        parser,
    )


# =============================================================================
# Files
# =============================================================================


async def retrieve_file_service(
    api: ApiService,
    model_class: str,
    pk: int | str,
    file_field: str = "file",
    query_params: Mapping[str, Any] | None = None,
) -> tuple[FileData | None, Exception | None]:
    """
    Download the file stored in a record's file field.

    Args:
        api: ApiService instance
        model_class: Backend model name (URL segment)
        pk: Primary key of the record
        file_field: Name of the file field on the model
        query_params: Extra query string parameters, after "file-field";
            a "file-field" key here is ignored

    Returns:
        (FileData, None) on success, (None, error) on failure

    """
    if not file_field:
        return _invalid("retrieve_file_service", "fileField is required")

    extra = {k: v for k, v in (query_params or {}).items() if k != "file-field"}
    params = {"file-field": file_field, **extra}
    return await _run(
        "retrieve_file_service",
        api.download_request(f"/{model_class}/retrieve-file/{pk}/", params),
    )


async def upload_file_service(
    api: ApiService,
    model_class: str,
    file: Any,
    json_data: Mapping[str, Any] | None = None,
    query_params: Mapping[str, Any] | None = None,
    *,
    parser: Parser | None = None,
) -> Result:
    """
    Upload a file through the model's save route.

    Args:
        api: ApiService instance
        model_class: Backend model name (URL segment)
        file: bytes, a binary file object, or a (filename, content[, content_type]) tuple
        json_data: Record fields, sent JSON-encoded in the "__json__" part
        query_params: Optional query string parameters
        parser: Optional callable applied to the decoded response

    Returns:
        (saved record, None) on success, (None, error) on failure

    """
    if file is None:
        return _invalid("upload_file_service", "file is required")

    return await _run(
        "upload_file_service",
        api.upload_request(f"/{model_class}/save/", file, json_data, query_params),
        parser,
    )


# =============================================================================
# Actions
# =============================================================================


async def execute_action_service(
    api: ApiService,
    model_class: str,
    pk: int | str,
    action_name: str,
    parameters: Mapping[str, Any] | None = None,
    query_params: Mapping[str, Any] | None = None,
    *,
    parser: Parser | None = None,
) -> Result:
    """
    Run a named backend action on a record.

    Args:
        api: ApiService instance
        model_class: Backend model name (URL segment)
        pk: Primary key of the record, or 0 for a static action
        action_name: Action name (URL segment)
        parameters: Action parameters (defaults to {})
        query_params: Optional query string parameters
        parser: Optional callable applied to the decoded response

    Returns:
        (action result, None) on success, (None, error) on failure

    """
    if not model_class:
        return _invalid("execute_action_service", "modelClass is required")
    if not action_name:
        return _invalid("execute_action_service", "actionName is required")

    return await _run(
        "execute_action_service",
        api.request(
            "POST",
            f"/{model_class}/actions/{action_name}/{pk}/",
            dict(parameters or {}),
            query_params,
        ),
        parser,
    )


async def execute_static_action_service(
    api: ApiService,
    model_class: str,
    action_name: str,
    parameters: Mapping[str, Any] | None = None,
    query_params: Mapping[str, Any] | None = None,
    *,
    parser: Parser | None = None,
) -> Result:
    """Run a model-level action, i.e. execute_action_service with pk=0."""
    return await execute_action_service(
        api,
        model_class,
        STATIC_ACTION_PK,
        action_name,
        parameters,
        query_params,
        parser=parser,
    )
