"""Tests for the action helpers."""

import asyncio
import json

from model_api import (
    ValidationError,
    execute_action_service,
    execute_static_action_service,
)

MODEL = "MaterialApprovalActivity"

# =============================================================================
# execute_action_service
# =============================================================================


def test_execute_action_returns_data(api, backend) -> None:
    mock_data = {"status": "approved", "message": "Action executed successfully"}
    backend.respond(json=mock_data)

    data, error = asyncio.run(
        execute_action_service(api, MODEL, 123, "review", {"new_status": "approved"})
    )

    assert error is None
    assert data == mock_data
    assert str(backend.last.url) == f"https://example.com/{MODEL}/actions/review/123/"


def test_execute_action_sends_parameters(api, backend) -> None:
    parameters = {"new_status": "approved", "comment": "Looks good"}
    backend.respond(json={"status": "approved"})

    asyncio.run(execute_action_service(api, MODEL, 123, "review", parameters))

    assert backend.last.method == "POST"
    assert json.loads(backend.last.content) == parameters


def test_execute_action_defaults_to_empty_parameters(api, backend) -> None:
    backend.respond(json={"status": "success"})

    data, error = asyncio.run(execute_action_service(api, MODEL, 123, "review"))

    assert error is None
    assert json.loads(backend.last.content) == {}


def test_execute_action_appends_query_params(api, backend) -> None:
    backend.respond(json={"status": "approved"})

    asyncio.run(
        execute_action_service(
            api, MODEL, 123, "review", {"new_status": "approved"}, {"include_details": "true", "format": "json"}
        )
    )

    assert (
        str(backend.last.url)
        == f"https://example.com/{MODEL}/actions/review/123/?include_details=true&format=json"
    )


def test_execute_action_returns_error_on_failure(api, backend) -> None:
    backend.respond(status=500, content="Server error")

    data, error = asyncio.run(execute_action_service(api, MODEL, 123, "review"))

    assert data is None
    assert "API Error" in str(error)


def test_execute_action_requires_model_class(api, backend) -> None:
    data, error = asyncio.run(execute_action_service(api, "", 123, "review"))

    assert data is None
    assert isinstance(error, ValidationError)
    assert "modelClass is required" in str(error)
    assert backend.requests == []


def test_execute_action_requires_action_name(api, backend) -> None:
    data, error = asyncio.run(execute_action_service(api, MODEL, 123, ""))

    assert data is None
    assert isinstance(error, ValidationError)
    assert "actionName is required" in str(error)
    assert backend.requests == []


# =============================================================================
# execute_static_action_service
# =============================================================================


def test_execute_static_action_uses_pk_zero(api, backend) -> None:
    mock_data = {"total": 100, "approved": 80, "rejected": 20}
    backend.respond(json=mock_data)

    data, error = asyncio.run(execute_static_action_service(api, MODEL, "get_statistics", {"year": 2024}))

    assert error is None
    assert data == mock_data
    assert str(backend.last.url) == f"https://example.com/{MODEL}/actions/get_statistics/0/"


def test_execute_static_action_appends_query_params(api, backend) -> None:
    backend.respond(json={"total": 100})

    asyncio.run(
        execute_static_action_service(
            api, MODEL, "get_statistics", {"year": 2024}, {"format": "detailed", "include_metadata": "true"}
        )
    )

    assert (
        str(backend.last.url)
        == f"https://example.com/{MODEL}/actions/get_statistics/0/?format=detailed&include_metadata=true"
    )


def test_execute_static_action_validates_like_execute_action(api, backend) -> None:
    _, missing_model = asyncio.run(execute_static_action_service(api, "", "get_statistics"))
    _, missing_action = asyncio.run(execute_static_action_service(api, MODEL, ""))

    assert "modelClass is required" in str(missing_model)
    assert "actionName is required" in str(missing_action)
    assert backend.requests == []


def test_static_action_matches_action_with_pk_zero(make_api) -> None:
    static_backend, static_api = make_api()
    action_backend, action_api = make_api()
    static_backend.respond(json={"ok": True})
    action_backend.respond(json={"ok": True})

    static_result = asyncio.run(
        execute_static_action_service(static_api, MODEL, "health_check", {"deep": True}, {"v": "1"})
    )
    action_result = asyncio.run(
        execute_action_service(action_api, MODEL, 0, "health_check", {"deep": True}, {"v": "1"})
    )

    assert static_result == action_result
    static_request, action_request = static_backend.last, action_backend.last
    assert static_request.method == action_request.method
    assert static_request.url == action_request.url
    assert static_request.content == action_request.content
    assert dict(static_request.headers) == dict(action_request.headers)
