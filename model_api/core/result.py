"""Turn awaitables that may raise into (value, error) tuples."""

from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")


async def safe_await(awaitable: Awaitable[T]) -> tuple[T, None] | tuple[None, Exception]:
    """
    Await and return (value, None) on success or (None, error) on failure.

    The caught exception is returned as-is, so callers can check its type and
    identity. Only Exception subclasses are caught; cancellation propagates.

    Example:
        data, error = await safe_await(api.request("GET", "/users/retrieve/1/"))
        if error:
            ...

    """
    try:
        return await awaitable, None
    except Exception as e:
        return None, e
