"""
Core types shared by the transport and service layers.

These dataclasses are plain values: nothing here performs I/O.
"""

from dataclasses import dataclass
from typing import Any, Literal, TypeVar

T = TypeVar("T")

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

# (value, error): exactly one side is set, except a 204 success which is (None, None)
Result = tuple[T | None, Exception | None]


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True)
class ApiServiceConfig:
    """Connection settings for an ApiService."""

    base_url: str
    token: str


# =============================================================================
# File Types
# =============================================================================


@dataclass(frozen=True)
class FileData:
    """A downloaded file, fully read into memory."""

    data: bytes
    content_type: str = ""

    @property
    def size(self) -> int:
        """Number of bytes in the file."""
        return len(self.data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict (bytes as a list of ints)."""
        return {"data": list(self.data), "contentType": self.content_type}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FileData":
        """Create from the dict produced by to_dict()."""
        return cls(
            data=bytes(data.get("data") or []),
            content_type=data.get("contentType") or "",
        )
