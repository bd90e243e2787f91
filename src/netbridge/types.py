"""
Request and response value types.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from typing import Any


@dataclass(frozen=True)
class Endpoint:
    """
    Declarative description of one HTTP call.

    Only POST endpoints carry ``parameters`` on the wire; for every other
    method they are ignored.

    Endpoints compare by value but are not hashable, since headers and
    parameters are usually dicts.
    """

    __hash__ = None  # type: ignore[assignment]

    url: str
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    parameters: Any = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())

    @classmethod
    def get(cls, url: str, headers: Mapping[str, str] | None = None) -> "Endpoint":
        """Build a GET endpoint."""
        return cls(url=url, method="GET", headers=dict(headers or {}))

    @classmethod
    def post(
        cls,
        url: str,
        parameters: Any,
        headers: Mapping[str, str] | None = None,
    ) -> "Endpoint":
        """Build a POST endpoint whose parameters become the JSON body."""
        return cls(url=url, method="POST", headers=dict(headers or {}), parameters=parameters)


@dataclass
class PreparedRequest:
    """Transport-ready request derived from an Endpoint."""

    url: str
    method: str
    headers: dict[str, str]
    body: bytes | None = None


@dataclass
class ResponseMetadata:
    """Metadata any transport can return for a response."""

    url: str


@dataclass
class HTTPResponseMetadata(ResponseMetadata):
    """Metadata for a response that came back over HTTP."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    reason: str | None = None
