"""In-memory transport for tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from .client import TOKEN_PATH
from .models import AccessToken
from .transport import Transport, decode_result

T = TypeVar("T")


@dataclass
class RecordedRequest:
    """A request seen by InMemoryTransport."""

    method: str
    path: str
    access_token: str | None
    payload: str | None


class InMemoryTransport(Transport):
    """Transport double that serves canned results and records every call."""

    def __init__(self) -> None:
        self._results: dict[tuple[str, str], Any] = {}
        self._errors: dict[tuple[str, str], Exception] = {}
        self._requests: list[RecordedRequest] = []

    def set_result(self, method: str, path: str, result: Any) -> None:
        """Register the raw ``result`` returned for a route."""
        self._results[(method.upper(), path)] = result

    def set_error(self, method: str, path: str, error: Exception) -> None:
        """Register an error raised for a route."""
        self._errors[(method.upper(), path)] = error

    def set_token(self, access_token: str, **extra: Any) -> None:
        """Register the token grant result."""
        self.set_result("GET", TOKEN_PATH, {"access_token": access_token, **extra})

    @property
    def requests(self) -> list[RecordedRequest]:
        return list(self._requests)

    @property
    def request_count(self) -> int:
        return len(self._requests)

    async def send_request(
        self,
        method: str,
        path: str,
        access_token: AccessToken | None = None,
        payload: str | None = None,
        parser: Callable[[Any], T] | None = None,
    ) -> T | None:
        key = (method.upper(), path)
        self._requests.append(
            RecordedRequest(
                method=key[0],
                path=path,
                access_token=access_token.access_token if access_token is not None else None,
                payload=payload,
            )
        )
        if key in self._errors:
            raise self._errors[key]
        return decode_result(self._results.get(key), parser, f"{key[0]} {path}")
