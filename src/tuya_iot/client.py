"""TuyaApiClient abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Self, TypeVar

from .models import AccessToken, AccessTokenInfo

T = TypeVar("T")

TOKEN_PATH = "/v1.0/token?grant_type=1"


class TuyaApiClient(ABC):
    """Session and authenticated dispatch contract consumed by the managers."""

    @property
    @abstractmethod
    def access_token(self) -> AccessToken | None:
        """The cached session token, if a session was established."""
        ...

    @abstractmethod
    async def get_access_token_info(self) -> AccessTokenInfo:
        """Request a new token grant without caching it."""
        ...

    @abstractmethod
    async def with_authentication(self) -> Self:
        """Fetch a token and cache it on this client."""
        ...

    @abstractmethod
    async def authenticated_request(
        self,
        method: str,
        path: str,
        access_token: AccessToken | None = None,
        payload: str | None = None,
        parser: Callable[[Any], T] | None = None,
    ) -> T | None:
        """Send a request with the explicit token, or else the cached one."""
        ...
