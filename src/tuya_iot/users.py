"""User operations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .client import TuyaApiClient
from .devices import UserRef, resolve_id
from .models import AccessToken, User


class UserManager(ABC):
    """User read operations."""

    @abstractmethod
    async def get_user(
        self, user: UserRef, access_token: AccessToken | None = None
    ) -> User | None: ...


class TuyaUserManager(UserManager):
    """UserManager backed by a TuyaApiClient."""

    def __init__(self, client: TuyaApiClient) -> None:
        self._client = client

    async def get_user(
        self, user: UserRef, access_token: AccessToken | None = None
    ) -> User | None:
        user_id = resolve_id(user, "user")
        return await self._client.authenticated_request(
            "GET", f"/v1.0/users/{user_id}/infos", access_token, parser=User.from_dict
        )
