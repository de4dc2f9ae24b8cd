"""Tuya client: session cache and authenticated dispatch."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Self, TypeVar

import structlog

from .client import TOKEN_PATH, TuyaApiClient
from .devices import DeviceManager, TuyaDeviceManager
from .exceptions import MissingCredentialError, TransportError, TuyaErrorCodes
from .http_transport import HttpTransport
from .models import AccessToken, AccessTokenInfo, TuyaCredentials
from .transport import Transport
from .users import TuyaUserManager, UserManager

if TYPE_CHECKING:
    from .config import TuyaConfig

T = TypeVar("T")

logger = structlog.stdlib.get_logger(__name__)


class TuyaClient(TuyaApiClient):
    """Entry point for the Tuya cloud API.

    A client starts without a session. ``with_authentication()`` fetches a
    token and caches it; afterwards every manager call uses that token unless
    an explicit ``access_token`` is passed. The cached token is never checked
    for expiry and is only replaced by another ``with_authentication()`` call.

    Example:
        client = await TuyaClient(TuyaRegion.CENTRAL_EUROPE, creds).with_authentication()
        device = await client.devices.get_device("bf0123456789abcdef")
    """

    def __init__(
        self,
        base_url: str | None = None,
        credentials: TuyaCredentials | None = None,
        *,
        transport: Transport | None = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        if transport is None:
            if base_url is None or credentials is None:
                raise ValueError("base_url and credentials are required when no transport is given")
            transport = HttpTransport(str(base_url), credentials, timeout_seconds=timeout_seconds)
        self._transport = transport
        self._access_token: AccessToken | None = None
        self._devices = TuyaDeviceManager(self)
        self._users = TuyaUserManager(self)

    @classmethod
    def from_config(cls, config: TuyaConfig) -> TuyaClient:
        """Build a client from a loaded TuyaConfig."""
        api = config.api
        return cls(
            api.resolved_base_url(),
            TuyaCredentials(client_id=api.client_id, client_secret=api.client_secret),
            timeout_seconds=api.timeout_seconds,
        )

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def devices(self) -> DeviceManager:
        return self._devices

    @property
    def users(self) -> UserManager:
        return self._users

    @property
    def access_token(self) -> AccessToken | None:
        return self._access_token

    async def get_access_token_info(self) -> AccessTokenInfo:
        logger.info("obtaining access token")
        token = await self._transport.send_request(
            "GET", TOKEN_PATH, parser=AccessTokenInfo.from_dict
        )
        if token is None:
            raise TransportError(
                code=TuyaErrorCodes.INVALID_RESPONSE,
                message=f"GET {TOKEN_PATH}: token grant returned no result",
            )
        return token

    async def with_authentication(self) -> Self:
        # concurrent calls are not serialized; the last completed fetch wins
        self._access_token = await self.get_access_token_info()
        return self

    async def authenticated_request(
        self,
        method: str,
        path: str,
        access_token: AccessToken | None = None,
        payload: str | None = None,
        parser: Callable[[Any], T] | None = None,
    ) -> T | None:
        logger.info("performing authenticated request", method=method, path=path)
        token = access_token if access_token is not None else self._access_token
        if token is None or not token.access_token:
            logger.error("missing access token", method=method, path=path)
            raise MissingCredentialError("access_token")
        return await self._transport.send_request(method, path, token, payload, parser)
