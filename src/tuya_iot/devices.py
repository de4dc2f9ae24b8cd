"""Device operations."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from .client import TuyaApiClient
from .exceptions import InvalidArgumentError
from .models import (
    AccessToken,
    Command,
    Device,
    DeviceInfo,
    DeviceStatus,
    Identifiable,
    InstructionInfo,
)

DeviceRef = str | Identifiable
UserRef = str | Identifiable


def resolve_id(target: str | Identifiable | None, param: str) -> str:
    """Return the id of ``target``, raising InvalidArgumentError if it has none."""
    if target is None:
        raise InvalidArgumentError(param, f"{param} must not be None")
    value = target if isinstance(target, str) else target.id
    if not value:
        raise InvalidArgumentError(param, f"{param} has no id")
    return value


def _status_list(result: list[dict[str, Any]]) -> list[DeviceStatus]:
    return [DeviceStatus.from_dict(s) for s in result]


def _device_list(result: list[dict[str, Any]]) -> list[Device]:
    return [Device.from_dict(d) for d in result]


def serialize_commands(commands: Sequence[Command]) -> str:
    """Serialize a command batch into the request body."""
    return json.dumps({"commands": [c.to_dict() for c in commands]}, separators=(",", ":"))


class DeviceManager(ABC):
    """Device read and control operations."""

    @abstractmethod
    async def get_device(
        self, device: DeviceRef, access_token: AccessToken | None = None
    ) -> Device | None: ...

    @abstractmethod
    async def get_device_info(
        self, device: DeviceRef, access_token: AccessToken | None = None
    ) -> DeviceInfo | None: ...

    @abstractmethod
    async def get_device_status(
        self, device: DeviceRef, access_token: AccessToken | None = None
    ) -> list[DeviceStatus] | None: ...

    @abstractmethod
    async def get_devices_by_user(
        self, user: UserRef, access_token: AccessToken | None = None
    ) -> list[Device] | None: ...

    @abstractmethod
    async def get_device_instructions(
        self, device: DeviceRef, access_token: AccessToken | None = None
    ) -> InstructionInfo | None: ...

    @abstractmethod
    async def send_command(
        self, device: DeviceRef, command: Command, access_token: AccessToken | None = None
    ) -> bool: ...

    @abstractmethod
    async def send_commands(
        self,
        device: DeviceRef,
        commands: Sequence[Command],
        access_token: AccessToken | None = None,
    ) -> bool: ...


class TuyaDeviceManager(DeviceManager):
    """DeviceManager backed by a TuyaApiClient."""

    def __init__(self, client: TuyaApiClient) -> None:
        self._client = client

    async def get_device(
        self, device: DeviceRef, access_token: AccessToken | None = None
    ) -> Device | None:
        device_id = resolve_id(device, "device")
        return await self._client.authenticated_request(
            "GET", f"/v1.0/devices/{device_id}", access_token, parser=Device.from_dict
        )

    async def get_device_info(
        self, device: DeviceRef, access_token: AccessToken | None = None
    ) -> DeviceInfo | None:
        device_id = resolve_id(device, "device")
        return await self._client.authenticated_request(
            "GET", f"/v1.1/iot-03/devices/{device_id}", access_token, parser=DeviceInfo.from_dict
        )

    async def get_device_status(
        self, device: DeviceRef, access_token: AccessToken | None = None
    ) -> list[DeviceStatus] | None:
        device_id = resolve_id(device, "device")
        return await self._client.authenticated_request(
            "GET", f"/v1.0/devices/{device_id}/status", access_token, parser=_status_list
        )

    async def get_devices_by_user(
        self, user: UserRef, access_token: AccessToken | None = None
    ) -> list[Device] | None:
        user_id = resolve_id(user, "user")
        return await self._client.authenticated_request(
            "GET", f"/v1.0/users/{user_id}/devices", access_token, parser=_device_list
        )

    async def get_device_instructions(
        self, device: DeviceRef, access_token: AccessToken | None = None
    ) -> InstructionInfo | None:
        device_id = resolve_id(device, "device")
        return await self._client.authenticated_request(
            "GET",
            f"/v1.0/devices/{device_id}/functions",
            access_token,
            parser=InstructionInfo.from_dict,
        )

    async def send_command(
        self, device: DeviceRef, command: Command, access_token: AccessToken | None = None
    ) -> bool:
        return await self.send_commands(device, [command], access_token)

    async def send_commands(
        self,
        device: DeviceRef,
        commands: Sequence[Command],
        access_token: AccessToken | None = None,
    ) -> bool:
        device_id = resolve_id(device, "device")
        if not commands:
            raise InvalidArgumentError("commands", "commands must contain at least one command")
        if any(c is None for c in commands):
            raise InvalidArgumentError("commands", "commands must not contain None")
        result = await self._client.authenticated_request(
            "POST",
            f"/v1.0/devices/{device_id}/commands",
            access_token,
            serialize_commands(commands),
            parser=bool,
        )
        return bool(result)
