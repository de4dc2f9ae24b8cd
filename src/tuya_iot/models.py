"""Tuya data models."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable


class TuyaRegion(StrEnum):
    """Tuya data centre base URLs."""

    CHINA = "https://openapi.tuyacn.com"
    WESTERN_AMERICA = "https://openapi.tuyaus.com"
    EASTERN_AMERICA = "https://openapi-ueaz.tuyaus.com"
    CENTRAL_EUROPE = "https://openapi.tuyaeu.com"
    WESTERN_EUROPE = "https://openapi-weaz.tuyaeu.com"
    INDIA = "https://openapi.tuyain.com"


@dataclass(frozen=True)
class TuyaCredentials:
    """Cloud project credentials."""

    client_id: str
    client_secret: str = field(repr=False)


@runtime_checkable
class AccessToken(Protocol):
    """Anything that carries a bearer access token."""

    @property
    def access_token(self) -> str: ...


@runtime_checkable
class Identifiable(Protocol):
    """A record addressed by its id."""

    @property
    def id(self) -> str | None: ...


@dataclass(frozen=True)
class StaticAccessToken:
    """A caller-supplied token reference."""

    access_token: str = field(repr=False)


@dataclass
class AccessTokenInfo:
    """Result of the token grant."""

    access_token: str = field(repr=False)
    expire_time: int = 0
    refresh_token: str = field(default="", repr=False)
    uid: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AccessTokenInfo:
        return cls(
            access_token=data["access_token"],
            expire_time=int(data.get("expire_time", 0)),
            refresh_token=data.get("refresh_token", ""),
            uid=data.get("uid", ""),
        )


@dataclass
class DeviceStatus:
    """A single data point reported by a device."""

    code: str
    value: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DeviceStatus:
        return cls(code=data["code"], value=data.get("value"))


@dataclass
class Device:
    """Device record from ``/v1.0/devices/{id}``."""

    id: str | None
    name: str = ""
    uid: str = ""
    local_key: str = field(default="", repr=False)
    category: str = ""
    product_id: str = ""
    product_name: str = ""
    sub: bool = False
    uuid: str = ""
    owner_id: str = ""
    online: bool = False
    ip: str = ""
    icon: str = ""
    time_zone: str = ""
    active_time: int | None = None
    create_time: int | None = None
    update_time: int | None = None
    status: list[DeviceStatus] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Device:
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            uid=data.get("uid", ""),
            local_key=data.get("local_key", ""),
            category=data.get("category", ""),
            product_id=data.get("product_id", ""),
            product_name=data.get("product_name", ""),
            sub=bool(data.get("sub", False)),
            uuid=data.get("uuid", ""),
            owner_id=data.get("owner_id", ""),
            online=bool(data.get("online", False)),
            ip=data.get("ip", ""),
            icon=data.get("icon", ""),
            time_zone=data.get("time_zone", ""),
            active_time=data.get("active_time"),
            create_time=data.get("create_time"),
            update_time=data.get("update_time"),
            status=[DeviceStatus.from_dict(s) for s in data.get("status") or []],
        )


@dataclass
class DeviceInfo:
    """Device record from the IoT core endpoint ``/v1.1/iot-03/devices/{id}``."""

    id: str | None
    name: str = ""
    category: str = ""
    product_id: str = ""
    product_name: str = ""
    model: str = ""
    uuid: str = ""
    asset_id: str = ""
    local_key: str = field(default="", repr=False)
    ip: str = ""
    lat: str = ""
    lon: str = ""
    time_zone: str = ""
    online: bool = False
    sub: bool = False
    icon: str = ""
    active_time: int | None = None
    create_time: int | None = None
    update_time: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DeviceInfo:
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            category=data.get("category", ""),
            product_id=data.get("product_id", ""),
            product_name=data.get("product_name", ""),
            model=data.get("model", ""),
            uuid=data.get("uuid", ""),
            asset_id=data.get("asset_id", ""),
            local_key=data.get("local_key", ""),
            ip=data.get("ip", ""),
            lat=data.get("lat", ""),
            lon=data.get("lon", ""),
            time_zone=data.get("time_zone", ""),
            # the iot-03 endpoint reports "is_online" on some accounts
            online=bool(data.get("online", data.get("is_online", False))),
            sub=bool(data.get("sub", False)),
            icon=data.get("icon", ""),
            active_time=data.get("active_time"),
            create_time=data.get("create_time"),
            update_time=data.get("update_time"),
        )


@dataclass
class Instruction:
    """A command a device accepts."""

    code: str
    type: str = ""
    values: dict[str, Any] = field(default_factory=dict)
    name: str = ""
    desc: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Instruction:
        values = data.get("values") or {}
        if isinstance(values, str):
            # the API ships the value schema as an embedded JSON string
            values = json.loads(values) if values.strip() else {}
        return cls(
            code=data["code"],
            type=data.get("type", ""),
            values=values,
            name=data.get("name", ""),
            desc=data.get("desc", ""),
        )


@dataclass
class InstructionInfo:
    """Instruction set of a device category."""

    category: str = ""
    functions: list[Instruction] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InstructionInfo:
        return cls(
            category=data.get("category", ""),
            functions=[Instruction.from_dict(f) for f in data.get("functions") or []],
        )


@dataclass
class Command:
    """A control command sent to a device."""

    code: str
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "value": self.value}


@dataclass
class User:
    """End user of the cloud project."""

    id: str | None
    username: str = ""
    nick_name: str = ""
    email: str = ""
    mobile: str = ""
    country_code: str = ""
    avatar: str = ""
    time_zone_id: str = ""
    create_time: int | None = None
    update_time: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        return cls(
            id=data.get("uid", data.get("id")),
            username=data.get("username", ""),
            nick_name=data.get("nick_name", ""),
            email=data.get("email", ""),
            mobile=data.get("mobile", ""),
            country_code=data.get("country_code", ""),
            avatar=data.get("avatar", ""),
            time_zone_id=data.get("time_zone_id", ""),
            create_time=data.get("create_time"),
            update_time=data.get("update_time"),
        )
