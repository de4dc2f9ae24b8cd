"""Async client for the Tuya cloud IoT API."""

from .client import TuyaApiClient
from .config import ApiSection, LogSection, TuyaConfig, load_config
from .devices import DeviceManager, TuyaDeviceManager
from .exceptions import (
    ApiError,
    ConfigError,
    ConfigErrorCodes,
    InvalidArgumentError,
    MissingCredentialError,
    TransportError,
    TuyaError,
    TuyaErrorCodes,
)
from .http_transport import HttpTransport
from .logger import new_logger
from .memory import InMemoryTransport, RecordedRequest
from .models import (
    AccessToken,
    AccessTokenInfo,
    Command,
    Device,
    DeviceInfo,
    DeviceStatus,
    Identifiable,
    Instruction,
    InstructionInfo,
    StaticAccessToken,
    TuyaCredentials,
    TuyaRegion,
    User,
)
from .transport import Transport
from .tuya_client import TuyaClient
from .users import TuyaUserManager, UserManager

__version__ = "0.1.0"

__all__ = [
    "AccessToken",
    "AccessTokenInfo",
    "ApiError",
    "ApiSection",
    "Command",
    "ConfigError",
    "ConfigErrorCodes",
    "Device",
    "DeviceInfo",
    "DeviceManager",
    "DeviceStatus",
    "HttpTransport",
    "Identifiable",
    "InMemoryTransport",
    "Instruction",
    "InstructionInfo",
    "InvalidArgumentError",
    "LogSection",
    "MissingCredentialError",
    "RecordedRequest",
    "StaticAccessToken",
    "Transport",
    "TransportError",
    "TuyaApiClient",
    "TuyaClient",
    "TuyaConfig",
    "TuyaCredentials",
    "TuyaDeviceManager",
    "TuyaError",
    "TuyaErrorCodes",
    "TuyaRegion",
    "TuyaUserManager",
    "User",
    "UserManager",
    "load_config",
    "new_logger",
]
