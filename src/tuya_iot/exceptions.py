"""tuya_iot exception types."""

from __future__ import annotations


class TuyaError(Exception):
    """Base error for the tuya_iot library."""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class TuyaErrorCodes:
    """TuyaError code constants."""

    INVALID_ARGUMENT: str = "INVALID_ARGUMENT"
    MISSING_CREDENTIAL: str = "MISSING_CREDENTIAL"
    HTTP_ERROR: str = "HTTP_ERROR"
    INVALID_RESPONSE: str = "INVALID_RESPONSE"
    API_ERROR: str = "API_ERROR"


class InvalidArgumentError(TuyaError, ValueError):
    """A façade operation received a missing target or identifier."""

    def __init__(self, param: str, message: str) -> None:
        super().__init__(TuyaErrorCodes.INVALID_ARGUMENT, message)
        self.param = param


class MissingCredentialError(TuyaError):
    """An authenticated request had neither an explicit nor a cached token."""

    def __init__(self, param: str = "access_token") -> None:
        super().__init__(
            TuyaErrorCodes.MISSING_CREDENTIAL,
            f"Missing {param} for a request that requires authentication. "
            f"Pass {param} explicitly or call with_authentication() on the client first.",
        )
        self.param = param


class TransportError(TuyaError):
    """The HTTP call failed or its response could not be decoded."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(code, message, cause)
        self.status_code = status_code


class ApiError(TransportError):
    """The API answered with ``success: false``."""

    def __init__(self, api_code: int | str | None, api_message: str) -> None:
        super().__init__(
            TuyaErrorCodes.API_ERROR,
            f"API error {api_code}: {api_message}",
        )
        self.api_code = api_code
        self.api_message = api_message


class ConfigError(Exception):
    """Configuration loading error."""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ConfigErrorCodes:
    """ConfigError code constants."""

    READ_FILE: str = "READ_FILE"
    PARSE_YAML: str = "PARSE_YAML"
    VALIDATION: str = "VALIDATION"
