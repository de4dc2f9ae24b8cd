"""Transport abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from .exceptions import TransportError, TuyaErrorCodes
from .models import AccessToken

T = TypeVar("T")


class Transport(ABC):
    """Performs a single API call and decodes its result."""

    @abstractmethod
    async def send_request(
        self,
        method: str,
        path: str,
        access_token: AccessToken | None = None,
        payload: str | None = None,
        parser: Callable[[Any], T] | None = None,
    ) -> T | None:
        """Send one request and return the decoded ``result``.

        Args:
            method: HTTP method.
            path: resource path relative to the base URL, query included.
            access_token: resolved token, or None for the token grant.
            payload: serialized JSON body, if any.
            parser: converts the raw ``result`` into the caller's type.

        Returns:
            The parsed result, or None when the resource does not exist.

        Raises:
            TransportError: the call failed or the response was malformed.
        """
        ...


def decode_result(
    result: Any,
    parser: Callable[[Any], T] | None,
    context: str,
    status_code: int | None = None,
) -> T | None:
    """Apply ``parser`` to a raw result, mapping shape errors to TransportError."""
    if result is None:
        return None
    if parser is None:
        return result  # type: ignore[no-any-return]
    try:
        return parser(result)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise TransportError(
            code=TuyaErrorCodes.INVALID_RESPONSE,
            message=f"{context}: failed to decode result: {e}",
            status_code=status_code,
            cause=e,
        ) from e
