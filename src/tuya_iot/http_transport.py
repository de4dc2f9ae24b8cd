"""httpx-based Tuya transport."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import httpx
import structlog

from .exceptions import ApiError, TransportError, TuyaErrorCodes
from .models import AccessToken, TuyaCredentials
from .signing import build_headers
from .transport import Transport, decode_result

T = TypeVar("T")

logger = structlog.stdlib.get_logger(__name__)


class HttpTransport(Transport):
    """Signs requests and unwraps the Tuya response envelope."""

    def __init__(
        self,
        base_url: str,
        credentials: TuyaCredentials,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._credentials = credentials
        self._timeout_seconds = timeout_seconds

    @property
    def base_url(self) -> str:
        return self._base_url

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Accept": "application/json"},
            timeout=self._timeout_seconds,
        )

    def _handle_error(self, resp: httpx.Response, context: str) -> None:
        if resp.status_code >= 400:
            raise TransportError(
                code=TuyaErrorCodes.HTTP_ERROR,
                message=f"{context}: HTTP {resp.status_code}: {resp.text}",
                status_code=resp.status_code,
            )

    async def send_request(
        self,
        method: str,
        path: str,
        access_token: AccessToken | None = None,
        payload: str | None = None,
        parser: Callable[[Any], T] | None = None,
    ) -> T | None:
        context = f"{method} {path}"
        body = payload.encode("utf-8") if payload else b""
        headers = build_headers(
            self._credentials,
            method,
            path,
            body,
            access_token.access_token if access_token is not None else None,
        )
        if body:
            headers["Content-Type"] = "application/json"

        logger.debug("sending request", method=method, path=path, has_body=bool(body))
        try:
            async with self._make_client() as client:
                resp = await client.request(method, path, content=body or None, headers=headers)
        except httpx.HTTPError as e:
            raise TransportError(
                code=TuyaErrorCodes.HTTP_ERROR,
                message=f"{context}: request failed: {e}",
                cause=e,
            ) from e

        if resp.status_code == 404:
            logger.debug("resource not found", method=method, path=path)
            return None
        self._handle_error(resp, context)

        try:
            data: dict[str, Any] = resp.json()
        except ValueError as e:
            raise TransportError(
                code=TuyaErrorCodes.INVALID_RESPONSE,
                message=f"{context}: response is not valid JSON",
                status_code=resp.status_code,
                cause=e,
            ) from e
        if not isinstance(data, dict):
            raise TransportError(
                code=TuyaErrorCodes.INVALID_RESPONSE,
                message=f"{context}: unexpected response envelope",
                status_code=resp.status_code,
            )

        if not data.get("success", False):
            logger.warning(
                "api call rejected",
                method=method,
                path=path,
                api_code=data.get("code"),
                api_message=data.get("msg", ""),
            )
            raise ApiError(data.get("code"), data.get("msg", ""))

        return decode_result(data.get("result"), parser, context, resp.status_code)
