"""Tuya HMAC-SHA256 request signing."""

from __future__ import annotations

import hashlib
import hmac
import time
import uuid

import httpx

from .models import TuyaCredentials

SIGN_METHOD = "HMAC-SHA256"


def canonical_url(path: str) -> str:
    """Return the path with its query parameters sorted by key."""
    url = httpx.URL(path)
    params = sorted(url.params.multi_items())
    if not params:
        return url.path
    query = "&".join(f"{k}={v}" for k, v in params)
    return f"{url.path}?{query}"


def string_to_sign(method: str, path: str, body: bytes = b"") -> str:
    """Build the string to sign; no extra headers take part in the signature."""
    content_hash = hashlib.sha256(body).hexdigest()
    return "\n".join([method.upper(), content_hash, "", canonical_url(path)])


def sign(
    credentials: TuyaCredentials,
    timestamp: str,
    nonce: str,
    to_sign: str,
    access_token: str = "",
) -> str:
    message = credentials.client_id + access_token + timestamp + nonce + to_sign
    digest = hmac.new(
        credentials.client_secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
    return digest.upper()


def build_headers(
    credentials: TuyaCredentials,
    method: str,
    path: str,
    body: bytes = b"",
    access_token: str | None = None,
    *,
    timestamp: str | None = None,
    nonce: str | None = None,
) -> dict[str, str]:
    """Return the signature headers for one request.

    The token grant is signed without an access token; every other call
    includes it both in the signed message and as a header.
    """
    t = timestamp or str(int(time.time() * 1000))
    n = nonce or uuid.uuid4().hex
    headers = {
        "client_id": credentials.client_id,
        "t": t,
        "nonce": n,
        "sign_method": SIGN_METHOD,
        "sign": sign(credentials, t, n, string_to_sign(method, path, body), access_token or ""),
    }
    if access_token:
        headers["access_token"] = access_token
    return headers
