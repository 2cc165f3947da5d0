"""HTTP client for the enclave key service that creates keys and signs messages."""

from __future__ import annotations

import base64
import binascii
import json
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Mapping

PING = "/ping"
CREATE = "/create"
SIGN = "/sign"
VERIFY = "/verify"
IS_EXIST = "/is-exist"

PING_METHOD = "GET"
CREATE_METHOD = "GET"
SIGN_METHOD = "POST"
VERIFY_METHOD = "POST"
IS_EXIST_METHOD = "POST"


@dataclass
class Response:
    """Reply of the key service: a status code, a message and raw data."""

    code: int = 0
    msg: str = ""
    data: bytes = b""


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    raise TypeError(f"object of type {type(value).__name__} is not JSON serializable")


def _parse_response(payload: bytes) -> Response:
    try:
        doc = json.loads(payload)
    except ValueError as exc:
        raise ValueError(f"invalid response body: {exc}") from exc
    if doc is None:
        return Response()
    if not isinstance(doc, dict):
        raise ValueError("response body must be a JSON object")

    code = doc.get("code")
    if code is None:
        code = 0
    elif isinstance(code, bool) or not isinstance(code, int):
        raise ValueError(f"invalid response code {code!r}")

    msg = doc.get("msg")
    if msg is None:
        msg = ""
    elif not isinstance(msg, str):
        raise ValueError(f"invalid response message {msg!r}")

    data = doc.get("data")
    if data is None:
        raw = b""
    elif isinstance(data, str):
        try:
            raw = base64.b64decode(data, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"invalid response data: {exc}") from exc
    else:
        raise ValueError(f"invalid response data {data!r}")

    return Response(code=code, msg=msg, data=raw)


def request(url: str, method: str, args: Mapping[str, Any] | None = None) -> Response:
    """Send ``args`` as a JSON body to ``url`` and decode the JSON reply.

    Byte values in ``args`` are sent base64-encoded. A reply with an HTTP
    error status is still decoded; transport failures raise ``OSError``.
    """
    body = None
    if args is not None:
        body = json.dumps(dict(args), default=_json_default, sort_keys=True).encode("utf-8")
    req = urllib.request.Request(
        url,
        data=body,
        method=method,
        headers={"Content-Type": "application/json"},
    )
    try:
        with urllib.request.urlopen(req) as resp:
            payload = resp.read()
    except urllib.error.HTTPError as exc:
        try:
            payload = exc.read()
        finally:
            exc.close()
    return _parse_response(payload)


@dataclass
class ApiClient:
    """Client for the key service rooted at ``url``."""

    url: str

    def ping(self, method: str = PING_METHOD, args: Mapping[str, Any] | None = None) -> Response:
        return request(self.url + PING, method, args)

    def create(self, method: str = CREATE_METHOD, args: Mapping[str, Any] | None = None) -> Response:
        return request(self.url + CREATE, method, args)

    def sign(self, method: str = SIGN_METHOD, args: Mapping[str, Any] | None = None) -> Response:
        return request(self.url + SIGN, method, args)

    def verify(self, method: str = VERIFY_METHOD, args: Mapping[str, Any] | None = None) -> Response:
        return request(self.url + VERIFY, method, args)

    def is_exist(
        self, method: str = IS_EXIST_METHOD, args: Mapping[str, Any] | None = None
    ) -> Response:
        return request(self.url + IS_EXIST, method, args)