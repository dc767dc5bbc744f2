"""Transport-agnostic value types for a single HTTP exchange.

An exchange is one outbound request and the one response produced for it.
Both sides are immutable and carry their payload as opaque bytes: nothing in
this module encodes, decodes or inspects content.

Key classes:
- HttpMethod: The request methods recognized by OAuth2 token endpoints
- ExchangeRequest: One outbound HTTP call
- ExchangeResponse: One inbound HTTP result, built by a transport
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Union
from urllib.parse import urlsplit

from .errors import InvalidRequest, ProtocolMismatch

Header = tuple[str, str]
Headers = tuple[Header, ...]
HeadersInput = Union[Mapping[str, str], Iterable[Header]]
BodyInput = Union[bytes, bytearray, memoryview]


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, value: HttpMethod | str) -> HttpMethod:
        """Return the enum member for ``value``.

        Method tokens are case-sensitive, so ``"post"`` is not ``POST``.

        Raises:
            InvalidRequest: If ``value`` is not a recognized method
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidRequest(f"Unsupported HTTP method: {value!r}")


def _freeze_headers(headers: HeadersInput | None, error: type[Exception]) -> Headers:
    if headers is None:
        return ()
    items = headers.items() if isinstance(headers, Mapping) else headers
    frozen: list[Header] = []
    for item in items:
        if not isinstance(item, tuple) or len(item) != 2:
            raise error(f"Header must be a (name, value) pair, got {item!r}")
        name, value = item
        if not isinstance(name, str) or not isinstance(value, str):
            raise error(f"Header name and value must be strings, got {item!r}")
        frozen.append((name, value))
    return tuple(frozen)


def _get_all(headers: Headers, name: str) -> list[str]:
    return [value for key, value in headers if key == name]


@dataclass(frozen=True)
class ExchangeRequest:
    """One outbound HTTP call.

    Attributes:
        method: The request method
        url: Absolute target URL, otherwise opaque to this layer
        headers: Name/value pairs in insertion order, duplicates kept, names not case-folded
        body: Opaque payload, possibly empty

    Example:
        >>> request = ExchangeRequest(
        ...     "POST",
        ...     "https://auth.example/token",
        ...     [("content-type", "application/x-www-form-urlencoded")],
        ...     b"grant_type=refresh_token&refresh_token=abc",
        ... )
        >>> request.method
        <HttpMethod.POST: 'POST'>
    """

    method: HttpMethod
    url: str
    headers: Headers = field(default=())
    body: bytes = b""

    def __init__(
        self,
        method: HttpMethod | str,
        url: str,
        headers: HeadersInput | None = None,
        body: BodyInput = b"",
    ) -> None:
        if not isinstance(url, str):
            raise InvalidRequest(f"URL must be a string, got {type(url).__name__}")
        parts = urlsplit(url)
        if not parts.scheme or not parts.netloc:
            raise InvalidRequest(f"URL must be absolute: {url!r}")
        if not isinstance(body, (bytes, bytearray, memoryview)):
            raise InvalidRequest(f"Body must be bytes, got {type(body).__name__}")
        object.__setattr__(self, "method", HttpMethod.parse(method))
        object.__setattr__(self, "url", url)
        object.__setattr__(self, "headers", _freeze_headers(headers, InvalidRequest))
        object.__setattr__(self, "body", bytes(body))

    def get_all(self, name: str) -> list[str]:
        return _get_all(self.headers, name)


@dataclass(frozen=True)
class ExchangeResponse:
    """One inbound HTTP result.

    Status codes are not range-checked; whatever the transport reports is
    handed to the caller.

    Attributes:
        status: Numeric status code
        headers: Name/value pairs in the order the transport reported them
        body: Opaque payload, possibly empty
    """

    status: int
    headers: Headers = field(default=())
    body: bytes = b""

    def __init__(
        self,
        status: int,
        headers: HeadersInput | None = None,
        body: BodyInput = b"",
    ) -> None:
        if isinstance(status, bool) or not isinstance(status, int):
            raise ProtocolMismatch(f"Status must be an integer, got {status!r}", status)
        if not isinstance(body, (bytes, bytearray, memoryview)):
            raise ProtocolMismatch(f"Body must be bytes, got {type(body).__name__}", body)
        object.__setattr__(self, "status", status)
        object.__setattr__(self, "headers", _freeze_headers(headers, ProtocolMismatch))
        object.__setattr__(self, "body", bytes(body))

    def get_all(self, name: str) -> list[str]:
        return _get_all(self.headers, name)
