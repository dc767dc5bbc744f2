from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from ..exchange import ExchangeRequest, ExchangeResponse


class AiohttpHeadersProtocol(Protocol):
    def items(self) -> Iterable[tuple[str, str]]: ...


class AiohttpResponseProtocol(Protocol):
    status: int
    headers: AiohttpHeadersProtocol

    async def read(self) -> bytes: ...

    async def __aenter__(self) -> "AiohttpResponseProtocol": ...

    async def __aexit__(self, *_: object) -> None: ...


class AiohttpSessionProtocol(Protocol):
    def request(
        self,
        method: str,
        url: str,
        *,
        headers: list[tuple[str, str]],
        data: bytes,
    ) -> AiohttpResponseProtocol: ...


class AiohttpInterface:
    """``HttpInterface`` over an ``aiohttp.ClientSession``.

    aiohttp is not imported here, so its exception hierarchy is not known
    ahead of time and ``error_type`` must be given, normally
    ``aiohttp.ClientError``. Create the session with ``auto_decompress=False``
    so the body keeps the encoding its ``content-encoding`` header names.

    Example:
        >>> session = aiohttp.ClientSession(auto_decompress=False)
        >>> interface = AiohttpInterface(session, aiohttp.ClientError)
    """

    def __init__(
        self,
        session: AiohttpSessionProtocol,
        error_type: type[BaseException],
    ) -> None:
        self._session = session
        self.error_type = error_type

    async def perform(self, request: ExchangeRequest) -> ExchangeResponse:
        async with self._session.request(
            request.method.value,
            request.url,
            headers=list(request.headers),
            data=request.body,
        ) as response:
            data = await response.read()
            return ExchangeResponse(
                response.status,
                [(str(k), str(v)) for k, v in response.headers.items()],
                data,
            )
