"""httpx transport that routes requests through an ``AsyncHttpClient``.

OAuth2 libraries built on ``httpx.AsyncClient`` accept a ``transport``. Handing
them an ``ExchangeTransport`` makes every token endpoint call go through the
wrapped client, and therefore through whatever ``HttpInterface`` it adapts.

Example:
    >>> adapter = OAuth2Client(MyInterface())
    >>> async with httpx.AsyncClient(transport=ExchangeTransport(adapter)) as http:
    ...     response = await http.post("https://auth.example/token", data={...})
"""

from __future__ import annotations

import httpx

from .exchange import ExchangeRequest
from .interface import AsyncHttpClient


class ExchangeTransport(httpx.AsyncBaseTransport):
    def __init__(self, client: AsyncHttpClient) -> None:
        self._client = client

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        body = await request.aread()
        exchange = ExchangeRequest(
            request.method,
            str(request.url),
            [(str(k), str(v)) for k, v in request.headers.multi_items()],
            body,
        )
        result = await self._client(exchange)
        return httpx.Response(
            status_code=result.status,
            headers=list(result.headers),
            content=result.body,
            request=request,
        )
