from __future__ import annotations

import httpx

from ..exchange import ExchangeRequest, ExchangeResponse


class HttpxInterface:
    """``HttpInterface`` over an ``httpx.AsyncClient``.

    The body is collected with ``aiter_raw`` so it stays the payload its
    headers describe: a gzipped response keeps both its
    ``content-encoding`` header and its compressed bytes.
    """

    error_type: type[BaseException] = httpx.HTTPError

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def perform(self, request: ExchangeRequest) -> ExchangeResponse:
        http_request = self._client.build_request(
            method=request.method.value,
            url=request.url,
            headers=list(request.headers),
            content=request.body,
        )
        response = await self._client.send(http_request, stream=True)
        try:
            body = b"".join([chunk async for chunk in response.aiter_raw()])
        finally:
            await response.aclose()
        return ExchangeResponse(
            response.status_code,
            [(str(k), str(v)) for k, v in response.headers.multi_items()],
            body,
        )
