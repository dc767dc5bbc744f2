from __future__ import annotations

import logging
from typing import Generic, TypeVar

from .errors import InvalidRequest, ProtocolMismatch
from .exchange import ExchangeRequest, ExchangeResponse
from .interface import HttpInterface

logger = logging.getLogger(__name__)

InterfaceT = TypeVar("InterfaceT", bound=HttpInterface)


class OAuth2Client(Generic[InterfaceT]):
    """Expose an ``HttpInterface`` as the async HTTP client an OAuth2 library calls.

    The client is a pass-through. Each call awaits ``interface.perform``
    exactly once and hands back its response object or lets its exception
    propagate as raised. Retries, timeouts and cancellation stay with the
    transport and the event loop.

    Example:
        >>> client = OAuth2Client(HttpxInterface(httpx.AsyncClient()))
        >>> response = await client(request)
    """

    def __init__(self, interface: InterfaceT) -> None:
        self._interface = interface

    @property
    def interface(self) -> InterfaceT:
        return self._interface

    @property
    def error_type(self) -> type[BaseException]:
        return self._interface.error_type

    async def execute(self, request: ExchangeRequest) -> ExchangeResponse:
        """Perform one exchange.

        Raises:
            InvalidRequest: If ``request`` is not an ``ExchangeRequest``
            ProtocolMismatch: If the interface returned something other than an ``ExchangeResponse``
        """
        if not isinstance(request, ExchangeRequest):
            raise InvalidRequest(f"Expected ExchangeRequest, got {type(request).__name__}")
        logger.debug("HTTP %s %s", request.method.value, request.url)
        try:
            response = await self._interface.perform(request)
        except Exception as exc:
            logger.debug("HTTP %s %s failed: %r", request.method.value, request.url, exc)
            raise
        if not isinstance(response, ExchangeResponse):
            raise ProtocolMismatch(
                f"{type(self._interface).__name__}.perform returned {type(response).__name__}, "
                "expected ExchangeResponse",
                response,
            )
        logger.debug("HTTP %s %s -> %d", request.method.value, request.url, response.status)
        return response

    async def __call__(self, request: ExchangeRequest) -> ExchangeResponse:
        return await self.execute(request)
