from __future__ import annotations

from typing import Protocol, runtime_checkable

from .exchange import ExchangeRequest, ExchangeResponse


@runtime_checkable
class HttpInterface(Protocol):
    """Something that can perform one HTTP exchange.

    Implementations declare ``error_type``, the exception class their
    failures are raised as. Callers can catch it but should treat it as
    opaque: render it, log it, re-raise it.
    """

    error_type: type[BaseException]

    async def perform(self, request: ExchangeRequest) -> ExchangeResponse: ...


@runtime_checkable
class AsyncHttpClient(Protocol):
    """The calling convention an OAuth2 library uses for token endpoint calls."""

    @property
    def error_type(self) -> type[BaseException]: ...

    async def __call__(self, request: ExchangeRequest) -> ExchangeResponse: ...
