from .backends import AiohttpInterface, HttpxInterface
from .client import OAuth2Client
from .errors import InvalidRequest, OAuth2HttpClientError, ProtocolMismatch, TransportError
from .exchange import ExchangeRequest, ExchangeResponse, Headers, HttpMethod
from .interface import AsyncHttpClient, HttpInterface
from .transport import ExchangeTransport

__all__ = [
    "OAuth2HttpClientError",
    "InvalidRequest",
    "ProtocolMismatch",
    "TransportError",
    "HttpMethod",
    "Headers",
    "ExchangeRequest",
    "ExchangeResponse",
    "HttpInterface",
    "AsyncHttpClient",
    "OAuth2Client",
    "AiohttpInterface",
    "HttpxInterface",
    "ExchangeTransport",
]
