from __future__ import annotations


class OAuth2HttpClientError(Exception):
    pass


class InvalidRequest(OAuth2HttpClientError, ValueError):
    """Raised when an exchange request cannot be constructed."""


class ProtocolMismatch(OAuth2HttpClientError):
    """Raised when a transport completed but produced something that is not an exchange response."""

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class TransportError(OAuth2HttpClientError):
    """Optional base class for errors raised by ``HttpInterface`` implementations.

    The adapter never raises this itself; transports may subclass it to give
    their failures a common ancestor.
    """
