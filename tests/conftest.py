from __future__ import annotations

import pytest

from oauth2_http_client import ExchangeRequest, ExchangeResponse


@pytest.fixture()
def refresh_request() -> ExchangeRequest:
    return ExchangeRequest(
        "POST",
        "https://auth.example/token",
        [("content-type", "application/x-www-form-urlencoded")],
        b"grant_type=refresh_token&refresh_token=abc",
    )


@pytest.fixture()
def token_response() -> ExchangeResponse:
    return ExchangeResponse(
        200,
        [("content-type", "application/json")],
        b'{"access_token":"xyz"}',
    )
