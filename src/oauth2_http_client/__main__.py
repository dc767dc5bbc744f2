from __future__ import annotations

import argparse
import asyncio
import logging
import sys

import httpx

from .backends import HttpxInterface
from .client import OAuth2Client
from .errors import OAuth2HttpClientError
from .exchange import ExchangeRequest, ExchangeResponse, HttpMethod


def _parse_header(value: str) -> tuple[str, str]:
    name, sep, header_value = value.partition(":")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"expected NAME:VALUE, got {value!r}")
    return name.strip(), header_value.strip()


async def _run(request: ExchangeRequest, timeout: float) -> ExchangeResponse:
    # Bodies are printed as text; -H accept-encoding:... overrides this.
    async with httpx.AsyncClient(timeout=timeout, headers={"accept-encoding": "identity"}) as http:
        client = OAuth2Client(HttpxInterface(http))
        return await client(request)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="oauth2-http-client",
        description="Send one HTTP exchange through the OAuth2 HTTP adapter.",
    )
    parser.add_argument("method", choices=[method.value for method in HttpMethod], help="HTTP method")
    parser.add_argument("url", help="Absolute target URL")
    parser.add_argument(
        "-H",
        "--header",
        dest="headers",
        action="append",
        type=_parse_header,
        default=[],
        help="Request header as NAME:VALUE (repeatable)",
    )
    parser.add_argument("-d", "--data", default="", help="Request body, sent as UTF-8")
    parser.add_argument("--timeout", type=float, default=30.0, help="Transport timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log exchanges to stderr")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        request = ExchangeRequest(args.method, args.url, args.headers, args.data.encode("utf-8"))
        response = asyncio.run(_run(request, args.timeout))
    except OAuth2HttpClientError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except httpx.HTTPError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(response.status)
    for name, value in response.headers:
        print(f"{name}: {value}")
    print()
    sys.stdout.write(response.body.decode("utf-8", errors="replace"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
