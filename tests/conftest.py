import json
import typing
from unittest.mock import patch

import httpx
import pytest

import httpy


def app(request: httpx.Request) -> httpx.Response:
    if request.url.path.startswith("/post"):
        return echo_json(request)
    elif request.url.path.startswith("/json"):
        return httpx.Response(
            200,
            headers={"content-type": "application/json"},
            content=b'{"Hello":"world!"}',
        )
    elif request.url.path.startswith("/bad_json"):
        return httpx.Response(
            200,
            headers={"content-type": "application/json"},
            content=b"{not json",
        )
    elif request.url.path.startswith("/bad_content_type"):
        return httpx.Response(
            200,
            headers={"content-type": "this is not a mime type"},
            content=b'{"a":1}',
        )
    elif request.url.path.startswith("/no_content_type"):
        return httpx.Response(200, content=b'{"a":1}')
    elif request.url.path.startswith("/redirect_301"):
        return httpx.Response(301, headers={"location": "/text"})
    elif request.url.path.startswith("/status/404"):
        return httpx.Response(
            404, headers={"content-type": "text/plain"}, content=b"Not Found"
        )
    else:
        return httpx.Response(
            200, headers={"content-type": "text/plain"}, content=b"hello"
        )


def echo_json(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        200,
        headers={"content-type": "application/json"},
        content=json.dumps({"json": json.loads(request.content)}).encode("utf-8"),
    )


class RecordingTransport(httpx.MockTransport):
    """A mock transport that remembers every request it handled."""

    def __init__(self, handler: typing.Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport(app)


@pytest.fixture
def client(transport: RecordingTransport) -> typing.Iterator[httpx.Client]:
    with httpy.build_client(transport=transport) as client:
        yield client


@pytest.fixture
def cli_transport(transport: RecordingTransport) -> typing.Iterator[RecordingTransport]:
    """Route every request made by the CLI through ``transport``."""
    with patch("httpy.cli.build_client", lambda: httpy.build_client(transport=transport)):
        yield transport
