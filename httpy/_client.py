from __future__ import annotations

import logging
import typing

import httpx

from .__version__ import __title__, __version__
from ._models import Command, Get, KVPair, Post, fold_pairs

logger = logging.getLogger("httpy.client")

DEFAULT_HEADERS = {
    "X-Powered-By": __title__,
    "User-Agent": f"{__title__}/{__version__}",
}


def build_client(
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create the one ``httpx.Client`` used for the lifetime of the process.

    Default headers are attached here so every request identifies the tool.
    Redirects are followed; timeouts are left at the httpx defaults.
    """
    return httpx.Client(
        headers=DEFAULT_HEADERS,
        follow_redirects=True,
        transport=transport,
    )


def execute_get(client: httpx.Client, url: str) -> httpx.Response:
    logger.debug("GET %s", url)
    response = client.get(url)
    logger.debug("GET %s -> %s", url, response.status_code)
    return response


def execute_post(
    client: httpx.Client,
    url: str,
    pairs: typing.Iterable[KVPair],
) -> httpx.Response:
    body = fold_pairs(pairs)
    logger.debug("POST %s with %d field(s)", url, len(body))
    response = client.post(url, json=body)
    logger.debug("POST %s -> %s", url, response.status_code)
    return response


def dispatch(client: httpx.Client, command: Command) -> httpx.Response:
    if isinstance(command, Post):
        return execute_post(client, command.url, command.body)
    if isinstance(command, Get):
        return execute_get(client, command.url)
    raise TypeError(f"Unsupported command: {command!r}")
