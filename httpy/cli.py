from __future__ import annotations

import sys
import typing

import click
import httpx
from rich.console import Console
from rich.text import Text

from .__version__ import __description__, __title__, __version__
from ._client import build_client, dispatch
from ._exceptions import ParseError
from ._models import Command, Get, KVPair, Post, RenderedResponse, parse_kv_pair
from ._render import format_response_plain, print_response_rich
from ._urlparse import validate_url

# ---------------------------------------------------------------------------
# Argument types (rejected tokens never reach the network)
# ---------------------------------------------------------------------------


class URLParamType(click.ParamType):
    name = "url"

    def convert(
        self, value: typing.Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> str:
        try:
            return validate_url(value)
        except ParseError as exc:
            self.fail(str(exc), param, ctx)


class KVPairParamType(click.ParamType):
    name = "key=value"

    def convert(
        self, value: typing.Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> KVPair:
        if isinstance(value, KVPair):
            return value
        try:
            return parse_kv_pair(value)
        except ParseError as exc:
            self.fail(str(exc), param, ctx)


URL = URLParamType()
KV_PAIR = KVPairParamType()


# ---------------------------------------------------------------------------
# Request / response cycle
# ---------------------------------------------------------------------------


def stdout_is_terminal() -> bool:
    return sys.stdout.isatty()


def run(command: Command) -> None:
    use_rich = stdout_is_terminal()

    try:
        with build_client() as client:
            response = dispatch(client, command)
    except httpx.HTTPError as exc:
        if use_rich:
            console = Console(stderr=True)
            console.print(Text.assemble((type(exc).__name__, "bold red"), f": {exc}"))
        else:
            click.echo(f"{type(exc).__name__}: {exc}", err=False)
        sys.exit(1)

    rendered = RenderedResponse.from_response(response)
    if use_rich:
        print_response_rich(Console(), rendered)
    else:
        click.echo(format_response_plain(rendered))


# ---------------------------------------------------------------------------
# CLI commands
# ---------------------------------------------------------------------------


@click.group(help=__description__)
@click.version_option(__version__, prog_name=__title__)
def main() -> None:
    pass


@main.command(help="Send a GET request to URL.")
@click.argument("url", type=URL)
def get(url: str) -> None:
    run(Get(url))


@main.command(help="Send a POST request to URL with a JSON body built from key=value pairs.")
@click.argument("url", type=URL)
@click.argument("body", nargs=-1, type=KV_PAIR)
def post(url: str, body: tuple[KVPair, ...]) -> None:
    run(Post(url, tuple(body)))
