from __future__ import annotations

import typing

from ._exceptions import MalformedPair

if typing.TYPE_CHECKING:
    import httpx


class KVPair(typing.NamedTuple):
    key: str
    value: str


def parse_kv_pair(token: str) -> KVPair:
    """Parse a ``key=value`` command-line token.

    Only the first ``=`` separates key from value, so ``a=b=c`` yields the
    value ``b=c``. Either side may be empty.
    """
    key, sep, value = token.partition("=")
    if not sep:
        raise MalformedPair(token)
    return KVPair(key, value)


def fold_pairs(pairs: typing.Iterable[KVPair]) -> dict[str, str]:
    """Fold pairs into a mapping; a repeated key keeps its last value."""
    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body


class Get(typing.NamedTuple):
    url: str


class Post(typing.NamedTuple):
    url: str
    body: tuple[KVPair, ...] = ()


Command = typing.Union[Get, Post]


class RenderedResponse(typing.NamedTuple):
    http_version: str
    status_code: int
    reason_phrase: str
    headers: list[tuple[str, str]]
    body: str
    content_type: str | None

    @classmethod
    def from_response(cls, response: httpx.Response) -> RenderedResponse:
        # multi_items() keeps repeated headers apart, in the order received.
        return cls(
            http_version=response.http_version,
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            headers=response.headers.multi_items(),
            body=response.text,
            content_type=response.headers.get("content-type"),
        )

    @property
    def status_line(self) -> str:
        return f"{self.http_version} {self.status_code} {self.reason_phrase}".rstrip()
