from __future__ import annotations

import ipaddress
import re
import typing

import idna

from ._exceptions import InvalidURL

MAX_URL_LENGTH = 65536

URL_REGEX = re.compile(
    r"(?:(?P<scheme>[a-zA-Z][a-zA-Z0-9+.-]*):)?"
    r"(?://(?P<authority>[^/?#]*))?"
    r"(?P<path>[^?#]*)"
    r"(?:\?(?P<query>[^#]*))?"
    r"(?:#(?P<fragment>.*))?"
)

AUTHORITY_REGEX = re.compile(
    r"(?:(?P<userinfo>.*)@)?(?P<host>(\[.*\]|[^:@]*)):?(?P<port>.*)?"
)

IPv4_STYLE_HOSTNAME = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+$")
IPv6_STYLE_HOSTNAME = re.compile(r"^\[.*\]$")
FORBIDDEN_HOST_CHARACTERS = re.compile(r"[\s#%/:<>?@\[\\\]^|]")


class ParseResult(typing.NamedTuple):
    scheme: str
    userinfo: str
    host: str
    port: int | None
    path: str
    query: str | None
    fragment: str | None

    @property
    def is_absolute(self) -> bool:
        return bool(self.scheme) and bool(self.host)


def _validate_non_printable(value: str) -> None:
    if any(char.isascii() and not char.isprintable() for char in value):
        char = next(c for c in value if c.isascii() and not c.isprintable())
        raise InvalidURL(
            f"Invalid URL {value!r}: non-printable ASCII character {char!r} at position {value.find(char)}.",
            token=value,
        )


def urlparse(url: str) -> ParseResult:
    """Split ``url`` into its components, validating each one.

    Unlike a full URL parser no percent-encoding or path normalisation is
    applied: the components are only checked and the caller keeps its string.
    """
    if len(url) > MAX_URL_LENGTH:
        raise InvalidURL("URL too long", token=url)

    _validate_non_printable(url)

    url_dict = URL_REGEX.match(url).groupdict()  # type: ignore[union-attr]

    scheme = url_dict["scheme"] or ""
    authority = url_dict["authority"] or ""
    path = url_dict["path"] or ""

    authority_dict = AUTHORITY_REGEX.match(authority).groupdict()  # type: ignore[union-attr]

    userinfo = authority_dict["userinfo"] or ""
    host = authority_dict["host"] or ""
    port = authority_dict["port"]

    parsed_scheme = scheme.lower()
    try:
        parsed_host = encode_host(host)
        parsed_port = normalize_port(port, parsed_scheme)
        validate_path(
            path,
            has_scheme=bool(parsed_scheme),
            has_authority=bool(userinfo or parsed_host or parsed_port is not None),
        )
    except InvalidURL as exc:
        raise InvalidURL(f"Invalid URL {url!r}: {exc}", token=url) from None

    return ParseResult(
        parsed_scheme,
        userinfo,
        parsed_host,
        parsed_port,
        path,
        url_dict["query"],
        url_dict["fragment"],
    )


def validate_url(token: str) -> str:
    """Return ``token`` unchanged if it is an absolute URL.

    An absolute URL needs at least a scheme and a host. ``InvalidURL`` is
    raised otherwise, carrying the rejected token.
    """
    parsed = urlparse(token)
    if not parsed.is_absolute:
        missing = "host" if parsed.scheme else "scheme"
        raise InvalidURL(f"Invalid URL {token!r}: missing {missing}.", token=token)
    return token


def encode_host(host: str) -> str:
    if not host:
        return ""

    if IPv4_STYLE_HOSTNAME.match(host):
        try:
            ipaddress.IPv4Address(host)
        except ipaddress.AddressValueError:
            raise InvalidURL(f"Invalid IPv4 address: {host!r}")
        return host

    if IPv6_STYLE_HOSTNAME.match(host):
        try:
            ipaddress.IPv6Address(host[1:-1])
        except ipaddress.AddressValueError:
            raise InvalidURL(f"Invalid IPv6 address: {host!r}")
        return host[1:-1]

    if FORBIDDEN_HOST_CHARACTERS.search(host):
        raise InvalidURL(f"Invalid character in hostname: {host!r}")

    if host.isascii():
        return host.lower()

    try:
        return idna.encode(host.lower()).decode("ascii")
    except idna.IDNAError:
        raise InvalidURL(f"Invalid IDNA hostname: {host!r}")


def normalize_port(port: str | None, scheme: str) -> int | None:
    if not port:
        return None
    if not (port.isascii() and port.isdigit()):
        raise InvalidURL(f"Invalid port: {port!r}")
    port_as_int = int(port)
    if port_as_int > 65535:
        raise InvalidURL(f"Invalid port: {port!r}")
    default = {"ftp": 21, "http": 80, "https": 443, "ws": 80, "wss": 443}.get(scheme)
    return None if port_as_int == default else port_as_int


def validate_path(path: str, has_scheme: bool, has_authority: bool) -> None:
    if has_authority and path and not path.startswith("/"):
        raise InvalidURL("For absolute URLs, path must be empty or begin with '/'")
    if not has_scheme and not has_authority:
        if path.startswith("//"):
            raise InvalidURL("Relative URLs cannot have a path starting with '//'")
        if path.startswith(":"):
            raise InvalidURL("Relative URLs cannot have a path starting with ':'")
