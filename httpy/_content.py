from __future__ import annotations

import enum
import re
import typing

# RFC 7230 token and RFC 7231 media-type grammar.
_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_QUOTED_STRING = r'"(?:[^"\\]|\\.)*"'

MEDIA_TYPE_REGEX = re.compile(rf"^\s*(?P<type>{_TOKEN})/(?P<subtype>{_TOKEN})\s*(?P<params>.*)$")
PARAMETER_REGEX = re.compile(
    rf"\s*;\s*(?P<name>{_TOKEN})=(?P<value>{_TOKEN}|{_QUOTED_STRING})\s*"
)

JSON_ESSENCE = "application/json"


class ContentKind(enum.Enum):
    JSON = "json"
    TEXT = "text"
    UNKNOWN = "unknown"


class MimeType(typing.NamedTuple):
    type: str
    subtype: str
    params: dict[str, str]

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"


def parse_mime(value: str) -> MimeType | None:
    """Parse a ``Content-Type`` value, returning ``None`` if it is malformed."""
    match = MEDIA_TYPE_REGEX.match(value)
    if match is None:
        return None

    params: dict[str, str] = {}
    rest = match.group("params")
    pos = 0
    while pos < len(rest):
        param = PARAMETER_REGEX.match(rest, pos)
        if param is None:
            # Tolerate a single trailing ";" as browsers do.
            if rest[pos:].strip() == ";":
                break
            return None
        param_value = param.group("value")
        if param_value.startswith('"'):
            param_value = re.sub(r"\\(.)", r"\1", param_value[1:-1])
        params[param.group("name").lower()] = param_value
        pos = param.end()

    return MimeType(match.group("type").lower(), match.group("subtype").lower(), params)


def classify(content_type: str | None) -> ContentKind:
    if content_type is None:
        return ContentKind.UNKNOWN
    mime = parse_mime(content_type)
    if mime is None:
        return ContentKind.UNKNOWN
    if mime.essence == JSON_ESSENCE:
        return ContentKind.JSON
    return ContentKind.TEXT
