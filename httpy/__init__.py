from .__version__ import __description__, __title__, __version__
from ._client import DEFAULT_HEADERS, build_client, dispatch, execute_get, execute_post
from ._content import ContentKind, MimeType, classify, parse_mime
from ._exceptions import HttpyError, InvalidURL, MalformedPair, ParseError
from ._models import Command, Get, KVPair, Post, RenderedResponse, fold_pairs, parse_kv_pair
from ._render import format_body, format_response_plain, print_response_rich
from ._urlparse import urlparse, validate_url
from .cli import main

_EXCLUDED_FROM_ALL = {"cli"}

__all__ = sorted(
    (
        member
        for member in list(vars().keys())
        if (
            not member.startswith("_")
            or member in ["__description__", "__title__", "__version__"]
        )
        and member not in _EXCLUDED_FROM_ALL
    ),
    key=str.casefold,
)
