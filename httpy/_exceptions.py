from __future__ import annotations


class HttpyError(Exception):
    """Base class for errors raised by httpy itself.

    Transport failures are not wrapped: they surface as ``httpx.HTTPError``.
    """


class ParseError(HttpyError, ValueError):
    """A command-line token was rejected before any network activity."""

    def __init__(self, message: str, *, token: str) -> None:
        super().__init__(message)
        self.token = token


class MalformedPair(ParseError):
    def __init__(self, token: str) -> None:
        super().__init__(
            f"Failed to parse {token!r}. Expected 'key=value'.", token=token
        )


class InvalidURL(ParseError):
    def __init__(self, message: str, *, token: str = "") -> None:
        super().__init__(message, token=token)
