import pytest

import httpy
from httpy import ContentKind


@pytest.mark.parametrize(
    "content_type,kind",
    [
        ("application/json", ContentKind.JSON),
        ("application/json; charset=utf-8", ContentKind.JSON),
        ("Application/JSON", ContentKind.JSON),
        ("text/plain", ContentKind.TEXT),
        ("text/html; charset=utf-8", ContentKind.TEXT),
        ("application/vnd.api+json", ContentKind.TEXT),
        ("application/json-seq", ContentKind.TEXT),
        (None, ContentKind.UNKNOWN),
        ("", ContentKind.UNKNOWN),
        ("json", ContentKind.UNKNOWN),
        ("application/json garbage", ContentKind.UNKNOWN),
        ("application/json; charset", ContentKind.UNKNOWN),
    ],
)
def test_classify(content_type, kind):
    assert httpy.classify(content_type) is kind


def test_parse_mime():
    mime = httpy.parse_mime('Text/HTML; Charset=UTF-8; boundary="a \\"b\\""')
    assert mime == httpy.MimeType("text", "html", {"charset": "UTF-8", "boundary": 'a "b"'})
    assert mime.essence == "text/html"


def test_parse_mime_trailing_semicolon():
    mime = httpy.parse_mime("text/plain;")
    assert mime is not None
    assert mime.essence == "text/plain"
    assert mime.params == {}


@pytest.mark.parametrize("value", ["", "text", "text/", "/plain", "text/plain; =x"])
def test_parse_mime_invalid(value):
    assert httpy.parse_mime(value) is None
