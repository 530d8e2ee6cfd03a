from __future__ import annotations

import json
import logging

from rich.console import Console
from rich.syntax import Syntax
from rich.text import Text

from ._content import ContentKind, classify
from ._models import RenderedResponse

logger = logging.getLogger("httpy.render")


def _status_color(status_code: int) -> str:
    """Return a rich color name based on HTTP status category."""
    if status_code < 200:
        return "cyan"
    elif status_code < 300:
        return "green"
    elif status_code < 400:
        return "yellow"
    elif status_code < 500:
        return "red"
    else:
        return "bold red"


def pretty_json(text: str) -> str | None:
    """Re-indent a JSON document, or return ``None`` if it does not parse."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None
    return json.dumps(data, indent=4, ensure_ascii=False)


def _formatted_json(rendered: RenderedResponse) -> str | None:
    kind = classify(rendered.content_type)
    if kind is ContentKind.UNKNOWN and rendered.content_type is not None:
        logger.debug("Unparsable content type %r, printing body as-is", rendered.content_type)
    if kind is not ContentKind.JSON:
        return None
    formatted = pretty_json(rendered.body)
    if formatted is None:
        logger.debug("Body declared as JSON did not parse, printing it as-is")
    return formatted


def format_body(rendered: RenderedResponse) -> str:
    formatted = _formatted_json(rendered)
    return rendered.body if formatted is None else formatted


# ---------------------------------------------------------------------------
# Plain-text formatter (used when stdout is not a terminal)
# ---------------------------------------------------------------------------


def format_response_plain(rendered: RenderedResponse) -> str:
    lines: list[str] = [rendered.status_line, ""]

    for key, value in rendered.headers:
        lines.append(f"{key}: {value}")

    lines.append("")
    lines.append(format_body(rendered))

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Rich formatter
# ---------------------------------------------------------------------------


def print_response_rich(console: Console, rendered: RenderedResponse) -> None:
    """Pretty-print a response using rich."""
    color = _status_color(rendered.status_code)

    # Status line
    status_line = Text()
    status_line.append(f"{rendered.http_version} ", style="bold dim")
    status_line.append(f"{rendered.status_code}", style=f"bold {color}")
    if rendered.reason_phrase:
        status_line.append(f" {rendered.reason_phrase}", style=color)
    console.print(status_line)
    console.print()

    # Headers
    for key, value in rendered.headers:
        header_text = Text()
        header_text.append(f"{key}", style="dim cyan")
        header_text.append(": ", style="dim")
        header_text.append(value)
        console.print(header_text)

    console.print()

    # Body
    formatted = _formatted_json(rendered)
    if formatted is not None:
        console.print(Syntax(formatted, "json", theme="monokai", word_wrap=True))
    else:
        console.print(Text(rendered.body))
