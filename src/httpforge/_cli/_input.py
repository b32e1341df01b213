"""Parse command-line arguments into a :class:`~httpforge.models.Request`.

Items follow the familiar httpie syntax::

    name==value     query parameter
    name:=json      raw JSON body field
    name=@path      body field read from a file
    Name:@path      header read from a file
    Name:value      header
    name=value      body field
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import httpx

from ..models.request import Body, BodyKind, Field, Header, Request

SEP_QUERY = "=="
SEP_RAW_JSON = ":="
SEP_DATA_FILE = "=@"
SEP_HEADER_FILE = ":@"
SEP_HEADER = ":"
SEP_DATA = "="

# Longest first, so that "==" wins over "=" at the same position.
_SEPARATORS = (SEP_QUERY, SEP_RAW_JSON, SEP_DATA_FILE, SEP_HEADER_FILE, SEP_HEADER, SEP_DATA)

_METHOD_RE = re.compile(r"^[A-Z]+$")


class InputError(ValueError):
    pass


@dataclass
class ParsedItems:
    parameters: List[Field] = field(default_factory=list)
    headers: List[Field] = field(default_factory=list)
    body_fields: List[Field] = field(default_factory=list)
    raw_json_fields: List[Field] = field(default_factory=list)


def split_item(item: str) -> Tuple[str, str, str]:
    """Split ``item`` at its earliest separator.

    Returns:
        A ``(name, separator, value)`` tuple.

    Raises:
        InputError: If the item has no separator or an empty name.
    """
    best: Optional[Tuple[int, str]] = None
    for sep in _SEPARATORS:
        index = item.find(sep)
        if index == -1:
            continue
        if best is None or index < best[0]:
            best = (index, sep)

    if best is None:
        raise InputError(f"Invalid item '{item}': missing separator")

    index, sep = best
    name = item[:index]
    if not name:
        raise InputError(f"Invalid item '{item}': empty name")
    return name, sep, item[index + len(sep):]


def parse_items(items: Sequence[str]) -> ParsedItems:
    parsed = ParsedItems()
    for item in items:
        name, sep, value = split_item(item)
        if sep == SEP_QUERY:
            parsed.parameters.append(Field(name=name, value=value))
        elif sep == SEP_RAW_JSON:
            parsed.raw_json_fields.append(Field(name=name, value=value))
        elif sep == SEP_DATA_FILE:
            parsed.body_fields.append(Field(name=name, value=value, is_file=True))
        elif sep == SEP_HEADER_FILE:
            parsed.headers.append(Field(name=name, value=value, is_file=True))
        elif sep == SEP_HEADER:
            parsed.headers.append(Field(name=name, value=value))
        else:
            parsed.body_fields.append(Field(name=name, value=value))
    return parsed


def parse_url(raw_url: str) -> httpx.URL:
    """Parse a URL, filling in the scheme and the ``:port/path`` localhost shorthand."""
    if raw_url.startswith(":"):
        raw_url = f"localhost{raw_url}"
    if "://" not in raw_url:
        raw_url = f"http://{raw_url}"

    try:
        url = httpx.URL(raw_url)
    except httpx.InvalidURL as e:
        raise InputError(f"Invalid URL '{raw_url}': {e}") from e
    if not url.host:
        raise InputError(f"Invalid URL '{raw_url}': missing host")
    return url


def parse_args(args: Sequence[str], form: bool = False) -> Request:
    """Turn ``[METHOD] URL [ITEM ...]`` into a request description."""
    if not args:
        raise InputError("URL is required")

    method: Optional[str] = None
    if len(args) >= 2 and _METHOD_RE.match(args[0]):
        method = args[0]
        args = args[1:]

    url = parse_url(args[0])
    items = parse_items(args[1:])

    has_body = bool(items.body_fields or items.raw_json_fields)
    if not has_body:
        kind = BodyKind.EMPTY
    elif form:
        if items.raw_json_fields:
            raise InputError("Raw JSON fields (name:=value) cannot be used with --form")
        kind = BodyKind.FORM
    else:
        kind = BodyKind.JSON

    if method is None:
        method = "POST" if has_body else "GET"

    return Request(
        method=method,
        url=url,
        parameters=items.parameters,
        header=Header(fields=items.headers),
        body=Body(
            kind=kind,
            fields=items.body_fields,
            raw_json_fields=items.raw_json_fields,
        ),
    )
