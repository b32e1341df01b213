"""Render requests and responses as HTTP-like text."""

import json
from typing import Iterable, List, Optional, Tuple

import httpx

from ...models.outbound import OutboundRequest


def format_request(outbound: OutboundRequest) -> str:
    """Format an assembled request as it will go over the wire.

    The ``Host`` and ``Content-Length`` headers are the ones httpx adds on send.
    """
    request = outbound.to_httpx()
    target = request.url.raw_path.decode("ascii")
    lines = [f"{request.method} {target} HTTP/1.1"]
    lines.extend(_format_headers(request.headers.raw))
    return _join(lines, outbound.content, request.headers.get("content-type"))


def format_response(response: httpx.Response) -> str:
    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}"]
    lines.extend(_format_headers(response.headers.raw))
    return _join(lines, response.content, response.headers.get("content-type"))


def _format_headers(raw: Iterable[Tuple[bytes, bytes]]) -> List[str]:
    return [f"{key.decode('latin-1')}: {value.decode('latin-1')}" for key, value in raw]


def _join(lines: List[str], content: Optional[bytes], content_type: Optional[str]) -> str:
    text = "\n".join(lines)
    if content:
        text += "\n\n" + format_body(content, content_type)
    return text


def format_body(content: bytes, content_type: Optional[str]) -> str:
    """Decode a body for display, pretty-printing JSON."""
    text = content.decode("utf-8", errors="replace")
    if content_type and "json" in content_type:
        try:
            return json.dumps(json.loads(text), indent=2, ensure_ascii=False)
        except ValueError:
            return text
    return text
