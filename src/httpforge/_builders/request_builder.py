from httpx import Headers

from ..models.outbound import OutboundRequest
from ..models.request import Request
from .._utils import merge_query, override_authority
from .._utils.constants import (
    DEFAULT_USER_AGENT,
    HEADER_CONTENT_TYPE,
    HEADER_HOST,
    HEADER_USER_AGENT,
)
from .body_builder import build_http_body
from .header_builder import build_http_header


def build_http_request(
    request: Request, *, user_agent: str = DEFAULT_USER_AGENT
) -> OutboundRequest:
    """Assemble the outbound request described by ``request``.

    Explicit header fields always win over the computed ``Content-Type`` and the
    default ``User-Agent``. A ``Host`` header field is taken out of the header map
    and becomes the request's host override, which also replaces the authority
    of the URL.

    Args:
        request: The declarative request description.
        user_agent: Value of the ``User-Agent`` header when none is given.

    Returns:
        OutboundRequest: The assembled request. Nothing is sent.

    Raises:
        RequestBuildError: On the first failure. No partial request is returned.
    """
    url = merge_query(request.url, request.parameters)
    headers = build_http_header(request)
    body = build_http_body(request)

    if body.content_type is not None:
        _set_default(headers, HEADER_CONTENT_TYPE, body.content_type)
    _set_default(headers, HEADER_USER_AGENT, user_agent)

    host = None
    if HEADER_HOST in headers:
        host = headers.get_list(HEADER_HOST)[0].strip()
        del headers[HEADER_HOST]
        url = override_authority(url, host)

    return OutboundRequest(
        method=request.method,
        url=url,
        headers=headers,
        host=host,
        content=body.content,
    )


def _set_default(headers: Headers, name: str, value: str) -> None:
    if name not in headers:
        headers[name] = value
