"""Assemble HTTP requests from declarative descriptions.

Example:
    >>> from httpforge import Request, Header, Field, build_http_request
    >>> request = Request(
    ...     method="GET",
    ...     url="https://localhost:8080/foo",
    ...     parameters=[Field(name="q", value="hello world")],
    ... )
    >>> str(build_http_request(request).url)
    'https://localhost:8080/foo?q=hello+world'
"""

from ._builders import build_http_body, build_http_header, build_http_request
from ._config import Config
from ._services import TransportService
from ._utils.constants import VERSION as __version__
from .models import (
    Body,
    BodyKind,
    BodyTuple,
    Field,
    FileReadError,
    Header,
    InvalidHostError,
    InvalidJSONFragment,
    JSONKeyCollisionError,
    OutboundRequest,
    Request,
    RequestBuildError,
    SerializationError,
)

__all__ = [
    "__version__",
    "Body",
    "BodyKind",
    "BodyTuple",
    "Config",
    "Field",
    "FileReadError",
    "Header",
    "InvalidHostError",
    "InvalidJSONFragment",
    "JSONKeyCollisionError",
    "OutboundRequest",
    "Request",
    "RequestBuildError",
    "SerializationError",
    "TransportService",
    "build_http_body",
    "build_http_header",
    "build_http_request",
]
