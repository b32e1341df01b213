from typing import List, Tuple

from httpx import Headers

from ..models.request import Field, Request
from .._utils import resolve_field_value


def _encode(value) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def _header_item(field: Field) -> Tuple[bytes, bytes]:
    return _encode(field.name), _encode(resolve_field_value(field))


def build_http_header(request: Request) -> Headers:
    """Collect the header fields of ``request`` into a multi-value header map.

    Fields sharing a name are appended, never replaced, in input order.
    Literal values are UTF-8 encoded; file-backed values are used byte for byte.

    Raises:
        FileReadError: If a file-backed field cannot be read.
    """
    items: List[Tuple[bytes, bytes]] = [
        _header_item(field) for field in request.header.fields
    ]
    return Headers(items)
