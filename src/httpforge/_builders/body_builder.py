from typing import Dict
from urllib.parse import urlencode

from pydantic import JsonValue

from ..models.errors import JSONKeyCollisionError
from ..models.outbound import BodyTuple
from ..models.request import Body, BodyKind, Request
from .._utils import dump_json, parse_json_fragment, resolve_field_text, resolve_field_value
from .._utils.constants import CONTENT_TYPE_FORM, CONTENT_TYPE_JSON


def build_http_body(request: Request) -> BodyTuple:
    """Materialize the body of ``request`` according to its kind.

    Returns:
        BodyTuple: content bytes, content type and exact content length.
            An empty body yields ``BodyTuple()``.

    Raises:
        FileReadError: If a file-backed field cannot be read.
        InvalidJSONFragment: If a raw JSON field is not valid JSON.
        JSONKeyCollisionError: If two JSON body fields share a name.
    """
    body = request.body
    if body.kind == BodyKind.EMPTY:
        return BodyTuple()
    if body.kind == BodyKind.JSON:
        return _build_json_body(body)
    if body.kind == BodyKind.FORM:
        return _build_form_body(body)
    raise ValueError(f"Unknown body kind: {body.kind!r}")


def _build_json_body(body: Body) -> BodyTuple:
    obj: Dict[str, JsonValue] = {}

    for field in body.fields:
        if field.name in obj:
            raise JSONKeyCollisionError(field.name)
        obj[field.name] = resolve_field_text(field)

    for field in body.raw_json_fields:
        if field.name in obj:
            raise JSONKeyCollisionError(field.name)
        obj[field.name] = parse_json_fragment(field)

    content = dump_json(obj)
    return BodyTuple(
        content=content,
        content_type=CONTENT_TYPE_JSON,
        content_length=len(content),
    )


def _build_form_body(body: Body) -> BodyTuple:
    encoded = urlencode([(field.name, resolve_field_value(field)) for field in body.fields])
    content = encoded.encode("ascii")
    return BodyTuple(
        content=content,
        content_type=CONTENT_TYPE_FORM,
        content_length=len(content),
    )
