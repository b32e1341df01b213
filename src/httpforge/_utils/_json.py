"""JSON helpers for request bodies.

Values are held as pydantic's ``JsonValue`` (str, int, float, bool, None,
list or dict of the same), so parsed raw fragments and plain string fields
can share one object without being stringified twice.
"""

import math
from typing import Dict

from pydantic import JsonValue, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, from_json

from ..models.errors import InvalidJSONFragment, SerializationError
from ..models.request import Field

_JSON_VALUE: TypeAdapter[JsonValue] = TypeAdapter(JsonValue)
_JSON_OBJECT: TypeAdapter[Dict[str, JsonValue]] = TypeAdapter(Dict[str, JsonValue])


def _is_finite(value: JsonValue) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, list):
        return all(_is_finite(item) for item in value)
    if isinstance(value, dict):
        return all(_is_finite(item) for item in value.values())
    return True


def parse_json_fragment(field: Field) -> JsonValue:
    """Parse the value of a raw JSON field.

    ``NaN``, ``Infinity`` and numbers too large for a float are rejected.

    Raises:
        InvalidJSONFragment: If the value is not a complete JSON document.
    """
    try:
        value = _JSON_VALUE.validate_python(from_json(field.value, allow_inf_nan=False))
    except (ValueError, ValidationError) as e:
        raise InvalidJSONFragment(field.name, field.value, e) from e

    if not _is_finite(value):
        raise InvalidJSONFragment(field.name, field.value)
    return value


def dump_json(obj: Dict[str, JsonValue]) -> bytes:
    try:
        return _JSON_OBJECT.dump_json(obj)
    except PydanticSerializationError as e:
        raise SerializationError(f"Failed to serialize JSON body: {e}") from e
