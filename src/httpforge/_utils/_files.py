from typing import Union

from ..models.errors import FileReadError
from ..models.request import Field


def read_file_field(field: Field) -> bytes:
    """Read the whole file named by a file-backed field."""
    try:
        with open(field.value, "rb") as file:
            return file.read()
    except OSError as e:
        raise FileReadError(field.value, e) from e


def resolve_field_value(field: Field) -> Union[str, bytes]:
    """Return the literal value of a field, or the raw file contents if file-backed."""
    if field.is_file:
        return read_file_field(field)
    return field.value


def resolve_field_text(field: Field) -> str:
    value = resolve_field_value(field)
    if isinstance(value, bytes):
        # JSON strings must be valid Unicode
        return value.decode("utf-8", errors="replace")
    return value
