from ._files import read_file_field, resolve_field_text, resolve_field_value
from ._json import dump_json, parse_json_fragment
from ._url import merge_query, override_authority

__all__ = [
    "dump_json",
    "merge_query",
    "override_authority",
    "parse_json_fragment",
    "read_file_field",
    "resolve_field_text",
    "resolve_field_value",
]
