from enum import Enum
from typing import List

from httpx import URL
from pydantic import BaseModel, ConfigDict, Field as PydanticField, field_validator


class Field(BaseModel):
    """One header, query parameter or body entry.

    When ``is_file`` is set, ``value`` is a path and the file contents are
    used in its place when the request is built.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    is_file: bool = False


class Header(BaseModel):
    fields: List[Field] = PydanticField(default_factory=list)


class BodyKind(str, Enum):
    EMPTY = "empty"
    JSON = "json"
    FORM = "form"


class Body(BaseModel):
    kind: BodyKind = BodyKind.EMPTY
    fields: List[Field] = PydanticField(default_factory=list)
    # Values are inserted as already-formatted JSON; never file-backed.
    raw_json_fields: List[Field] = PydanticField(default_factory=list)


class Request(BaseModel):
    """Declarative description of an HTTP request, as produced by the CLI."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    method: str
    url: URL
    parameters: List[Field] = PydanticField(default_factory=list)
    header: Header = PydanticField(default_factory=Header)
    body: Body = PydanticField(default_factory=Body)

    @field_validator("url", mode="before")
    @classmethod
    def _parse_url(cls, value):
        if isinstance(value, str):
            return URL(value)
        return value
