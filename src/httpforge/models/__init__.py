from .errors import (
    FileReadError,
    InvalidHostError,
    InvalidJSONFragment,
    JSONKeyCollisionError,
    RequestBuildError,
    SerializationError,
)
from .outbound import BodyTuple, OutboundRequest
from .request import Body, BodyKind, Field, Header, Request

__all__ = [
    "Body",
    "BodyKind",
    "BodyTuple",
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
]
