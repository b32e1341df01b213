from typing import Optional


class RequestBuildError(Exception):
    """Base class for failures while assembling an outbound request."""


class FileReadError(RequestBuildError):
    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        self.message = f"Failed to read file '{path}': {cause}"
        super().__init__(self.message)


class InvalidJSONFragment(RequestBuildError):
    """Raised when a raw JSON body field does not hold valid JSON text."""

    def __init__(
        self, field_name: str, fragment: str, cause: Optional[Exception] = None
    ):
        self.field_name = field_name
        self.fragment = fragment
        self.cause = cause
        self.message = f"Invalid JSON in raw field '{field_name}': {fragment!r}"
        super().__init__(self.message)


class JSONKeyCollisionError(RequestBuildError):
    """Raised when two body fields would write the same top-level JSON key.

    Neither value is silently preferred: the request is rejected instead.
    """

    def __init__(self, key: str):
        self.key = key
        self.message = f"Duplicate key '{key}' in JSON body"
        super().__init__(self.message)


class SerializationError(RequestBuildError):
    def __init__(self, message: str = "Failed to serialize JSON body"):
        self.message = message
        super().__init__(self.message)


class InvalidHostError(RequestBuildError):
    """Raised when a ``Host`` header value is not a usable ``host[:port]`` authority."""

    def __init__(self, host: str, cause: Optional[Exception] = None):
        self.host = host
        self.cause = cause
        self.message = f"Invalid Host header value: {host!r}"
        super().__init__(self.message)
