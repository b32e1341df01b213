from .body_builder import build_http_body
from .header_builder import build_http_header
from .request_builder import build_http_request

__all__ = ["build_http_body", "build_http_header", "build_http_request"]
