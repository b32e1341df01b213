import io
from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass
class BodyTuple:
    """Materialized request payload.

    ``BodyTuple()`` stands for an empty body: no content, no content type.
    """

    content: Optional[bytes] = None
    content_type: Optional[str] = None
    content_length: int = 0

    def stream(self) -> Optional[io.BytesIO]:
        if self.content is None:
            return None
        return io.BytesIO(self.content)


@dataclass
class OutboundRequest:
    """Fully assembled request, ready for the transport.

    ``host`` carries the ``Host`` override separately from ``headers``; when set,
    ``url`` already points at that authority.
    """

    method: str
    url: httpx.URL
    headers: httpx.Headers
    host: Optional[str] = None
    content: Optional[bytes] = None

    def to_httpx(self) -> httpx.Request:
        return httpx.Request(
            self.method,
            self.url,
            headers=self.headers,
            content=self.content,
        )
