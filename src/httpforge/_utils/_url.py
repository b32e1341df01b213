from typing import Sequence
from urllib.parse import urlencode

from httpx import URL, InvalidURL

from ..models.errors import InvalidHostError
from ..models.request import Field
from ._files import resolve_field_value


def merge_query(url: URL, parameters: Sequence[Field]) -> URL:
    """Append query parameters to the query string already present in ``url``.

    Existing parameters are kept as they are; nothing is deduplicated.
    """
    if not parameters:
        return url

    encoded = urlencode([(p.name, resolve_field_value(p)) for p in parameters])
    existing = url.query.decode("ascii")
    query = f"{existing}&{encoded}" if existing else encoded
    return url.copy_with(query=query.encode("ascii"))


def override_authority(url: URL, host: str) -> URL:
    """Point ``url`` at ``host`` (``name`` or ``name:port``).

    Surrounding whitespace is ignored and internationalized names are
    IDNA-encoded.

    Raises:
        InvalidHostError: If ``host`` is not a bare ``host[:port]`` authority.
    """
    try:
        authority = URL(f"//{host.strip()}")
        if not authority.host or authority.raw_path not in (b"", b"/") or authority.query:
            raise InvalidHostError(host)
        return url.copy_with(host=authority.host, port=authority.port)
    except (InvalidURL, UnicodeError) as e:
        raise InvalidHostError(host, e) from e
