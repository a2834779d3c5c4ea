"""Emit a burrow Response as the two ASGI messages a server expects."""

from burrow._internal.asgi import Send
from burrow.http.response import Response

# Statuses that never carry a message body (RFC 9110)
_BODILESS = frozenset({204, 304})


def _latin1(value: str) -> bytes:
    return value.encode("latin-1")


async def send_response(response: Response, send: Send) -> None:
    """Send *response* as ``http.response.start`` then ``http.response.body``.

    Header names are lowercased. ``content-length`` always reflects the
    bytes actually sent, which are none for 1xx, 204 and 304.
    """
    status = response.status
    body = b"" if status < 200 or status in _BODILESS else response.body_bytes

    headers = [(b"content-type", _latin1(response.content_type))]
    headers.extend((_latin1(name.lower()), _latin1(value)) for name, value in response.headers)
    headers.append((b"content-length", str(len(body)).encode("ascii")))

    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": body})
