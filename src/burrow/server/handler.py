"""ASGI dispatcher — routes one request through the compiled trie.

The only component that touches raw ASGI request scopes. Extracts the
host-injected context, matches the raw path, and sends the handler's
Response back through ASGI send().
"""

import logging
from contextvars import Token
from typing import Any

from burrow._internal.asgi import Receive, Scope, Send
from burrow._internal.invoke import invoke
from burrow.context import DEFAULT_CONTEXT_KEY, context_from_scope, context_var
from burrow.errors import ContextNotFoundInRequest
from burrow.http.request import Request, raw_path_from_scope
from burrow.http.response import Response, not_found
from burrow.routing.router import RouteMatch, Router
from burrow.server.sender import send_response

logger = logging.getLogger("burrow.routing")
server_logger = logging.getLogger("burrow.server")


async def dispatch(
    router: Router,
    request: Request,
) -> Response:
    """Produce the Response for *request*.

    Unmatched paths get the not-found response echoing the path. Errors
    raised by the matched handler propagate unchanged.
    """
    path = request.raw_path
    match = router.match(path)

    if match is None:
        return not_found(path)

    logger.debug(
        "matched = %r, remainder = %r",
        match.key.decode("utf-8", "replace"),
        match.remainder.decode("utf-8", "replace"),
    )
    return await _invoke_handler(match, request)


async def _invoke_handler(match: RouteMatch, request: Request) -> Response:
    """Call the matched handler with the request's context bound."""
    token: Token[Any] = context_var.set(request.context)
    try:
        response = await invoke(match.handler, match.remainder, request)
    finally:
        context_var.reset(token)

    if not isinstance(response, Response):
        name = match.leaf.name or repr(match.handler)
        msg = f"Handler {name} returned {type(response).__name__}, expected Response"
        raise TypeError(msg)
    return response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    context_key: str = DEFAULT_CONTEXT_KEY,
) -> None:
    """Process a single HTTP request through the router."""
    if scope["type"] != "http":
        return

    context = context_from_scope(scope, context_key)
    if context is None:
        path = raw_path_from_scope(scope)
        server_logger.error(
            "No context under %r for %s; the host did not inject one",
            context_key,
            path.decode("utf-8", "replace"),
        )
        raise ContextNotFoundInRequest(path)

    request = Request.from_asgi(scope, receive, context=context)
    response = await dispatch(router, request)
    await send_response(response, send)
