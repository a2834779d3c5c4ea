"""Burrow application class.

An App is compiled when it is constructed: the route tree is flattened
into a frozen trie before the first request can arrive, so serving needs
no locks.
"""

import logging
from collections.abc import Iterable
from typing import Any

from burrow._internal.asgi import Receive, Scope, Send
from burrow._internal.invoke import invoke
from burrow._internal.types import Hook
from burrow.config import AppConfig
from burrow.errors import ConfigurationError
from burrow.routing.route import Route
from burrow.routing.router import Router
from burrow.server.handler import handle_request

logger = logging.getLogger("burrow.server")


class App:
    """The burrow application — an ASGI 3 callable over a compiled router.

    Usage::

        app = prepare_routes(
            [handle_route("status", status)],
            context=service_state,
        )
        app.run()

    The context is the opaque per-request value the host injects; it is
    only used by ``run()``. Apps handed to another server must be
    wrapped with ``burrow.server.host.inject_context`` instead.
    """

    __slots__ = ("_router", "_shutdown_hooks", "_startup_hooks", "config", "context")

    def __init__(
        self,
        routes: Iterable[Route],
        config: AppConfig | None = None,
        *,
        context: Any = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self.context: Any = context
        self._router: Router = Router.from_routes(routes, strict=self.config.strict_routes)
        self._startup_hooks: list[Hook] = []
        self._shutdown_hooks: list[Hook] = []

    @property
    def router(self) -> Router:
        """The compiled, read-only router."""
        return self._router

    # -- Lifecycle hooks --

    def on_startup(self, func: Hook) -> Hook:
        """Register a function to run when the server starts.

        Supports both sync and async functions::

            @app.on_startup
            async def connect():
                ...
        """
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Hook) -> Hook:
        """Register a function to run when the server shuts down."""
        self._shutdown_hooks.append(func)
        return func

    # -- Server --

    def run(
        self,
        host: str | None = None,
        port: int | None = None,
        *,
        context: Any = None,
    ) -> None:
        """Start serving, injecting *context* (or ``self.context``) into every request.

        Raises ``ConfigurationError`` if there is no context to inject:
        every request would otherwise fail in the dispatcher.
        """
        from burrow.server.host import inject_context
        from burrow.server.serve import run_server

        ctx = context if context is not None else self.context
        if ctx is None:
            msg = (
                "No request context to inject. Pass context= to App(), "
                "prepare_routes() or App.run()."
            )
            raise ConfigurationError(msg)

        if self.config.debug:
            from burrow.server.terminal import format_route_table

            print(format_route_table(self._router))

        run_server(
            inject_context(self, ctx, key=self.config.context_key),
            host if host is not None else self.config.host,
            port if port is not None else self.config.port,
            workers=self.config.workers,
            reload=self.config.reload,
            log_level=self.config.log_level,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes
        to the dispatcher. Handler errors propagate to the server.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            context_key=self.config.context_key,
        )

    async def _handle_lifespan(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        """Run the ASGI lifespan protocol.

        Runs registered startup/shutdown hooks and signals completion
        back to the server.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    for hook in self._startup_hooks:
                        await invoke(hook)
                except Exception as exc:
                    logger.exception("Startup hook failed")
                    await send(
                        {
                            "type": "lifespan.startup.failed",
                            "message": str(exc),
                        }
                    )
                    return
                logger.debug("Startup complete (%d routes)", len(self._router))
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                for hook in self._shutdown_hooks:
                    await invoke(hook)
                await send({"type": "lifespan.shutdown.complete"})
                return


def prepare_routes(
    routes: Iterable[Route],
    config: AppConfig | None = None,
    *,
    context: Any = None,
) -> App:
    """Compile a list of routes into an ASGI application.

    ::

        app = prepare_routes([
            handle_route("update", update),
            handle_route("status", status),
        ])
    """
    return App(routes, config, context=context)
