"""Burrow — a longest-prefix request router for ASGI.

Declare a tree of routes, compile it once into a byte-keyed prefix trie,
and serve. Each request goes to the handler registered under the longest
prefix of its path, along with whatever part of the path is left over.

Basic usage::

    from burrow import Response, capture_route, compose, handle_route, literal_route, prepare_routes

    def status(request):
        return Response("ok")

    def user(remainder, request):
        return Response(b"user " + remainder.lstrip(b"/"))

    app = prepare_routes(
        [
            handle_route("status", status),
            compose(literal_route("api"), [capture_route("users", user)]),
        ],
        context={"service": "demo"},
    )
    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "BurrowError",
    "Branch",
    "ConfigurationError",
    "ContextNotFoundInRequest",
    "DuplicateRouteError",
    "Leaf",
    "Request",
    "Response",
    "Router",
    "capture_route",
    "compose",
    "get_context",
    "handle_route",
    "inject_context",
    "literal_route",
    "map_workers",
    "prepare_routes",
    "run_workers",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "App": "burrow.app",
    "prepare_routes": "burrow.app",
    "AppConfig": "burrow.config",
    "BurrowError": "burrow.errors",
    "ConfigurationError": "burrow.errors",
    "ContextNotFoundInRequest": "burrow.errors",
    "DuplicateRouteError": "burrow.errors",
    "Request": "burrow.http.request",
    "Response": "burrow.http.response",
    "Branch": "burrow.routing.route",
    "Leaf": "burrow.routing.route",
    "capture_route": "burrow.routing.route",
    "compose": "burrow.routing.route",
    "handle_route": "burrow.routing.route",
    "literal_route": "burrow.routing.route",
    "Router": "burrow.routing.router",
    "get_context": "burrow.context",
    "inject_context": "burrow.server.host",
    "map_workers": "burrow.workers",
    "run_workers": "burrow.workers",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import burrow`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
