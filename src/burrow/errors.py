"""Burrow exception hierarchy.

Shared across the route model, compiler, dispatcher and app so every
module raises and catches the same types.
"""


class BurrowError(Exception):
    """Base for all burrow-specific errors."""


class ConfigurationError(BurrowError):
    """Raised when route declarations or app configuration are invalid.

    Always raised at build time, before the app serves its first request.
    """


class DuplicateRouteError(ConfigurationError):
    """Two real handlers were registered under the same full path.

    Only raised when the strict duplicate policy is enabled; the default
    policy replaces the earlier handler.
    """

    def __init__(self, key: bytes) -> None:
        self.key = key
        super().__init__(
            f"Route {key.decode('utf-8', 'replace')!r} is registered more than once."
        )


class ContextNotFoundInRequest(BurrowError):  # noqa: N818
    """The host did not inject a per-request context before routing.

    This is a wiring defect, not a client error. The dispatcher raises it
    before matching any route, and the host should treat it as fatal for
    the connection.
    """

    def __init__(self, path: bytes = b"") -> None:
        self.path = path
        detail = "Context not found in request"
        if path:
            detail = f"{detail} (path {path.decode('utf-8', 'replace')!r})"
        super().__init__(detail)
