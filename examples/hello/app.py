"""Hello World — the simplest burrow app.

Demonstrates handle_route, capture_route, nesting with compose, and the
not-found response for a declared segment with no handler.

Run:
    python app.py
"""

from burrow import Request, Response, capture_route, compose, handle_route, literal_route, prepare_routes


def index(request: Request) -> Response:
    return Response("Hello, World!")


def greet(remainder: bytes, request: Request) -> Response:
    name = remainder.lstrip(b"/").decode("utf-8", "replace") or "stranger"
    return Response(f"Hello, {name}!")


def status(request: Request) -> Response:
    return Response('{"status": "ok"}', content_type="application/json")


def custom(request: Request) -> Response:
    return Response("Created").with_status(201).with_header("X-Custom", "burrow")


app = prepare_routes(
    [
        handle_route("", index),
        capture_route("greet", greet),
        compose(
            literal_route("api"),
            [
                handle_route("status", status),
                handle_route("custom", custom),
            ],
        ),
    ],
    context={"app": "hello"},
)


if __name__ == "__main__":
    app.run()
