"""Tests for burrow.server.terminal — route table rendering."""

from burrow.http.response import Response
from burrow.routing.route import compose, handle_route, literal_route
from burrow.routing.router import Router
from burrow.server.terminal import _Palette, format_route_table


def health(request) -> Response:
    return Response("ok")


def _router() -> Router:
    return Router.from_routes(
        [
            compose(literal_route("api"), [handle_route("v1", health)]),
            handle_route("health", health),
        ]
    )


class TestFormatRouteTable:
    def test_lists_keys_and_handlers(self) -> None:
        text = format_route_table(_router(), color=False)
        lines = text.splitlines()

        assert lines[0].startswith("── burrow routes ")
        assert "  /api     (placeholder)" in lines
        assert "  /api/v1  health" in lines
        assert "  /health  health" in lines
        assert "  3 routes · 1 placeholder" in lines

    def test_no_color_has_no_escapes(self) -> None:
        assert "\033[" not in format_route_table(_router(), color=False)

    def test_color_uses_escapes(self) -> None:
        assert "\033[36m" in format_route_table(_router(), color=True)

    def test_empty_router(self) -> None:
        text = format_route_table(Router.from_routes([]), color=False)
        assert "No routes registered." in text

    def test_singular_summary(self) -> None:
        text = format_route_table(Router.from_routes([handle_route("x", health)]), color=False)
        assert "  1 route" in text.splitlines()


class TestPalette:
    def test_disabled_is_empty(self) -> None:
        c = _Palette(enabled=False)
        assert c.bold == c.reset == ""
