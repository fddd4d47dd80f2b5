"""HTTP application serving host information as JSON."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from flask import Flask, Response, jsonify, request

from . import collect

logger = logging.getLogger(__name__)

VERSION = "v1.0"

_HELP_SECTIONS = (
    ("/test", "test interface."),
    ("/version", "print version."),
    ("/all", "response all info."),
    ("/cpu", "response cpu info."),
    ("/memory", "response memory info."),
    ("/disk", "response host disk info."),
    ("/network", "response host network info."),
    ("/node", "response host node and os info."),
)


def help_text() -> str:
    """Return the body of the help page."""
    return "<h1>help</h1>" + "".join(
        f"<h5>{path}:</h5>{description}" for path, description in _HELP_SECTIONS
    )


def _request_uri() -> str:
    return request.full_path.rstrip("?")


def _records(items: Iterable[Any]) -> list[dict[str, Any]] | None:
    """Serialise records; an empty collection becomes null."""
    return [item.to_dict() for item in items] or None


def _all_info() -> dict[str, Any]:
    return {
        "node info": collect.get_node_info().to_dict(),
        "cpu info": _records(collect.get_cpu_info()),
        "mem info": collect.get_memory_info().to_dict(),
        "disk info": _records(collect.get_disk_info()),
        "network info": _records(collect.get_network_info()),
    }


_JSON_ENDPOINTS: dict[str, Callable[[], Any]] = {
    "/all": _all_info,
    "/cpu": lambda: _records(collect.get_cpu_info()),
    "/memory": lambda: collect.get_memory_info().to_dict(),
    "/disk": lambda: _records(collect.get_disk_info()),
    "/network": lambda: _records(collect.get_network_info()),
    "/node": lambda: collect.get_node_info().to_dict(),
}


def _json_view(produce: Callable[[], Any]) -> Callable[[], Response]:
    def view() -> Response:
        logger.info("%s", _request_uri())
        return jsonify(produce())

    return view


def create_app() -> Flask:
    """Build the application with all of its routes."""
    app = Flask(__name__)

    @app.get("/version")
    def version_route():
        return jsonify(status="normal", version=VERSION)

    @app.post("/test")
    def test_route():
        logger.info("%s", _request_uri())
        return "", 200

    @app.get("/help")
    def help_route():
        logger.info("%s", _request_uri())
        return Response(help_text(), status=200, mimetype="text/plain")

    for path, produce in _JSON_ENDPOINTS.items():
        app.add_url_rule(path, path.strip("/"), _json_view(produce), methods=["GET"])

    return app