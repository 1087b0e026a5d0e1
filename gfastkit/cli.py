"""HTTP service entry point."""

import argparse
import json
import logging
import urllib.parse
from dataclasses import dataclass
from wsgiref.simple_server import make_server

from gfastkit.autobind import auto_bind
from gfastkit.consts import VERSION, logo_text, openapi_info
from gfastkit.response import failure, success

_log = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
OPENAPI_PATH = "/api.json"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

_JSON_HEADER = ("Content-Type", "application/json; charset=utf-8")
_CORS_HEADERS = [
    ("Access-Control-Allow-Origin", "*"),
    ("Access-Control-Allow-Methods", "GET,PUT,POST,DELETE,PATCH,HEAD,CONNECT,OPTIONS,TRACE"),
    ("Access-Control-Allow-Headers", "Origin,Content-Type,Accept,User-Agent,Cookie,Authorization,X-Auth-Token,X-Requested-With"),
    ("Access-Control-Allow-Credentials", "true"),
    ("Access-Control-Max-Age", "3628800"),
]


def _join(*parts) -> str:
    segments = [seg for part in parts for seg in part.split("/") if seg]
    return "/" + "/".join(segments)


@dataclass(frozen=True)
class _Route:
    handler: object
    methods: frozenset


class _RouterGroup:
    """A path prefix under which handlers are bound."""

    def __init__(self, app, prefix):
        self._app = app
        self.prefix = _join(prefix)

    def group(self, prefix):
        return _RouterGroup(self._app, _join(self.prefix, prefix))

    def enable_cors(self):
        self._app._cors_prefixes.append(self.prefix)

    def bind(self, path, handler, methods=("GET", "POST")):
        """Serve *handler(params)* at *path*; its return value becomes ``data``."""
        full = _join(self.prefix, path)
        self._app._routes[full] = _Route(handler, frozenset(m.upper() for m in methods))
        return full


class _App:
    """WSGI application wrapping handler results in the response envelope."""

    def __init__(self):
        self._routes = {}
        self._cors_prefixes = []
        self.root = _RouterGroup(self, "/")
        self.api = None

    def openapi(self):
        paths = {
            path: {method.lower(): {} for method in sorted(route.methods)}
            for path, route in sorted(self._routes.items())
        }
        return {"openapi": "3.0.0", "info": {**openapi_info(), "version": VERSION}, "paths": paths}

    def _is_cors(self, path):
        return any(
            prefix == "/" or path == prefix or path.startswith(prefix + "/")
            for prefix in self._cors_prefixes
        )

    def __call__(self, environ, start_response):
        method = environ.get("REQUEST_METHOD", "GET").upper()
        path = _join(environ.get("PATH_INFO", ""))
        extra = list(_CORS_HEADERS) if self._is_cors(path) else []

        def send(status, payload):
            body = json.dumps(payload, ensure_ascii=False, default=str).encode("utf-8")
            start_response(status, [_JSON_HEADER, ("Content-Length", str(len(body))), *extra])
            return [body]

        if path == OPENAPI_PATH and method == "GET":
            return send("200 OK", self.openapi())
        if extra and method == "OPTIONS":
            start_response("204 No Content", extra)
            return [b""]
        route = self._routes.get(path)
        if route is None:
            return send("404 Not Found", failure("Not Found").to_dict())
        if method not in route.methods:
            return send("405 Method Not Allowed", failure("Method Not Allowed").to_dict())
        try:
            params = _read_params(environ)
        except ValueError:
            return send("400 Bad Request", failure("invalid request body").to_dict())
        try:
            data = route.handler(params)
        except Exception as exc:  # every handler failure becomes an error envelope
            _log.exception("handler for %s failed", path)
            return send("200 OK", failure(str(exc)).to_dict())
        return send("200 OK", success("", data).to_dict())


def _read_params(environ):
    params = {
        key: values[-1]
        for key, values in urllib.parse.parse_qs(environ.get("QUERY_STRING", "")).items()
    }
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        length = 0
    if length <= 0:
        return params
    raw = environ["wsgi.input"].read(length)
    content_type = environ.get("CONTENT_TYPE", "").split(";", 1)[0].strip().lower()
    if content_type == "application/json":
        body = json.loads(raw.decode("utf-8"))
        if not isinstance(body, dict):
            raise ValueError("JSON body must be an object")
        params.update(body)
    elif content_type == "application/x-www-form-urlencoded":
        form = urllib.parse.parse_qs(raw.decode("utf-8"))
        params.update({key: values[-1] for key, values in form.items()})
    return params


class _Router:
    """Top-level router; ``bind_<name>_controller`` methods are bound automatically."""

    def bind_controller(self, ctx, group):
        api = group.group(API_PREFIX)
        api.enable_cors()
        auto_bind(ctx, self, api)
        return api


def banner():
    """Return the start-up banner line with the version."""
    return f"{logo_text()} Version: {VERSION}"


def make_app():
    """Build the WSGI application; handlers bind to its ``api`` group."""
    app = _App()
    app.api = _Router().bind_controller({"app": app}, app.root)
    return app


def main(argv=None):
    """Start the HTTP server."""
    parser = argparse.ArgumentParser(prog="gfastkit", description="start http server")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--version", action="version", version=VERSION)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(pathname)s:%(lineno)d: %(message)s",
    )
    _log.info("%s", banner())
    app = make_app()
    with make_server(args.host, args.port, app) as server:
        _log.info("http server started listening on %s:%d", args.host, args.port)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            _log.info("http server stopped")
    return 0