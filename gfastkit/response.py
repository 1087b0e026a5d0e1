"""Standard JSON response envelope and template rendering helpers."""

from dataclasses import dataclass
from typing import Any

import jinja2

SUCCESS_CODE = 0
ERROR_CODE = -1
ELLIPSIS = "..."


@dataclass
class Response:
    """The ``code`` / ``data`` / ``message`` envelope returned by the API."""

    code: int
    message: str
    data: Any = None

    def to_dict(self):
        """Return the envelope under its wire field names."""
        return {"code": self.code, "data": self.data, "message": self.message}


def build(code, message, data=None):
    """Return a response with the given status *code*."""
    return Response(code=code, message=message, data=data)


def success(message, data=None):
    """Return a response carrying the success code."""
    return build(SUCCESS_CODE, message, data)


def failure(message, data=None):
    """Return a response carrying the error code."""
    return build(ERROR_CODE, message, data)


def _to_str(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    return str(value)


def sub_str(value, length):
    """Cut *value* to *length* characters, marking the cut with an ellipsis."""
    text = _to_str(value)
    if len(text) > length:
        return text[:length] + ELLIPSIS
    return text


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(autoescape=False)
    env.globals["subStr"] = sub_str
    env.filters["sub_str"] = sub_str
    return env


def render_template(source, params=None):
    """Render template *source* with *params*.

    ``subStr(value, n)`` is available as a function and ``sub_str`` as a filter.
    """
    return _environment().from_string(source).render(**(params or {}))