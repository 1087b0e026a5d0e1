"""Automatic binding of ``bind_<name>_controller`` methods."""

import re

_BIND_METHOD = re.compile(r"^bind_(.+)_controller$")
_NOT_ROUTERS = (int, float, complex, str, bytes, bytearray, bool, list, tuple, dict, set, frozenset)


def auto_bind(ctx, router, group):
    """Call every ``bind_<name>_controller(ctx, group)`` method of *router*.

    Methods run in name order; the names of the methods called are returned.
    *router* must be an object instance, not a class or a plain value.
    """
    if router is None or isinstance(router, type) or isinstance(router, _NOT_ROUTERS):
        raise TypeError(f"expect object but a {type(router).__name__}")
    bound = []
    for name in sorted(dir(router)):
        if not _BIND_METHOD.match(name):
            continue
        method = getattr(router, name)
        if not callable(method):
            continue
        method(ctx, group)
        bound.append(name)
    return bound