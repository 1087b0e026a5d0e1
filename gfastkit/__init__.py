"""Admin back-end toolkit: tree helpers, response envelopes, controller binding, services and a WSGI server."""

__version__ = "3.2.4"
__all__ = ["__version__"]