"""
HTTP proxy for the DART OpenAPI.

Keeps the DART API key on the server, answers browser requests without
cross-origin trouble, and turns upstream error documents into one JSON
error shape.
"""

__version__ = "1.0.0"
