"""
HTTP methods a request can be issued with.
"""

from enum import Enum


class HttpMethod(str, Enum):
    """Closed set of HTTP verbs supported by RequestInformation."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    CONNECT = "CONNECT"
