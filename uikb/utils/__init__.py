"""
UIKB Utilities
"""

from uikb.utils.http_client import (
    HTTPError,
    http_get,
    http_json_get,
    http_json_post,
    http_post,
)

__all__ = [
    "HTTPError",
    "http_get",
    "http_post",
    "http_json_get",
    "http_json_post",
]
