"""Data URI packaging for generated documents."""

import base64

DATA_URI_PREFIX = "data:text/html;base64,"


def to_data_uri(html: str) -> str:
    """Encode an HTML document as a base64 ``data:text/html`` URI."""
    encoded = base64.b64encode(html.encode("utf-8")).decode("ascii")
    return DATA_URI_PREFIX + encoded


def from_data_uri(uri: str) -> str:
    """Decode a URI produced by ``to_data_uri`` back to HTML.

    Raises:
        ValueError: If the URI is not a base64 HTML data URI
    """
    if not uri.startswith(DATA_URI_PREFIX):
        raise ValueError(f"Not a base64 HTML data URI: {uri[:40]}")
    return base64.b64decode(uri[len(DATA_URI_PREFIX):]).decode("utf-8")
