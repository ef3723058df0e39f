"""Font resource fetching.

A font resource is either a filesystem path or an http(s) URL. This module
turns it into raw font bytes, reporting every failure as FontLoadError.
"""

from pathlib import Path

import requests

from signcalc.exceptions import FontLoadError

URL_SCHEMES = ("http://", "https://")


def is_url(resource: str | Path) -> bool:
    """Check whether a font resource is fetched over HTTP."""
    return isinstance(resource, str) and resource.lower().startswith(URL_SCHEMES)


def fetch_font_bytes(resource: str | Path, timeout: float = 30.0) -> bytes:
    """Read the raw bytes of a font resource.

    Args:
        resource: Filesystem path or http(s) URL
        timeout: Seconds to wait for an HTTP response

    Returns:
        Font file contents

    Raises:
        FontLoadError: If the file is missing or unreadable, or the HTTP
            request fails or returns an error status
    """
    location = str(resource)

    if is_url(resource):
        try:
            response = requests.get(location, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FontLoadError(location, str(e)) from e
        return response.content

    path = Path(location)
    if not path.exists():
        raise FontLoadError(location, "file not found")
    if not path.is_file():
        raise FontLoadError(location, "not a file")

    try:
        return path.read_bytes()
    except OSError as e:
        raise FontLoadError(location, str(e)) from e
