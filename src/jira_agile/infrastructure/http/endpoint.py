"""
Endpoint resolution.

Relative API paths are resolved against the site URL with RFC 3986 reference
resolution, so ``board/1?expand=x`` composes with
``https://host/rest/agile/1.0/`` the same way a browser would. A path with a
leading slash therefore replaces the whole site path.
"""

import re
from urllib.parse import urljoin, urlsplit

from jira_agile.exceptions import UrlParseError

_CONTROL = re.compile(r"[\x00-\x1f\x7f]")
_SPACE = re.compile(r" ")
_INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def normalize_site(site: str) -> str:
    """Validate the site URL and make sure it ends with a slash."""
    if not isinstance(site, str) or not site.strip():
        raise UrlParseError(str(site), "site must be a non-empty URL")

    site = site.strip()
    if not site.endswith("/"):
        site += "/"

    parts = _split(site)
    if not parts.scheme or not parts.netloc:
        raise UrlParseError(site, "site must be an absolute URL with scheme and host")
    return site


def resolve_endpoint(site: str, path: str) -> str:
    """Resolve ``path`` against ``site`` and return the absolute URL."""
    if not isinstance(path, str):
        raise UrlParseError(repr(path), "endpoint path must be a string")

    _split(path)
    return urljoin(site, path)


def _split(url: str):
    if _CONTROL.search(url):
        raise UrlParseError(url, "invalid control character in URL")
    if url.startswith(":"):
        raise UrlParseError(url, "missing protocol scheme")

    # Query strings are passed through as given; only the part before them
    # is checked for spaces and escapes.
    head = re.split(r"[?#]", url, maxsplit=1)[0]
    if _SPACE.search(head):
        raise UrlParseError(url, "invalid space in URL")
    if _INVALID_ESCAPE.search(head):
        raise UrlParseError(url, "invalid percent-encoded escape in URL")

    try:
        parts = urlsplit(url)
        # Port is parsed lazily; touching it surfaces a malformed authority.
        parts.port
    except ValueError as e:
        raise UrlParseError(url, str(e)) from e

    if not parts.scheme and not parts.netloc and ":" in parts.path.split("/", 1)[0]:
        raise UrlParseError(url, "first path segment in URL cannot contain colon")
    return parts
