"""URL component access and subject normalization for matchers.

Pattern and regexp matchers compare against a "subject" built from the host
and path of a URL only, so that scheme, query and fragment never influence a
crawl-inclusion decision.
"""

from typing import Any, Optional, Tuple
from urllib.parse import ParseResult, SplitResult, unquote, urlsplit


class URLComponentError(Exception):
    """Raised when host and path cannot be read from a URL value."""
    pass


def normalize_path(path: str) -> str:
    """Ensure a non-empty path starts with a single separator.

    Args:
        path: Path component of a URL

    Returns:
        The path with a leading "/" prepended when it is non-empty and
        missing one, otherwise the path unchanged

    Examples:
        >>> normalize_path("")
        ''
        >>> normalize_path("a")
        '/a'
        >>> normalize_path("/a")
        '/a'
    """
    if path and not path.startswith('/'):
        return '/' + path
    return path


def _netloc_host(netloc: str) -> str:
    # userinfo is not part of the host; the port is
    return netloc.rpartition('@')[2]


def url_components(url: Any) -> Tuple[str, str]:
    """Return the (host, path) pair of a URL value.

    Accepts a URL string, a ``urllib.parse`` split/parse result, or any object
    exposing ``host`` and ``path`` attributes. Paths parsed from strings and
    split/parse results are percent-decoded; objects supply their own path.

    Raises:
        URLComponentError: If the value is not a readable URL
    """
    if isinstance(url, str):
        try:
            parts = urlsplit(url)
        except ValueError as e:
            raise URLComponentError(f"Cannot parse URL '{url}': {e}") from e
        return _netloc_host(parts.netloc), unquote(parts.path)

    if isinstance(url, (SplitResult, ParseResult)):
        return _netloc_host(url.netloc), unquote(url.path)

    host: Optional[str] = getattr(url, 'host', None)
    path: Optional[str] = getattr(url, 'path', None)
    if host is None and path is None:
        raise URLComponentError(f"Value of type {type(url).__name__} has no host or path")
    if not isinstance(host, (str, type(None))) or not isinstance(path, (str, type(None))):
        raise URLComponentError(f"Value of type {type(url).__name__} has non-string host or path")

    return host or '', path or ''


def match_subject(url: Any) -> str:
    """Build the normalized comparison subject ``host + normalize_path(path)``."""
    host, path = url_components(url)
    return host + normalize_path(path)
