"""Exact hostname matching."""

import logging
from typing import Any

from .base import MatcherConfigError, MatcherFunc
from ..utils.url_subject import URLComponentError, url_components


logger = logging.getLogger(__name__)


def match_hostname(host: str) -> MatcherFunc:
    """Create a matcher accepting URLs whose host equals ``host``.

    Comparison is exact: no case folding and no port stripping, so
    "Example.com" does not match "example.com" and "example.com:8080"
    does not match "example.com". An empty host only matches URLs with an
    empty host.

    Args:
        host: Expected host component

    Returns:
        Hostname matcher

    Raises:
        MatcherConfigError: If host is not a string
    """
    if not isinstance(host, str):
        raise MatcherConfigError(f"Hostname must be a string, got {type(host).__name__}", host)

    def _match(url: Any) -> bool:
        try:
            url_host, _ = url_components(url)
        except URLComponentError:
            return False
        return url_host == host

    logger.debug(f"Created hostname matcher: {host!r}")
    return MatcherFunc(_match, name=f"match_hostname({host!r})")
