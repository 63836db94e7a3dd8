"""Shell-glob matching over the host and path of a URL."""

import fnmatch
import logging
import re
from typing import Any

from .base import MatcherConfigError, MatcherFunc
from ..utils.url_subject import URLComponentError, match_subject


logger = logging.getLogger(__name__)


def match_pattern(pattern: str) -> MatcherFunc:
    """Create a matcher accepting URLs whose ``host + path`` fits a glob.

    The subject excludes scheme, query and fragment. The whole subject must
    match the pattern, and matching is case-sensitive.

    Patterns support glob-style wildcards:
    - * matches any characters, including "/"
    - ? matches single character
    - [abc] matches any character in brackets, [!abc] any character not in them

    Examples:
    - "example.com/blog/*" matches every page under /blog/ on example.com
    - "*.example.com/*" matches every subdomain of example.com
    - "example.com/page?" matches /page1 but not /page10

    Args:
        pattern: Glob pattern

    Returns:
        Pattern matcher

    Raises:
        MatcherConfigError: If pattern is not a string
    """
    if not isinstance(pattern, str):
        raise MatcherConfigError(f"Pattern must be a string, got {type(pattern).__name__}", pattern)

    # fnmatch.translate anchors the expression at both ends
    compiled = re.compile(fnmatch.translate(pattern))

    def _match(url: Any) -> bool:
        try:
            subject = match_subject(url)
        except URLComponentError:
            return False
        return compiled.match(subject) is not None

    logger.debug(f"Created pattern matcher: {pattern!r}")
    return MatcherFunc(_match, name=f"match_pattern({pattern!r})")
