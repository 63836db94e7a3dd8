"""Regular-expression matching over the host and path of a URL."""

import logging
import re
from typing import Any

from .base import MatcherConfigError, MatcherFunc
from ..utils.url_subject import URLComponentError, match_subject


logger = logging.getLogger(__name__)


def match_regexp(expr: str) -> MatcherFunc:
    """Create a matcher accepting URLs whose ``host + path`` contains ``expr``.

    The expression is compiled immediately so that a bad crawl rule fails
    before any URL is evaluated. Matching searches anywhere in the subject;
    use ``^`` and ``$`` to anchor. Scheme, query and fragment are not part of
    the subject.

    Args:
        expr: Regular expression source

    Returns:
        Regexp matcher

    Raises:
        MatcherConfigError: If the expression does not compile

    Example:
        >>> m = match_regexp(r"^example\\.com/blog/")
        >>> m.match("https://example.com/blog/post1?page=2")
        True
    """
    if not isinstance(expr, str):
        raise MatcherConfigError(f"Regexp must be a string, got {type(expr).__name__}", expr)

    try:
        compiled = re.compile(expr)
    except re.error as e:
        logger.error(f"Invalid regexp {expr!r}: {e}")
        raise MatcherConfigError(f"Invalid regexp '{expr}': {e}", expr) from e

    def _match(url: Any) -> bool:
        try:
            subject = match_subject(url)
        except URLComponentError:
            return False
        return compiled.search(subject) is not None

    logger.debug(f"Created regexp matcher: {expr!r}")
    return MatcherFunc(_match, name=f"match_regexp({expr!r})")
