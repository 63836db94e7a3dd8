"""URL matchers used to decide whether a discovered link is queued."""

from .base import (
    Matcher,
    MatcherFunc,
    MatcherLike,
    MatcherConfigError,
    as_matcher,
    all_of,
    any_of,
    not_
)
from .hostname import match_hostname
from .pattern import match_pattern
from .regexp import match_regexp

__all__ = [
    'Matcher',
    'MatcherFunc',
    'MatcherLike',
    'MatcherConfigError',
    'as_matcher',
    'all_of',
    'any_of',
    'not_',
    'match_hostname',
    'match_pattern',
    'match_regexp'
]
