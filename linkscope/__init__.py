"""URL classification for crawlers.

This package decides, for each discovered link, whether a crawler should
schedule it for a fetch. It provides the matcher capability, the hostname,
glob and regexp strategies, and declarative scope configuration.
"""

from .matchers import (
    Matcher,
    MatcherFunc,
    MatcherConfigError,
    as_matcher,
    all_of,
    any_of,
    not_,
    match_hostname,
    match_pattern,
    match_regexp
)
from .utils.url_subject import normalize_path, match_subject
from .models.rules import MatchKind, MatchRule, ScopeConfig
from .scope_matcher import ScopeMatcher, ScopeMatcherError, create_scope_matcher_from_config
from .config.loader import ConfigLoadError, load_scope_config

__all__ = [
    # Matchers
    'Matcher',
    'MatcherFunc',
    'MatcherConfigError',
    'as_matcher',
    'all_of',
    'any_of',
    'not_',
    'match_hostname',
    'match_pattern',
    'match_regexp',

    # Normalization
    'normalize_path',
    'match_subject',

    # Models
    'MatchKind',
    'MatchRule',
    'ScopeConfig',

    # Scope
    'ScopeMatcher',
    'ScopeMatcherError',
    'create_scope_matcher_from_config',

    # Configuration
    'ConfigLoadError',
    'load_scope_config'
]

__version__ = "0.1.0"
