"""Scope matching for URL filtering during crawl operations.

This module combines matchers into a single crawl-scope decision with
include/exclude precedence and an optional host allow-list.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .matchers import Matcher, MatcherLike, as_matcher
from .matchers.hostname import match_hostname
from .models.rules import ScopeConfig
from .utils.url_subject import URLComponentError, match_subject


logger = logging.getLogger(__name__)


class ScopeMatcherError(Exception):
    """Raised when a scope matcher cannot be built from its configuration."""
    pass


class ScopeMatcher:
    """Scope matcher for URL filtering with include/exclude matchers.

    The matcher applies the following logic:
    1. If allowed hosts are given, the URL host must be one of them
    2. URLs must not match any exclude matcher
    3. URLs must match at least one include matcher (if any are specified)

    Exclude matchers always take precedence over include matchers. The
    configuration is fixed at construction, so instances can be shared
    between workers without locking.
    """

    def __init__(
        self,
        include: Optional[Iterable[MatcherLike]] = None,
        exclude: Optional[Iterable[MatcherLike]] = None,
        allowed_hosts: Optional[Iterable[str]] = None
    ):
        """Initialize the scope matcher.

        Args:
            include: Matchers for URLs to include
            exclude: Matchers for URLs to exclude
            allowed_hosts: Exact hosts the crawl is restricted to

        Raises:
            ScopeMatcherError: If a matcher is not usable
        """
        try:
            self._include: Tuple[Matcher, ...] = tuple(as_matcher(m) for m in include or ())
            self._exclude: Tuple[Matcher, ...] = tuple(as_matcher(m) for m in exclude or ())
            self._allowed_hosts: Tuple[str, ...] = tuple(allowed_hosts or ())
            self._host_matchers = tuple(match_hostname(h) for h in self._allowed_hosts)
        except ValueError as e:
            raise ScopeMatcherError(f"Invalid scope configuration: {e}") from e

        logger.debug(
            f"Scope matcher ready: {len(self._include)} include, "
            f"{len(self._exclude)} exclude, {len(self._allowed_hosts)} allowed hosts"
        )

    @classmethod
    def from_config(cls, config: ScopeConfig) -> 'ScopeMatcher':
        """Create a ScopeMatcher from a validated ScopeConfig."""
        try:
            include = [rule.build() for rule in config.include]
            exclude = [rule.build() for rule in config.exclude]
        except ValueError as e:
            raise ScopeMatcherError(f"Invalid scope rule: {e}") from e

        return cls(include=include, exclude=exclude, allowed_hosts=config.allowed_hosts)

    def is_in_scope(self, url: Any) -> bool:
        """Check if a URL is within the configured scope.

        Args:
            url: The URL to check

        Returns:
            True if the URL is in scope, False otherwise
        """
        if self._host_matchers and not any(m.match(url) for m in self._host_matchers):
            logger.debug(f"URL host not allowed: {url}")
            return False

        for matcher in self._exclude:
            if matcher.match(url):
                logger.debug(f"URL excluded by {matcher!r}: {url}")
                return False

        if self._include:
            return any(matcher.match(url) for matcher in self._include)

        # No include matchers specified and not excluded = in scope
        return True

    def match(self, url: Any) -> bool:
        """Matcher interface; same as is_in_scope."""
        return self.is_in_scope(url)

    def filter_urls(self, urls: Iterable[Any]) -> Tuple[List[Any], List[Any]]:
        """Filter URLs into in-scope and out-of-scope lists.

        Args:
            urls: URLs to filter

        Returns:
            Tuple of (in_scope_urls, out_of_scope_urls)
        """
        in_scope = []
        out_of_scope = []

        for url in urls:
            if self.is_in_scope(url):
                in_scope.append(url)
            else:
                out_of_scope.append(url)

        return in_scope, out_of_scope

    def get_scope_info(self) -> Dict[str, Any]:
        """Get information about the configured scope."""
        return {
            "include": [repr(m) for m in self._include],
            "exclude": [repr(m) for m in self._exclude],
            "allowed_hosts": list(self._allowed_hosts),
            "has_includes": len(self._include) > 0,
            "has_excludes": len(self._exclude) > 0
        }

    def get_match_details(self, url: Any) -> Dict[str, Any]:
        """Get detailed information about why a URL matched or didn't match.

        This is useful for debugging scope configuration.

        Args:
            url: The URL to analyze

        Returns:
            Dictionary with detailed matching information
        """
        try:
            subject = match_subject(url)
        except URLComponentError:
            subject = None

        checks = []
        in_scope = True
        reason = "allowed"
        excluded_by = None

        if self._host_matchers:
            host_allowed = any(m.match(url) for m in self._host_matchers)
            checks.append({
                "check": "allowed_host",
                "passed": host_allowed,
                "allowed_hosts": list(self._allowed_hosts)
            })
            if not host_allowed:
                in_scope = False
                reason = "host_not_allowed"

        if in_scope:
            for matcher in self._exclude:
                matches = matcher.match(url)
                checks.append({
                    "check": "exclude",
                    "matcher": repr(matcher),
                    "matches": matches
                })
                if matches:
                    in_scope = False
                    reason = "excluded"
                    excluded_by = repr(matcher)
                    break

        if in_scope and self._include:
            any_include_match = False
            for matcher in self._include:
                matches = matcher.match(url)
                checks.append({
                    "check": "include",
                    "matcher": repr(matcher),
                    "matches": matches
                })
                if matches:
                    any_include_match = True

            if not any_include_match:
                in_scope = False
                reason = "no_include_match"

        return {
            "url": str(url),
            "subject": subject,
            "in_scope": in_scope,
            "reason": reason,
            "excluded_by": excluded_by,
            "checks": checks
        }

    def __repr__(self) -> str:
        return (
            f"ScopeMatcher(include={len(self._include)}, exclude={len(self._exclude)}, "
            f"allowed_hosts={list(self._allowed_hosts)})"
        )


def create_scope_matcher_from_config(config: ScopeConfig) -> ScopeMatcher:
    """Create a ScopeMatcher from a scope configuration object.

    Args:
        config: ScopeConfig with include/exclude rules

    Returns:
        Configured ScopeMatcher instance
    """
    return ScopeMatcher.from_config(config)
