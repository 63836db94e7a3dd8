"""Matcher capability and boolean composition helpers.

A matcher is any object with a ``match(url) -> bool`` method. Matchers hold
only immutable configuration captured at construction, so a single instance
can be shared across crawler workers without locking.
"""

from typing import Any, Callable, Optional, Protocol, Tuple, Union, runtime_checkable


class MatcherConfigError(ValueError):
    """Raised when a matcher is constructed from invalid configuration."""

    def __init__(self, message: str, expression: Any = None):
        super().__init__(message)
        self.expression = expression


@runtime_checkable
class Matcher(Protocol):
    """Predicate deciding whether a discovered URL should be queued."""

    def match(self, url: Any) -> bool:
        """Return True if the URL matches.

        Called just before a URL is queued; when it returns False the URL
        is not queued.
        """
        ...


class MatcherFunc:
    """Adapts a plain ``(url) -> bool`` callable to the Matcher capability."""

    __slots__ = ('_fn', '_name')

    def __init__(self, fn: Callable[[Any], bool], name: Optional[str] = None):
        if not callable(fn):
            raise MatcherConfigError(f"Matcher function must be callable, got {type(fn).__name__}")
        self._fn = fn
        self._name = name or f"MatcherFunc({getattr(fn, '__name__', 'matcher')})"

    def match(self, url: Any) -> bool:
        return bool(self._fn(url))

    def __call__(self, url: Any) -> bool:
        return self.match(url)

    def __repr__(self) -> str:
        return self._name


MatcherLike = Union[Matcher, Callable[[Any], bool]]


def as_matcher(value: MatcherLike) -> Matcher:
    """Return ``value`` as a Matcher, wrapping bare callables in MatcherFunc.

    Raises:
        MatcherConfigError: If the value is neither a matcher nor callable
    """
    if isinstance(value, Matcher):
        return value
    if callable(value):
        return MatcherFunc(value)
    raise MatcherConfigError(f"Expected a matcher or callable, got {type(value).__name__}")


def _as_matchers(values: Tuple[MatcherLike, ...]) -> Tuple[Matcher, ...]:
    return tuple(as_matcher(v) for v in values)


def all_of(*matchers: MatcherLike) -> MatcherFunc:
    """Matcher that is true only when every given matcher is true.

    With no matchers it accepts every URL.
    """
    children = _as_matchers(matchers)

    def _all(url: Any) -> bool:
        return all(m.match(url) for m in children)

    return MatcherFunc(_all, name=f"all_of({', '.join(map(repr, children))})")


def any_of(*matchers: MatcherLike) -> MatcherFunc:
    """Matcher that is true when at least one given matcher is true.

    With no matchers it rejects every URL.
    """
    children = _as_matchers(matchers)

    def _any(url: Any) -> bool:
        return any(m.match(url) for m in children)

    return MatcherFunc(_any, name=f"any_of({', '.join(map(repr, children))})")


def not_(matcher: MatcherLike) -> MatcherFunc:
    """Matcher that inverts the decision of ``matcher``."""
    inner = as_matcher(matcher)

    def _not(url: Any) -> bool:
        return not inner.match(url)

    return MatcherFunc(_not, name=f"not_({inner!r})")
