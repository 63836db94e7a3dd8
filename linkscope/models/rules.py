"""Pydantic models for declarative crawl scope rules.

Rules are the serializable form of matchers: a crawl configuration lists
include and exclude rules, each of which builds one matcher.
"""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator

from ..matchers import (
    MatcherConfigError,
    MatcherFunc,
    match_hostname,
    match_pattern,
    match_regexp
)


class MatchKind(str, Enum):
    """Matching strategies available to scope rules."""
    HOSTNAME = "hostname"    # Exact host equality
    PATTERN = "pattern"      # Glob over host + path
    REGEXP = "regexp"        # Regular expression search over host + path


_BUILDERS = {
    MatchKind.HOSTNAME: match_hostname,
    MatchKind.PATTERN: match_pattern,
    MatchKind.REGEXP: match_regexp,
}


class MatchRule(BaseModel):
    """A single matching rule.

    Accepts either the explicit form ``{"kind": "pattern", "value": "..."}``
    or the shorthand ``{"pattern": "..."}``.
    """

    kind: MatchKind = Field(
        description="Matching strategy"
    )

    value: str = Field(
        description="Host, glob pattern or regular expression, depending on kind"
    )

    @model_validator(mode='before')
    @classmethod
    def expand_shorthand(cls, data: Any) -> Any:
        """Expand ``{"<kind>": "<value>"}`` into the explicit form."""
        if isinstance(data, dict) and 'kind' not in data and len(data) == 1:
            (key, value), = data.items()
            if key in {kind.value for kind in MatchKind}:
                return {'kind': key, 'value': value}
        return data

    @model_validator(mode='after')
    def validate_regexp(self):
        """Compile regexp rules so invalid expressions fail validation."""
        if self.kind == MatchKind.REGEXP:
            try:
                match_regexp(self.value)
            except MatcherConfigError as e:
                raise ValueError(str(e)) from e
        return self

    def build(self) -> MatcherFunc:
        """Build the matcher described by this rule."""
        return _BUILDERS[self.kind](self.value)


class ScopeConfig(BaseModel):
    """Crawl scope configuration.

    A URL is in scope when its host is allowed, it matches no exclude rule,
    and it matches at least one include rule (if any include rules exist).
    """

    include: List[MatchRule] = Field(
        default_factory=list,
        description="Rules a URL must match (any of) to be crawled"
    )

    exclude: List[MatchRule] = Field(
        default_factory=list,
        description="Rules that remove a URL from the crawl; take precedence over include"
    )

    allowed_hosts: List[str] = Field(
        default_factory=list,
        description="Exact hosts the crawl is restricted to (empty = any host)"
    )

    @field_validator('allowed_hosts')
    @classmethod
    def validate_allowed_hosts(cls, v):
        """Reject blank host entries."""
        for host in v:
            if not host.strip():
                raise ValueError("allowed_hosts entries must not be blank")
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary suitable for YAML serialization."""
        return self.model_dump(mode='json')
