"""Data models for linkscope configuration."""

from .rules import MatchKind, MatchRule, ScopeConfig

__all__ = [
    'MatchKind',
    'MatchRule',
    'ScopeConfig'
]
