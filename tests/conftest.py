"""Shared test fixtures and configuration for linkscope tests."""

import pytest
from dataclasses import dataclass
from pathlib import Path
import sys

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from linkscope.models.rules import MatchRule, ScopeConfig


@dataclass(frozen=True)
class SimpleURL:
    """Minimal URL value exposing only host and path."""
    host: str
    path: str


@pytest.fixture
def make_url():
    """Factory for host/path URL values."""
    return SimpleURL


@pytest.fixture
def sample_scope_config():
    """Sample scope configuration for testing."""
    return ScopeConfig(
        allowed_hosts=["example.com"],
        include=[MatchRule(kind="pattern", value="example.com/blog/*")],
        exclude=[MatchRule(kind="regexp", value="/drafts/")]
    )


@pytest.fixture
def scope_yaml_file(tmp_path):
    """Temporary scope YAML file for testing."""
    content = """
allowed_hosts:
  - example.com
include:
  - pattern: "example.com/*"
exclude:
  - regexp: "/admin/"
environments:
  development:
    allowed_hosts:
      - localhost:8000
    include:
      - kind: pattern
        value: "localhost:8000/*"
"""
    path = tmp_path / "scope.yaml"
    path.write_text(content.strip())
    return path
