"""Configuration loading for crawl scope rules."""

from .loader import (
    ConfigLoadError,
    load_scope_config,
    create_default_scope_config,
    save_default_config
)

__all__ = [
    'ConfigLoadError',
    'load_scope_config',
    'create_default_scope_config',
    'save_default_config'
]
