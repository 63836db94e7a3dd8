"""URL utilities package."""

from .url_subject import normalize_path, url_components, match_subject, URLComponentError

__all__ = [
    'normalize_path',
    'url_components',
    'match_subject',
    'URLComponentError'
]
