"""
Gogs endpoint bindings.
"""

from .gogs_api import (
    GogsAPI,
    Endpoint,
    ENDPOINTS,
    DEFAULT_SEARCH_LIMIT
)

__all__ = [
    'GogsAPI',
    'Endpoint',
    'ENDPOINTS',
    'DEFAULT_SEARCH_LIMIT'
]
