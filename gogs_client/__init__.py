"""
Asynchronous client for the Gogs REST API.
"""

from .core.config import Config
from .core.exceptions import GogsError, ConfigError, LoggerError, ValidationError
from .utils.api import (
    APIClient,
    APIResponse,
    APIError,
    RequestError,
    ResponseError,
    Transport,
    AiohttpTransport
)
from .gogs import GogsAPI

__all__ = [
    'GogsAPI',
    'Config',
    'APIClient',
    'APIResponse',
    'Transport',
    'AiohttpTransport',
    'GogsError',
    'ConfigError',
    'LoggerError',
    'ValidationError',
    'APIError',
    'RequestError',
    'ResponseError'
]
