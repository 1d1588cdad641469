# gogs_client/utils/api/__init__.py
# Created: 2026-03-09 21:14:02
# Author: gogs-client

"""
API utilities for making HTTP requests and classifying responses.
"""

from .api_client import (
    APIClient,
    APIRequest,
    APIResponse,
    APIError,
    RequestError,
    ResponseError,
    RequestMethod,
    Transport,
    AiohttpTransport,
    encode_user_auth
)

from .response_handler import (
    expect_statuses,
    expect_standard,
    expect_created,
    expect_no_content,
    expect_ok
)

__all__ = [
    'APIClient',
    'APIRequest',
    'APIResponse',
    'APIError',
    'RequestError',
    'ResponseError',
    'RequestMethod',
    'Transport',
    'AiohttpTransport',
    'encode_user_auth',
    'expect_statuses',
    'expect_standard',
    'expect_created',
    'expect_no_content',
    'expect_ok'
]
