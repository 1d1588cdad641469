# gogs_client/utils/api/response_handler.py
# Created: 2026-03-09 21:40:17
# Author: gogs-client

"""
Classifiers mapping a raw APIResponse to a decoded value or an error.

The service answers in three shapes: a bare resource (200/201), an
envelope ``{"ok": bool, "data": ...}`` for searches, and an empty 204 for
deletions.
"""

from typing import Any, Collection, Mapping
from functools import partial
import json
import logging
from .api_client import APIResponse, ResponseError

logger = logging.getLogger(__name__)

def expect_statuses(allowed: Collection[int], response: APIResponse) -> Any:
    """
    Decode the response body when its status is one of the allowed ones

    Args:
        allowed: Acceptable HTTP status codes
        response: Raw response to classify

    Returns:
        The decoded JSON body
    """
    if response.status not in allowed:
        logger.debug(f"Rejecting status {response.status}, expected one of {sorted(allowed)}")
        raise ResponseError(f"Unexpected status {response.status}", response)
    try:
        return json.loads(response.data)
    except ValueError as e:
        logger.error(f"Failed to decode response body: {str(e)}")
        raise ResponseError(f"Invalid JSON in response: {str(e)}", response) from e

expect_standard = partial(expect_statuses, frozenset({200}))
expect_created = partial(expect_statuses, frozenset({201}))

def expect_no_content(response: APIResponse) -> bool:
    """Accept only an empty 204 answer"""
    if response.status != 204:
        logger.debug(f"Rejecting status {response.status}, expected 204")
        raise ResponseError(f"Unexpected status {response.status}", response)
    return True

def expect_ok(response: APIResponse) -> Any:
    """Unwrap a 200 ``{"ok": true, "data": ...}`` envelope"""
    envelope = expect_standard(response)
    if not isinstance(envelope, Mapping) or not envelope.get("ok"):
        logger.debug("Rejecting envelope without a truthy ok field")
        raise ResponseError("Response envelope is not ok", response)
    return envelope.get("data")
