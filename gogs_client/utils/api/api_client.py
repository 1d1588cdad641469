# gogs_client/utils/api/api_client.py
# Created: 2026-03-09 21:14:02
# Author: gogs-client

from typing import Dict, Any, Optional, Mapping, Union, Protocol
from dataclasses import dataclass, field
from enum import Enum
import asyncio
import base64
import json
import logging
import aiohttp
import yarl
from gogs_client.core.exceptions import GogsError, ValidationError

logger = logging.getLogger(__name__)

class APIError(GogsError):
    """Base exception for API-related errors"""
    pass

class RequestError(APIError):
    """Raised when the transport fails before an HTTP response arrives"""
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, details={"cause": repr(cause)} if cause else None)
        self.cause = cause

class ResponseError(APIError):
    """Raised when the server answers with an unexpected status or body"""
    def __init__(self, message: str, response: "APIResponse"):
        super().__init__(message, details={"status": response.status, "data": response.data})
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status

class RequestMethod(Enum):
    """HTTP request methods"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"

@dataclass
class APIRequest:
    """A fully resolved HTTP request handed to a transport"""
    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[str] = None

@dataclass
class APIResponse:
    """Raw transport result; data is the unparsed response body"""
    status: int
    data: str
    headers: Dict[str, str] = field(default_factory=dict)

class Transport(Protocol):
    """Protocol for HTTP transports"""
    async def send(self, request: APIRequest) -> APIResponse:
        """Perform one round trip and return the complete response"""
        ...

class AiohttpTransport:
    """
    Transport backed by aiohttp.

    A session is opened per request, so no connection outlives the call
    that created it.
    """

    async def send(self, request: APIRequest) -> APIResponse:
        try:
            async with aiohttp.ClientSession() as session:
                async with session.request(
                    request.method,
                    yarl.URL(request.url, encoded=True),
                    headers=request.headers,
                    data=request.body
                ) as response:
                    # undecodable bytes must not hide the status
                    data = await response.text(errors="replace")
                    return APIResponse(
                        status=response.status,
                        data=data,
                        headers=dict(response.headers)
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"{request.method} {request.url} failed: {e!r}")
            raise RequestError(f"Transport error: {e!r}", cause=e) from e

def encode_user_auth(user: Optional[Mapping[str, Any]]) -> Optional[str]:
    """
    Build the Authorization header value for a set of credentials.

    A token always wins over username/password. The token may be a plain
    string or a mapping exposing it as ``sha1``.

    Args:
        user: Credentials mapping, or None for an anonymous request

    Returns:
        Header value, or None when no credentials apply
    """
    if user is None:
        return None

    token = user.get("token")
    if token is not None:
        sha1 = token.get("sha1") if isinstance(token, Mapping) else token
        return f"token {sha1 if sha1 is not None else ''}"

    username = user.get("username")
    password = user.get("password")
    if username is not None and password is not None:
        encoded = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
        return f"Basic {encoded}"

    return None

class APIClient:
    """
    Performs requests against one API root.

    The base URL is parsed once at construction and never changes, so a
    single instance can serve concurrent calls.
    """

    def __init__(self, api_url: str, transport: Optional[Transport] = None):
        if not api_url:
            raise ValidationError("api_url is required")
        self.base_url = yarl.URL(api_url.rstrip('/'))
        if self.base_url.scheme not in ("http", "https") or not self.base_url.host:
            raise ValidationError(f"api_url must be an absolute http(s) URL: {api_url}")
        self.transport: Transport = transport or AiohttpTransport()

    @property
    def scheme(self) -> str:
        return self.base_url.scheme

    @property
    def host(self) -> str:
        return self.base_url.host

    @property
    def port(self) -> int:
        # yarl falls back to 443/80 when the URL carries no port
        return self.base_url.port

    @property
    def base_path(self) -> str:
        return self.base_url.path

    def resolve_url(self, partial_path: str) -> str:
        """Join the API root and a relative command with exactly one slash"""
        return f"{str(self.base_url).rstrip('/')}/{partial_path.lstrip('/')}"

    @staticmethod
    def select_method(
        body: Optional[Any],
        method: Optional[Union[str, RequestMethod]] = None
    ) -> str:
        if method is not None:
            if isinstance(method, RequestMethod):
                return method.value
            return method.upper()
        return RequestMethod.POST.value if body else RequestMethod.GET.value

    async def request(
        self,
        partial_path: str,
        user: Optional[Mapping[str, Any]] = None,
        body: Optional[Any] = None,
        method: Optional[Union[str, RequestMethod]] = None
    ) -> APIResponse:
        """
        Make an API request

        Args:
            partial_path: API command relative to the API root, may carry
                an encoded query string
            user: Credentials authenticating the request
            body: JSON-serializable payload, sent whenever it is not None
            method: HTTP method; defaults to POST with a body, GET without

        Returns:
            APIResponse with the status and the raw body. HTTP error
            statuses are returned, not raised.
        """
        if not partial_path:
            raise ValidationError("partial_path is required")

        headers = {"Content-Type": "application/json"}
        auth = encode_user_auth(user)
        if auth is not None:
            headers["Authorization"] = auth

        request = APIRequest(
            method=self.select_method(body, method),
            url=self.resolve_url(partial_path),
            headers=headers,
            body=json.dumps(body) if body is not None else None
        )

        logger.debug(f"{request.method} {request.url}")
        response = await self.transport.send(request)
        logger.debug(f"{request.method} {request.url} -> {response.status}")
        return response
