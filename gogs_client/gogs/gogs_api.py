# gogs_client/gogs/gogs_api.py
# Created: 2026-03-10 19:02:45
# Author: gogs-client

from typing import Dict, Any, Optional, Mapping, Callable, List
from dataclasses import dataclass
from urllib.parse import quote
import logging
import yarl
from gogs_client.core.config import Config
from gogs_client.core.exceptions import ValidationError
from gogs_client.core.logger import Logger
from gogs_client.core.utils import is_blank, optional_int, require, require_field
from gogs_client.utils.api.api_client import (
    APIClient,
    APIResponse,
    RequestMethod,
    Transport
)
from gogs_client.utils.api.response_handler import (
    expect_created,
    expect_no_content,
    expect_ok,
    expect_standard
)

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 10

Credentials = Mapping[str, Any]

@dataclass(frozen=True)
class Endpoint:
    """Binding of an API command to its verb, path and success rule"""
    method: RequestMethod
    path: str
    classifier: Callable[[APIResponse], Any]

    def format_path(self, **params: Any) -> str:
        """Fill the path template, encoding each value as a path segment"""
        return self.path.format(**{
            key: quote(str(value), safe="") for key, value in params.items()
        })

ENDPOINTS: Dict[str, Endpoint] = {
    "create_user": Endpoint(RequestMethod.POST, "admin/users", expect_created),
    "edit_user": Endpoint(RequestMethod.PATCH, "admin/users/{username}", expect_standard),
    "delete_user": Endpoint(RequestMethod.DELETE, "admin/users/{username}", expect_no_content),
    "search_users": Endpoint(RequestMethod.GET, "users/search", expect_ok),
    "get_user": Endpoint(RequestMethod.GET, "users/{username}", expect_standard),
    "search_repos": Endpoint(RequestMethod.GET, "repos/search", expect_ok),
    "create_repo": Endpoint(RequestMethod.POST, "user/repos", expect_created),
    "get_repo": Endpoint(RequestMethod.GET, "repos/{owner}/{name}", expect_standard),
    "list_repos": Endpoint(RequestMethod.GET, "user/repos", expect_standard),
    "delete_repo": Endpoint(RequestMethod.DELETE, "repos/{owner}/{name}", expect_no_content),
    "create_token": Endpoint(RequestMethod.POST, "users/{username}/tokens", expect_created),
    "list_tokens": Endpoint(RequestMethod.GET, "users/{username}/tokens", expect_standard),
    "create_public_key": Endpoint(RequestMethod.POST, "user/keys", expect_created),
    "list_public_keys": Endpoint(RequestMethod.GET, "users/{username}/keys", expect_standard),
    "get_public_key": Endpoint(RequestMethod.GET, "user/keys/{id}", expect_standard),
    "delete_public_key": Endpoint(RequestMethod.DELETE, "user/keys/{id}", expect_no_content),
}

class GogsAPI:
    """
    Asynchronous client for the Gogs REST API.

    Every method validates its arguments locally, then performs a single
    request and classifies the response:
    - decoded JSON for 200/201 answers
    - the ``data`` field of search envelopes
    - True for 204 deletions

    Failures raise ValidationError (bad arguments, no request made),
    ResponseError (unexpected status, ``.response`` holds the raw answer)
    or RequestError (transport failure).
    """

    def __init__(
        self,
        api_url: str,
        transport: Optional[Transport] = None,
        search_limit: int = DEFAULT_SEARCH_LIMIT
    ):
        self.client = APIClient(api_url, transport)
        self.search_limit = search_limit

    @classmethod
    def from_config(cls, config: Config, transport: Optional[Transport] = None) -> "GogsAPI":
        """Build an API instance and configure logging from a Config"""
        Logger(config)
        return cls(
            config.get("api.url"),
            transport=transport,
            search_limit=config.get("api.search_limit", DEFAULT_SEARCH_LIMIT)
        )

    async def _call(
        self,
        endpoint_name: str,
        auth: Optional[Credentials] = None,
        body: Optional[Any] = None,
        query: Optional[Dict[str, Any]] = None,
        **params: Any
    ) -> Any:
        endpoint = ENDPOINTS[endpoint_name]
        path = endpoint.format_path(**params)
        if query is not None:
            path = f"{path}?{yarl.URL.build(query=query).raw_query_string}"
        response = await self.client.request(path, auth, body, endpoint.method)
        return endpoint.classifier(response)

    # Users

    async def create_user(
        self,
        user: Credentials,
        auth_user: Credentials,
        notify: bool = False
    ) -> Dict[str, Any]:
        """
        Create a user; requires admin credentials

        Args:
            user: Mapping with username, email and password
            auth_user: Admin performing the request
            notify: Send a notification email to the new user

        Returns:
            The created user
        """
        require(user, "user")
        require(auth_user, "auth_user")
        return await self._call("create_user", auth_user, body={
            "username": require_field(user, "username", "user"),
            "email": user.get("email", ""),
            "password": user.get("password", ""),
            "send_notify": bool(notify)
        })

    async def edit_user(self, user: Credentials, auth_user: Credentials) -> Dict[str, Any]:
        """Update a user; the username itself cannot be changed"""
        require(auth_user, "auth_user")
        username = require_field(user, "username", "user")
        return await self._call("edit_user", auth_user, body=dict(user), username=username)

    async def delete_user(self, user: Credentials, auth_user: Credentials) -> bool:
        """
        Delete a user; requires admin credentials

        Users cannot delete themselves: the call fails before any request
        when both usernames match.
        """
        username = require_field(user, "username", "user")
        require(auth_user, "auth_user")
        if username == auth_user.get("username"):
            raise ValidationError(
                "A user cannot delete itself",
                details={"username": username}
            )
        return await self._call("delete_user", auth_user, username=username)

    async def search_users(
        self,
        query: Optional[str],
        limit: Optional[int] = None,
        auth_user: Optional[Credentials] = None
    ) -> List[Dict[str, Any]]:
        """
        Search users by name

        Emails in the results are empty unless auth_user is given. A blank
        query returns an empty list without contacting the server.
        """
        if is_blank(query):
            return []
        return await self._call("search_users", auth_user, query={
            "q": query,
            "limit": optional_int(limit, "limit") or self.search_limit
        })

    async def get_user(
        self,
        user: Credentials,
        auth_user: Optional[Credentials] = None
    ) -> Dict[str, Any]:
        """Fetch a user; the email field is empty for anonymous requests"""
        username = require_field(user, "username", "user")
        return await self._call("get_user", auth_user, username=username)

    # Repositories

    async def search_repos(
        self,
        query: Optional[str],
        uid: Optional[int] = None,
        limit: Optional[int] = None,
        auth_user: Optional[Credentials] = None
    ) -> List[Dict[str, Any]]:
        """
        Search repositories

        Args:
            query: Search keyword; blank returns [] without a request
            uid: Only search this user's repositories, 0 searches all
            limit: Maximum number of results
            auth_user: Credentials allowing private repositories to match
        """
        if is_blank(query):
            return []
        return await self._call("search_repos", auth_user, query={
            "q": query,
            "uid": optional_int(uid, "uid") or 0,
            "limit": optional_int(limit, "limit") or self.search_limit
        })

    async def create_repo(self, repo: Mapping[str, Any], user: Credentials) -> Dict[str, Any]:
        """Create a repository owned by the authenticated user"""
        require(user, "user")
        return await self._call("create_repo", user, body={
            "name": require_field(repo, "name", "repo"),
            "description": repo.get("description", ""),
            "private": bool(repo.get("private", False))
        })

    async def get_repo(
        self,
        repo: Mapping[str, Any],
        user: Optional[Credentials] = None
    ) -> Dict[str, Any]:
        """Fetch a repository by its ``owner/name`` full name"""
        full_name = require_field(repo, "full_name", "repo")
        parts = str(full_name).split("/")
        if len(parts) != 2 or not all(parts):
            raise ValidationError(f"repo.full_name must be owner/name: {full_name}")
        owner, name = parts
        return await self._call("get_repo", user, owner=owner, name=name)

    async def list_repos(self, user: Credentials) -> List[Dict[str, Any]]:
        require(user, "user")
        return await self._call("list_repos", user)

    async def delete_repo(self, repo: Mapping[str, Any], user: Credentials) -> bool:
        """Delete one of the authenticated user's repositories"""
        name = require_field(repo, "name", "repo")
        owner = require_field(user, "username", "user")
        return await self._call("delete_repo", user, owner=owner, name=name)

    # Access tokens

    async def create_token(self, token: Mapping[str, Any], user: Credentials) -> Dict[str, Any]:
        """
        Create an access token for a user

        The server expects username/password credentials here. The returned
        mapping carries the token under ``sha1`` and can itself be used as
        the ``token`` of a credentials mapping.
        """
        username = require_field(user, "username", "user")
        return await self._call("create_token", user, body={
            "name": require_field(token, "name", "token")
        }, username=username)

    async def list_tokens(self, user: Credentials) -> List[Dict[str, Any]]:
        username = require_field(user, "username", "user")
        return await self._call("list_tokens", user, username=username)

    # Public keys

    async def create_public_key(self, key: Mapping[str, Any], user: Credentials) -> Dict[str, Any]:
        require(user, "user")
        return await self._call("create_public_key", user, body={
            "title": require_field(key, "title", "key"),
            "key": require_field(key, "key", "key")
        })

    async def list_public_keys(self, user: Credentials) -> List[Dict[str, Any]]:
        username = require_field(user, "username", "user")
        return await self._call("list_public_keys", user, username=username)

    async def get_public_key(self, key: Mapping[str, Any], user: Credentials) -> Dict[str, Any]:
        require(user, "user")
        key_id = require_field(key, "id", "key")
        return await self._call("get_public_key", user, id=key_id)

    async def delete_public_key(self, key: Mapping[str, Any], user: Credentials) -> bool:
        require(user, "user")
        key_id = require_field(key, "id", "key")
        return await self._call("delete_public_key", user, id=key_id)
