"""Global test configuration and fixtures."""
import json
import pytest
from typing import Any, Callable, List, Optional
from gogs_client.utils.api.api_client import APIClient, APIRequest, APIResponse
from gogs_client.gogs.gogs_api import GogsAPI

API_URL = "https://git.example.com/api/v1"

class FakeTransport:
    """Records requests and answers from a queue or a handler"""

    def __init__(self, handler: Optional[Callable[[APIRequest], APIResponse]] = None):
        self.handler = handler
        self.responses: List[APIResponse] = []
        self.requests: List[APIRequest] = []

    def queue(self, status: int, data: Any = "") -> None:
        if not isinstance(data, str):
            data = json.dumps(data)
        self.responses.append(APIResponse(status=status, data=data))

    async def send(self, request: APIRequest) -> APIResponse:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        return self.responses.pop(0)

    @property
    def last(self) -> APIRequest:
        return self.requests[-1]

@pytest.fixture
def transport():
    """Fixture for a recording transport double"""
    return FakeTransport()

@pytest.fixture
def api_client(transport):
    """Fixture for a requester bound to the fake transport"""
    return APIClient(API_URL, transport)

@pytest.fixture
def gogs(transport):
    """Fixture for an endpoint surface bound to the fake transport"""
    return GogsAPI(API_URL, transport)

@pytest.fixture
def admin_user():
    return {"username": "admin", "password": "secret"}

@pytest.fixture
def demo_user():
    return {"username": "demo", "email": "d@x.com", "password": "pw"}
