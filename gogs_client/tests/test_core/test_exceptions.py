import pytest
from gogs_client.core.exceptions import (
    GogsError,
    ConfigError,
    LoggerError,
    ValidationError
)
from gogs_client.utils.api.api_client import (
    APIError,
    APIResponse,
    RequestError,
    ResponseError
)

def test_base_exception():
    """Test GogsError base exception"""
    with pytest.raises(GogsError) as exc_info:
        raise GogsError("Base error message")
    assert str(exc_info.value) == "Base error message"
    assert exc_info.value.details == {}

def test_error_with_details():
    details = {"argument": "user", "field": "username"}
    with pytest.raises(ValidationError) as exc_info:
        raise ValidationError("user.username is required", details=details)
    assert exc_info.value.details == details
    assert exc_info.value.message == "user.username is required"

def test_response_error_carries_response():
    """Test remote errors keep the raw response for status branching"""
    response = APIResponse(status=401, data='{"message": "Unauthorized"}')
    error = ResponseError("Unexpected status 401", response)
    assert error.response is response
    assert error.status == 401
    assert error.details["data"] == '{"message": "Unauthorized"}'

def test_request_error_carries_cause():
    cause = ConnectionRefusedError("refused")
    error = RequestError("Transport error", cause=cause)
    assert error.cause is cause
    assert "refused" in error.details["cause"]

def test_error_inheritance():
    """Test proper exception inheritance"""
    for exception_class in [ConfigError, LoggerError, ValidationError, APIError]:
        exc = exception_class("Test")
        assert isinstance(exc, GogsError)
        assert isinstance(exc, Exception)

    assert issubclass(RequestError, APIError)
    assert issubclass(ResponseError, APIError)
    assert not issubclass(ValidationError, APIError)
