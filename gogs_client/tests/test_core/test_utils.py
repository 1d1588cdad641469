import pytest
from gogs_client.core.exceptions import ValidationError
from gogs_client.core.utils import is_blank, merge_dicts, optional_int, require, require_field

@pytest.mark.parametrize("value, expected", [
    (None, True),
    ("", True),
    ("   ", True),
    ("\t\n", True),
    ("demo", False),
    (" demo ", False),
])
def test_is_blank(value, expected):
    assert is_blank(value) is expected

def test_require():
    assert require({"a": 1}, "user") == {"a": 1}
    assert require(0, "uid") == 0
    with pytest.raises(ValidationError) as exc_info:
        require(None, "user")
    assert str(exc_info.value) == "user is required"

def test_require_field():
    """Test required fields inside mapping arguments"""
    assert require_field({"username": "demo"}, "username", "user") == "demo"
    assert require_field({"id": 0}, "id", "key") == 0

    with pytest.raises(ValidationError):
        require_field(None, "username", "user")
    with pytest.raises(ValidationError):
        require_field({}, "username", "user")
    with pytest.raises(ValidationError) as exc_info:
        require_field({"username": "  "}, "username", "user")
    assert exc_info.value.details == {"argument": "user", "field": "username"}

def test_merge_dicts():
    """Test recursive dictionary merging"""
    dict1 = {"a": 1, "b": {"c": 2, "d": 3}}
    dict2 = {"b": {"c": 4, "e": 5}, "f": 6}

    result = merge_dicts(dict1, dict2)

    assert result == {"a": 1, "b": {"c": 4, "d": 3, "e": 5}, "f": 6}
    assert dict1 == {"a": 1, "b": {"c": 2, "d": 3}}

def test_optional_int():
    """Test integer arguments, rejecting booleans"""
    assert optional_int(None, "limit") is None
    assert optional_int(0, "uid") == 0
    assert optional_int(25, "limit") == 25

    for value in [True, False, "5", 1.5]:
        with pytest.raises(ValidationError) as exc_info:
            optional_int(value, "limit")
        assert exc_info.value.details["argument"] == "limit"
