from typing import Any, Dict, Mapping, Optional
from .exceptions import ValidationError

def is_blank(value: Optional[str]) -> bool:
    """Check if a string value is None, empty or whitespace only."""
    return value is None or not str(value).strip()

def require(value: Any, name: str) -> Any:
    """Ensure a required argument was supplied."""
    if value is None:
        raise ValidationError(f"{name} is required")
    return value

def require_field(obj: Optional[Mapping[str, Any]], field: str, name: str) -> Any:
    """Fetch a required field from a mapping argument."""
    require(obj, name)
    value = obj.get(field)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(
            f"{name}.{field} is required",
            details={"argument": name, "field": field}
        )
    return value

def optional_int(value: Any, name: str) -> Optional[int]:
    """Accept None or a plain integer; booleans are rejected."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{name} must be an integer",
            details={"argument": name, "value": repr(value)}
        )
    return value

def merge_dicts(dict1: Dict[str, Any], dict2: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries."""
    result = dict1.copy()

    for key, value in dict2.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result
