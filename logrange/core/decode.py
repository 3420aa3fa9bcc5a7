"""
Helpers for decoding JSON config documents onto typed fields.

Keys are matched case-insensitively and, as when a decoder assigns keys in
document order, the last matching non-null key wins. A missing key or a JSON
``null`` yields the zero value of the field's type. A value of the
wrong JSON type raises ``ValueError``.
"""

from typing import Any, Dict, Iterable, List, Optional

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
UINT64_MAX = 2 ** 64 - 1


def lookup(data: Dict[str, Any], key: str) -> Any:
    """Return the value of the last non-null key matching key, or None."""
    folded = key.lower()
    found = None
    for k, v in data.items():
        if v is not None and k.lower() == folded:
            found = v
    return found


def unknown_keys(data: Dict[str, Any], known: Iterable[str]) -> List[str]:
    """List keys of data that match none of the known field names."""
    folded = {k.lower() for k in known}
    return [k for k in data if k.lower() not in folded]


def get_str(data: Dict[str, Any], key: str) -> str:
    value = lookup(data, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key}: expected string, got {_json_type(value)}")
    return value


def get_int(
    data: Dict[str, Any],
    key: str,
    unsigned: bool = False,
    limit: Optional[int] = None,
) -> int:
    """
    Decode a 64-bit integer field.

    Values outside the signed (or, if unsigned, unsigned) 64-bit range are
    rejected, as are values whose magnitude exceeds limit when given.
    """
    value = lookup(data, key)
    if value is None:
        return 0
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key}: expected integer, got {_json_type(value)}")
    if unsigned and value < 0:
        raise ValueError(f"field {key}: expected unsigned integer, got {value}")
    low, high = (0, UINT64_MAX) if unsigned else (INT64_MIN, INT64_MAX)
    if limit is not None:
        low, high = max(low, -limit), min(high, limit)
    if not low <= value <= high:
        raise ValueError(f"field {key}: value {value} out of range [{low}, {high}]")
    return value


def get_bool(data: Dict[str, Any], key: str) -> bool:
    value = lookup(data, key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"field {key}: expected boolean, got {_json_type(value)}")
    return value


def get_object(data: Dict[str, Any], key: str) -> Optional[Dict[str, Any]]:
    value = lookup(data, key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"field {key}: expected object, got {_json_type(value)}")
    return value


def _json_type(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
