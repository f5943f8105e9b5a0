"""
Type normalization for JSON-ready output.

Converts Python types that the standard json module cannot encode into
plain equivalents, recursing through nested containers. Dict key order is
preserved so filtered records keep the order the transform produced.

Supported type conversions:
- datetime, date, time -> ISO 8601 string
- Decimal, UUID -> string
- Enum -> its value
- bytes, bytearray -> base64 string
- set, frozenset -> sorted list
- tuple -> list
- dataclass instances and objects with __dict__ -> dict
"""

import base64
import dataclasses
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from ..exceptions import EncodingError

_MISSING = object()


def _normalize_scalar(obj: Any) -> Any:
    """Normalize non-container values.

    Args:
        obj: Python object to check and normalize

    Returns:
        Normalized value or _MISSING if obj is not a supported scalar
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    # datetime is a subclass of date, both share isoformat()
    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()
    if isinstance(obj, (Decimal, UUID)):
        return str(obj)
    if isinstance(obj, Enum):
        return normalize_for_json(obj.value)
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    return _MISSING


def _normalize_collection(obj: Any) -> Any:
    """Normalize container values recursively.

    Args:
        obj: Python object to check and normalize

    Returns:
        Normalized container or _MISSING if obj is not a supported container
    """
    if isinstance(obj, Mapping):
        return {str(key): normalize_for_json(value) for key, value in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [normalize_for_json(item) for item in obj]

    if isinstance(obj, (set, frozenset)):
        items = [normalize_for_json(item) for item in obj]
        try:
            # Sort for deterministic order
            return sorted(items)
        except TypeError:
            return items

    return _MISSING


def _normalize_object(obj: Any) -> Any:
    """Normalize dataclasses and plain objects through their fields."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {field.name: normalize_for_json(getattr(obj, field.name)) for field in dataclasses.fields(obj)}

    if hasattr(obj, "__dict__"):
        return normalize_for_json(vars(obj))

    return _MISSING


def normalize_for_json(obj: Any) -> Any:
    """Normalize Python objects to JSON-ready types.

    Args:
        obj: Python object to normalize

    Returns:
        JSON-ready equivalent of the object

    Raises:
        EncodingError: If the object contains unsupported types
    """
    for strategy in (_normalize_scalar, _normalize_collection, _normalize_object):
        result = strategy(obj)
        if result is not _MISSING:
            return result

    raise EncodingError(
        f"Object of type '{type(obj).__name__}' is not JSON serializable. "
        f"Return plain data from the serializer function or a supported type."
    )
