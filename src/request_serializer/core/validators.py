"""
Boundary validation utilities.

Structural checks applied at the library entry points: the request object,
the transform and the filter configuration values. Every check raises a
typed error instead of letting a malformed argument fail deep inside the
dispatch or filtering code.
"""

from collections.abc import Callable
from typing import Any

from ..exceptions import InvalidRequestError, InvalidSerializerError
from .constants import (
    ERROR_INVALID_REQUEST,
    ERROR_INVALID_SERIALIZER,
    ERROR_PARAM_EMPTY,
    ERROR_PARAM_TYPE_INVALID,
    ERROR_PARAMS_CONFLICT,
)


class ValidationError(ValueError):
    """Parameter validation error.

    Raised when configuration values fail validation checks.
    """

    pass


def validate_request(request: Any) -> None:
    """Validate that a value looks like a web framework request.

    The request must carry a non-None ``app`` attribute and a callable
    ``get`` member. Neither is used by the library; together they mark the
    value as a genuine request object.

    Args:
        request: Candidate request object

    Raises:
        InvalidRequestError: If the request shape check fails
    """
    if request is None or getattr(request, "app", None) is None:
        raise InvalidRequestError(ERROR_INVALID_REQUEST)

    if not callable(getattr(request, "get", None)):
        raise InvalidRequestError(ERROR_INVALID_REQUEST)


def resolve_transform(transform: Any) -> Callable[..., Any]:
    """Resolve the effective transform callable.

    An object exposing a callable ``serialize`` member resolves to that
    member, even if the object itself is callable. Otherwise the value must
    be callable.

    Args:
        transform: Callable or object with a ``serialize`` method

    Returns:
        Callable invoked as ``transform(request, item, options)``

    Raises:
        InvalidSerializerError: If no callable can be resolved
    """
    serialize = getattr(transform, "serialize", None)
    if callable(serialize):
        return serialize

    if callable(transform):
        return transform

    raise InvalidSerializerError(ERROR_INVALID_SERIALIZER)


def validate_param_name(param_name: str, value: str) -> None:
    """Validate a query parameter name or path separator.

    Args:
        param_name: Name of the configuration field (for error messages)
        value: Value to validate

    Raises:
        ValidationError: If the value is not a non-empty string
    """
    _validate_string_type(param_name, value)
    _validate_non_empty_string(param_name, value)


def validate_filter_config(only_param: str, except_param: str, separator: str) -> None:
    """Validate all filter configuration values.

    Args:
        only_param: Query parameter holding the allow-list
        except_param: Query parameter holding the deny-list
        separator: Property path separator

    Raises:
        ValidationError: If any value is invalid
    """
    validate_param_name("only_param", only_param)
    validate_param_name("except_param", except_param)
    validate_param_name("separator", separator)

    if only_param == except_param:
        raise ValidationError(ERROR_PARAMS_CONFLICT.format(value=only_param))


def _validate_string_type(param_name: str, value: str) -> None:
    """Validate that a parameter is a string type."""
    if not isinstance(value, str):
        raise ValidationError(ERROR_PARAM_TYPE_INVALID.format(param_name=param_name, type_name=type(value).__name__))


def _validate_non_empty_string(param_name: str, value: str) -> None:
    """Validate that a string is not empty or whitespace-only."""
    if not value or not value.strip():
        raise ValidationError(ERROR_PARAM_EMPTY.format(param_name=param_name))
