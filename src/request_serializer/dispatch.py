"""
Serialization entry points.

``serialize`` validates its arguments eagerly, then returns a coroutine that
runs the transform over one item or every item of a list, awaits the
results uniformly and filters each one with the ``only``/``except`` criteria
of the options and the request query.
"""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from .codecs import JsonCodec, normalize_for_json
from .config import FilterConfig
from .core.sync_async_bridge import invoke_transform, run_coroutine_sync
from .core.validators import resolve_transform, validate_request
from .filtering import FilterSpec, apply_filter_spec, resolve_filter_spec
from .protocols import Codec, SerializerObject, Transform

logger = logging.getLogger(__name__)


def _is_sequence(data: Any) -> bool:
    return isinstance(data, (list, tuple))


def _transform_name(transform: Callable[..., Any]) -> str:
    return getattr(transform, "__qualname__", None) or type(transform).__name__


async def _serialize_item(
    request: Any,
    item: Any,
    transform: Callable[..., Any],
    options: Any,
    spec: FilterSpec,
    separator: str,
    normalize: bool,
) -> Any:
    result = await invoke_transform(transform, request, item, options)
    result = apply_filter_spec(result, spec, separator)
    if normalize:
        result = normalize_for_json(result)
    return result


async def _run(
    request: Any,
    data: Any,
    transform: Callable[..., Any],
    options: Any,
    config: FilterConfig,
    normalize: bool,
) -> Any:
    spec = resolve_filter_spec(request, options, config)

    if not _is_sequence(data):
        logger.debug(f"Serializing single item with {_transform_name(transform)}")
        return await _serialize_item(request, data, transform, options, spec, config.separator, normalize)

    logger.debug(f"Serializing {len(data)} items with {_transform_name(transform)}")
    # gather() keeps results in input order and fails on the first exception
    results = await asyncio.gather(
        *(_serialize_item(request, item, transform, options, spec, config.separator, normalize) for item in data)
    )
    return list(results)


def serialize(
    request: Any,
    data: Any,
    transform: Transform | SerializerObject,
    options: Any = None,
    *,
    config: FilterConfig | None = None,
    normalize: bool = False,
) -> Coroutine[Any, Any, Any]:
    """Serialize one item or a list of items for an API response.

    Arguments are validated before anything is scheduled, so malformed
    input raises immediately instead of through the returned awaitable.

    Args:
        request: Web framework request (needs ``app``, a callable ``get``
            and a ``query`` mapping)
        data: Single item, or a list/tuple of items
        transform: Function ``(request, item, options)`` or object with such
            a ``serialize`` method; may return a value or an awaitable
        options: Passed verbatim to the transform; its ``only`` and
            ``except`` keys also select properties of the result
        config: Query parameter names and path separator (resolved from
            environment if None)
        normalize: Convert results to JSON-ready types after filtering

    Returns:
        Awaitable resolving to the filtered result, or to a new list of
        filtered results in input order

    Raises:
        InvalidRequestError: If request does not look like a request
        InvalidSerializerError: If transform cannot be called

    Example:
        ```python
        def user_serializer(request, user, options):
            return {"id": user.id, "name": user.name, "email": user.email}

        @app.get("/users")
        async def list_users(request):
            # GET /users?only=id&only=name
            return await serialize(request, users, user_serializer, {"except": "email"})
        ```
    """
    validate_request(request)
    effective_transform = resolve_transform(transform)
    config = config or FilterConfig.resolve()

    return _run(request, data, effective_transform, options, config, normalize)


def serialize_sync(
    request: Any,
    data: Any,
    transform: Transform | SerializerObject,
    options: Any = None,
    *,
    config: FilterConfig | None = None,
    normalize: bool = False,
) -> Any:
    """Blocking variant of ``serialize`` for synchronous handlers.

    Raises:
        InvalidRequestError: If request does not look like a request
        InvalidSerializerError: If transform cannot be called
    """
    coro = serialize(request, data, transform, options, config=config, normalize=normalize)
    return run_coroutine_sync(coro)


def render(
    request: Any,
    data: Any,
    transform: Transform | SerializerObject,
    options: Any = None,
    *,
    codec: Codec | None = None,
    config: FilterConfig | None = None,
) -> Coroutine[Any, Any, bytes]:
    """Serialize and encode a response body.

    Results are normalized to JSON-ready types before encoding.

    Args:
        request: Web framework request
        data: Single item, or a list/tuple of items
        transform: Serializer function or object
        options: Options passed to the transform
        codec: Body codec (JsonCodec if None); its ``content_type`` names
            the response media type
        config: Query parameter names and path separator

    Returns:
        Awaitable resolving to the encoded body

    Raises:
        InvalidRequestError: If request does not look like a request
        InvalidSerializerError: If transform cannot be called
    """
    pending = serialize(request, data, transform, options, config=config, normalize=True)
    return _encode(pending, codec or JsonCodec())


async def _encode(pending: Coroutine[Any, Any, Any], codec: Codec) -> bytes:
    return codec.encode(await pending)
